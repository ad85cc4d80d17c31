"""Test fixtures for Jira unit tests."""

from unittest.mock import MagicMock, patch

import pytest

from jiractl.config import IssueDefaults
from jiractl.jira import JiraFetcher
from jiractl.jira.config import JiraConfig
from tests.fixtures.jira_mocks import (
    MOCK_ISSUE_RESPONSE,
    MOCK_PROJECT_RESPONSE,
    MOCK_SEARCH_RESPONSE,
)


@pytest.fixture
def mock_config():
    """Create a JiraConfig for a Cloud instance."""
    return JiraConfig(
        url="https://test.atlassian.net",
        username="test_username",
        api_token="test_token",
    )


@pytest.fixture
def issue_defaults():
    """No issue defaults configured."""
    return IssueDefaults()


@pytest.fixture
def mock_atlassian_jira():
    """Mock the Atlassian Jira client."""
    mock_jira = MagicMock()

    mock_jira.myself.return_value = {
        "accountId": "test-account-id",
        "displayName": "Test User",
    }
    mock_jira.get_issue.return_value = MOCK_ISSUE_RESPONSE
    mock_jira.create_issue.return_value = {
        "id": "10010",
        "key": "ABC-200",
        "self": "https://test.atlassian.net/rest/api/2/issue/10010",
    }
    mock_jira.project.return_value = MOCK_PROJECT_RESPONSE
    mock_jira.get.return_value = MOCK_SEARCH_RESPONSE

    yield mock_jira


@pytest.fixture
def jira_fetcher(mock_config, issue_defaults, mock_atlassian_jira):
    """Create a JiraFetcher instance with mocked dependencies."""
    with patch("jiractl.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira
        yield JiraFetcher(config=mock_config, issue_defaults=issue_defaults)
