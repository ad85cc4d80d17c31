"""Tests for the Jira Projects mixin."""

import pytest

from jiractl.exceptions import DecodeError, RemoteError, ValidationError
from jiractl.jira import JiraFetcher
from tests.fixtures.jira_mocks import make_http_error


def test_get_issue_types(jira_fetcher: JiraFetcher, mock_atlassian_jira):
    issue_types = jira_fetcher.get_issue_types("ABC")

    mock_atlassian_jira.project.assert_called_once_with("ABC")
    assert [issue_type.name for issue_type in issue_types] == [
        "Bug",
        "Task",
        "Epic",
        "Sub-task",
    ]
    assert issue_types[3].subtask is True


def test_get_issue_types_skips_nameless(jira_fetcher: JiraFetcher, mock_atlassian_jira):
    mock_atlassian_jira.project.return_value = {
        "key": "ABC",
        "issueTypes": [{"id": "1"}, {"id": "2", "name": "Story"}, "junk"],
    }

    assert [t.name for t in jira_fetcher.get_issue_types("ABC")] == ["Story"]


def test_get_issue_types_unknown_project(jira_fetcher: JiraFetcher, mock_atlassian_jira):
    mock_atlassian_jira.project.side_effect = make_http_error(
        404, '{"errorMessages":["No project could be found with key \'NOPE\'."]}'
    )

    with pytest.raises(RemoteError) as exc_info:
        jira_fetcher.get_issue_types("NOPE")

    assert exc_info.value.status_code == 404
    assert "NOPE" in exc_info.value.detail


@pytest.mark.parametrize("response", [None, {"issueTypes": "Bug"}])
def test_get_issue_types_malformed(jira_fetcher: JiraFetcher, mock_atlassian_jira, response):
    mock_atlassian_jira.project.return_value = response

    with pytest.raises(DecodeError):
        jira_fetcher.get_issue_types("ABC")


def test_get_issue_types_requires_key(jira_fetcher: JiraFetcher, mock_atlassian_jira):
    with pytest.raises(ValidationError):
        jira_fetcher.get_issue_types("")

    mock_atlassian_jira.project.assert_not_called()
