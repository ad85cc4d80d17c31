"""Tests for the Jira config module."""

import pytest

from jiractl.config import Settings
from jiractl.credentials import Credentials
from jiractl.jira.config import JiraConfig


def test_from_settings():
    settings = Settings(server="https://test.atlassian.net/", project="ABC", ssl_verify=False)
    credentials = Credentials(username="jdoe@example.com", token="secret")

    config = JiraConfig.from_settings(settings, credentials)

    assert config.url == "https://test.atlassian.net"
    assert config.username == "jdoe@example.com"
    assert config.api_token == "secret"
    assert config.ssl_verify is False


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://test.atlassian.net", True),
        ("https://company.jira.com", True),
        ("https://jira.example.com", False),
        ("http://localhost:8080", False),
        ("http://192.168.1.10", False),
    ],
)
def test_is_cloud(url, expected):
    assert JiraConfig(url=url).is_cloud is expected


def test_missing_fields():
    assert JiraConfig(url="", username=None, api_token="").missing_fields() == [
        "server URL",
        "username",
        "API token",
    ]
    assert JiraConfig(url="https://x.atlassian.net", username="a", api_token="b").missing_fields() == []
