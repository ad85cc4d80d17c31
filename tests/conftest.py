"""
Root pytest configuration file for jiractl tests.
"""

import pytest

JIRACTL_ENV_VARS = (
    "JIRA_URL",
    "JIRA_PROJECT",
    "JIRA_USERNAME",
    "JIRA_API_TOKEN",
    "JIRA_SSL_VERIFY",
    "JIRACTL_CONFIG",
    "JIRACTL_VERBOSE",
)


@pytest.fixture(autouse=True)
def clean_jiractl_env(monkeypatch):
    """Keep the developer's own Jira settings out of the tests."""
    for name in JIRACTL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
