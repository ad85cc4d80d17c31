"""Tests for loading jiractl settings."""

import pytest

from jiractl.config import IssueDefaults, SavedQuery, Settings, default_config_path
from jiractl.exceptions import ConfigurationError

SAMPLE_CONFIG = """
server = "https://example.atlassian.net/"
project = "abc"

[issue_defaults]
assignee = "jdoe"
epic_link = "ABC-1"
issue_type = "Task"
labels = ["backend", "backend", " api "]

[[queries]]
name = "mine"
jql = "project = ${project} AND assignee = currentUser()"
limit = 20

[[queries]]
name = "recent"
jql = "project = ${project} ORDER BY created DESC"

[[queries]]
name = "mine"
jql = "duplicate"
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "jiractl.toml"
    path.write_text(SAMPLE_CONFIG)
    return path


class TestLoad:
    def test_load_file(self, config_file):
        settings = Settings.load(config_file)

        assert settings.server == "https://example.atlassian.net"
        assert settings.project == "ABC"
        assert settings.issue_defaults == IssueDefaults(
            assignee="jdoe",
            epic_link="ABC-1",
            issue_type="Task",
            labels=("backend", "api"),
        )
        assert settings.ssl_verify is True

    def test_duplicate_queries_keep_first(self, config_file):
        settings = Settings.load(config_file)

        assert settings.query_names() == ["mine", "recent"]
        assert settings.get_query("mine") == SavedQuery(
            name="mine",
            jql="project = ${project} AND assignee = currentUser()",
            limit=20,
        )
        assert settings.get_query("recent").limit == 0
        assert settings.get_query("missing") is None

    def test_missing_file_is_empty(self, tmp_path):
        settings = Settings.load(tmp_path / "nope.toml")

        assert settings == Settings()

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text('server = "unterminated\n')

        with pytest.raises(ConfigurationError, match="Failed to parse config file"):
            Settings.load(path)

    def test_env_config_path(self, config_file, monkeypatch):
        monkeypatch.setenv("JIRACTL_CONFIG", str(config_file))

        assert default_config_path() == config_file
        assert Settings.load().project == "ABC"

    def test_env_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("JIRA_URL", "https://jira.example.com/")
        monkeypatch.setenv("JIRA_PROJECT", "xyz")
        monkeypatch.setenv("JIRA_SSL_VERIFY", "false")

        settings = Settings.load(config_file)

        assert settings.server == "https://jira.example.com"
        assert settings.project == "XYZ"
        assert settings.ssl_verify is False
        assert settings.query_names() == ["mine", "recent"]


class TestFromDict:
    def test_odd_values_are_tolerated(self):
        settings = Settings.from_dict(
            {
                "server": None,
                "issue_defaults": "not a table",
                "queries": [
                    {"jql": "no name"},
                    "junk",
                    {"name": "bad-limit", "jql": "x", "limit": "many"},
                    {"name": "negative", "jql": "x", "limit": -3},
                ],
            }
        )

        assert settings.server == ""
        assert settings.issue_defaults == IssueDefaults()
        assert [(q.name, q.limit) for q in settings.queries] == [
            ("bad-limit", 0),
            ("negative", 0),
        ]

    def test_comma_separated_labels(self):
        defaults = IssueDefaults.from_dict({"labels": "a, b,,c"})

        assert defaults.labels == ("a", "b", "c")


class TestRequireProject:
    def test_configured(self):
        Settings(server="https://example.atlassian.net", project="ABC").require_project()

    @pytest.mark.parametrize(
        "settings,missing",
        [
            (Settings(project="ABC"), "server"),
            (Settings(server="https://example.atlassian.net"), "project"),
            (Settings(), "server and project"),
        ],
    )
    def test_missing(self, settings, missing):
        with pytest.raises(ConfigurationError) as exc_info:
            settings.require_project()

        assert str(exc_info.value).startswith(f"Not configured: missing {missing};")
        assert ".jiractl.toml" in str(exc_info.value)


@pytest.mark.parametrize(
    "value,expected",
    [(False, False), ("false", False), ("No", False), ("0", False), (True, True), ("true", True)],
)
def test_ssl_verify_from_file(value, expected):
    assert Settings.from_dict({"ssl_verify": value}).ssl_verify is expected


def test_ssl_verify_defaults_to_true():
    assert Settings.from_dict({}).ssl_verify is True


class TestSave:
    def test_save_and_reload(self, config_file, tmp_path):
        settings = Settings.read_file(config_file)
        target = tmp_path / "nested" / "saved.toml"

        assert settings.save(target) == target
        assert Settings.read_file(target) == settings

    def test_save_minimal(self, tmp_path):
        target = tmp_path / "jiractl.toml"

        Settings(server="https://example.atlassian.net", project="ABC").save(target)

        assert target.read_text() == (
            'server = "https://example.atlassian.net"\nproject = "ABC"\n'
        )

    def test_save_writes_ssl_verify_only_when_disabled(self, tmp_path):
        target = tmp_path / "jiractl.toml"

        Settings(server="https://jira.example.com", project="ABC", ssl_verify=False).save(target)

        assert Settings.read_file(target).ssl_verify is False
        assert "ssl_verify = false" in target.read_text()

    def test_save_to_directory_fails(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Failed to write config file"):
            Settings().save(tmp_path)

    def test_read_file_ignores_environment(self, config_file, monkeypatch):
        monkeypatch.setenv("JIRA_PROJECT", "XYZ")

        assert Settings.read_file(config_file).project == "ABC"
        assert Settings.load(config_file).project == "XYZ"
