"""Tests for keyring-backed credential storage."""

from unittest.mock import patch

import pytest
from keyring.errors import KeyringError, PasswordDeleteError

from jiractl.credentials import CredentialStore, Credentials
from jiractl.exceptions import ConfigurationError


@pytest.fixture
def mock_keyring():
    with patch("jiractl.credentials.keyring") as mock:
        stored = {}
        mock.get_password.side_effect = lambda service, key: stored.get((service, key))
        mock.set_password.side_effect = lambda service, key, value: stored.__setitem__(
            (service, key), value
        )
        mock.stored = stored
        yield mock


@pytest.fixture
def store():
    return CredentialStore()


class TestCredentials:
    def test_values_are_trimmed(self):
        credentials = Credentials(username=" jdoe@example.com ", token="\ttoken\n")

        assert credentials.username == "jdoe@example.com"
        assert credentials.token == "token"
        assert credentials.is_configured

    @pytest.mark.parametrize(
        "username,token,configured,empty",
        [
            ("", "", False, True),
            ("user", "", False, False),
            ("", "token", False, False),
            ("  ", "  ", False, True),
            ("user", "token", True, False),
        ],
    )
    def test_flags(self, username, token, configured, empty):
        credentials = Credentials(username=username, token=token)

        assert credentials.is_configured is configured
        assert credentials.is_empty is empty


class TestCredentialStore:
    def test_nothing_stored(self, store, mock_keyring):
        assert store.get_credentials() == Credentials()
        assert store.has_credentials() is False

    def test_set_and_get(self, store, mock_keyring):
        store.set_credentials(Credentials(username="jdoe", token="secret"))

        assert mock_keyring.stored == {
            ("jiractl", "username"): "jdoe",
            ("jiractl", "token"): "secret",
        }
        assert store.get_credentials() == Credentials(username="jdoe", token="secret")
        assert store.has_credentials() is True

    def test_set_requires_both(self, store, mock_keyring):
        with pytest.raises(ConfigurationError):
            store.set_credentials(Credentials(username="jdoe"))

        mock_keyring.set_password.assert_not_called()

    def test_env_takes_precedence(self, store, mock_keyring, monkeypatch):
        mock_keyring.stored[("jiractl", "username")] = "stored-user"
        mock_keyring.stored[("jiractl", "token")] = "stored-token"
        monkeypatch.setenv("JIRA_API_TOKEN", "env-token")

        credentials = store.get_credentials()

        assert credentials == Credentials(username="stored-user", token="env-token")

    def test_env_pair_skips_keyring(self, store, mock_keyring, monkeypatch):
        monkeypatch.setenv("JIRA_USERNAME", "env-user")
        monkeypatch.setenv("JIRA_API_TOKEN", "env-token")

        assert store.get_credentials() == Credentials(username="env-user", token="env-token")
        mock_keyring.get_password.assert_not_called()

    def test_backend_failure_is_not_missing(self, store, mock_keyring):
        mock_keyring.get_password.side_effect = KeyringError("locked")

        with pytest.raises(ConfigurationError, match="system keyring"):
            store.get_credentials()

    def test_clear(self, store, mock_keyring):
        store.clear()

        assert [c.args for c in mock_keyring.delete_password.call_args_list] == [
            ("jiractl", "username"),
            ("jiractl", "token"),
        ]

    def test_clear_ignores_missing_entries(self, store, mock_keyring):
        mock_keyring.delete_password.side_effect = PasswordDeleteError("not found")

        store.clear()

        assert mock_keyring.delete_password.call_count == 2
