"""Jira credentials and their storage in the system keyring."""

import logging
import os
from dataclasses import dataclass

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from .exceptions import ConfigurationError

logger = logging.getLogger("jiractl")

KEYRING_SERVICE_NAME = "jiractl"
USERNAME_KEY = "username"
TOKEN_KEY = "token"


@dataclass(frozen=True)
class Credentials:
    """A username (email on Cloud) and API token pair."""

    username: str = ""
    token: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "username", (self.username or "").strip())
        object.__setattr__(self, "token", (self.token or "").strip())

    @property
    def is_configured(self) -> bool:
        return bool(self.username and self.token)

    @property
    def is_empty(self) -> bool:
        return not self.username and not self.token


class CredentialStore:
    """Reads and writes credentials in the system keyring.

    JIRA_USERNAME and JIRA_API_TOKEN take precedence over stored values when
    set. A missing keyring entry reads as an empty string.
    """

    def __init__(self, service_name: str = KEYRING_SERVICE_NAME) -> None:
        self.service_name = service_name

    def _get(self, key: str) -> str:
        try:
            value = keyring.get_password(self.service_name, key)
        except KeyringError as e:
            error_msg = f"Failed to read {key} from system keyring: {e}"
            raise ConfigurationError(error_msg) from e
        return (value or "").strip()

    def get_stored_credentials(self) -> Credentials:
        """Credentials from the keyring only."""
        return Credentials(username=self._get(USERNAME_KEY), token=self._get(TOKEN_KEY))

    def get_credentials(self) -> Credentials:
        """Credentials from the environment, falling back to the keyring."""
        env_username = os.getenv("JIRA_USERNAME", "").strip()
        env_token = os.getenv("JIRA_API_TOKEN", "").strip()
        if env_username and env_token:
            logger.debug("Using credentials from JIRA_USERNAME and JIRA_API_TOKEN")
            return Credentials(username=env_username, token=env_token)

        stored = self.get_stored_credentials()
        return Credentials(
            username=env_username or stored.username,
            token=env_token or stored.token,
        )

    def has_credentials(self) -> bool:
        return self.get_credentials().is_configured

    def set_credentials(self, credentials: Credentials) -> None:
        """Store both values in the keyring.

        Raises:
            ConfigurationError: If either value is empty or the keyring fails
        """
        if not credentials.is_configured:
            raise ConfigurationError("Both username and API token are required")

        try:
            keyring.set_password(self.service_name, USERNAME_KEY, credentials.username)
            keyring.set_password(self.service_name, TOKEN_KEY, credentials.token)
        except KeyringError as e:
            error_msg = f"Failed to save credentials to system keyring: {e}"
            raise ConfigurationError(error_msg) from e
        logger.info(f"Saved credentials for {credentials.username} to system keyring")

    def clear(self) -> None:
        """Remove both values from the keyring; absent entries are ignored."""
        for key in (USERNAME_KEY, TOKEN_KEY):
            try:
                keyring.delete_password(self.service_name, key)
            except PasswordDeleteError:
                logger.debug(f"No {key} stored in keyring")
            except KeyringError as e:
                error_msg = f"Failed to delete {key} from system keyring: {e}"
                raise ConfigurationError(error_msg) from e
