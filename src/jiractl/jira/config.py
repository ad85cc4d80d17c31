"""Configuration module for Jira API interactions."""

from dataclasses import dataclass

from ..config import Settings
from ..credentials import Credentials
from ..utils.urls import is_atlassian_cloud_url, normalize_server_url


@dataclass
class JiraConfig:
    """Jira connection configuration.

    Authentication is always HTTP Basic: the username (an email on Cloud)
    and an API token used as the password.
    """

    url: str  # Base URL for Jira, without trailing slash
    username: str | None = None  # Email or username
    api_token: str | None = None  # API token
    ssl_verify: bool = True  # Whether to verify SSL certificates

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
        """
        return is_atlassian_cloud_url(self.url)

    @classmethod
    def from_settings(cls, settings: Settings, credentials: Credentials) -> "JiraConfig":
        """Combine the configured server with a credential pair."""
        return cls(
            url=normalize_server_url(settings.server),
            username=credentials.username,
            api_token=credentials.token,
            ssl_verify=settings.ssl_verify,
        )

    def missing_fields(self) -> list[str]:
        """Names of the required values that are empty."""
        missing = []
        if not self.url:
            missing.append("server URL")
        if not (self.username and self.username.strip()):
            missing.append("username")
        if not (self.api_token and self.api_token.strip()):
            missing.append("API token")
        return missing
