"""Base client module for Jira API interactions."""

import logging
from typing import NoReturn

from atlassian import Jira
from requests.exceptions import HTTPError

from ..config import IssueDefaults
from ..exceptions import ConfigurationError, RemoteError
from ..utils.logging import log_config_param
from ..utils.urls import browse_url
from .config import JiraConfig

logger = logging.getLogger("jiractl.jira")


class JiraClient:
    """Base client for Jira API interactions.

    Holds one authenticated ``atlassian.Jira`` session and the issue defaults
    applied at creation time. Callers only see the operations exposed by the
    mixins, never the session itself.
    """

    config: JiraConfig
    issue_defaults: IssueDefaults

    def __init__(
        self, config: JiraConfig, issue_defaults: IssueDefaults | None = None
    ) -> None:
        """Initialize the Jira client.

        Args:
            config: Connection configuration
            issue_defaults: Defaults applied when creating issues

        Raises:
            ConfigurationError: If the server URL, username or API token is missing
        """
        missing = config.missing_fields()
        if missing:
            error_msg = (
                f"Missing {', '.join(missing)}; "
                "run 'jiractl configure' or 'jiractl auth create'"
            )
            raise ConfigurationError(error_msg)

        self.config = config
        self.issue_defaults = issue_defaults or IssueDefaults()

        log_config_param(logger, "URL", config.url)
        log_config_param(logger, "username", config.username)
        log_config_param(logger, "API token", config.api_token, sensitive=True)

        self.jira = Jira(
            url=config.url,
            username=config.username.strip(),
            password=config.api_token.strip(),
            cloud=config.is_cloud,
            verify_ssl=config.ssl_verify,
        )

    def browse_url(self, issue_key: str) -> str:
        """Return the web URL of an issue on this server."""
        return browse_url(self.config.url, issue_key)

    def _raise_remote_error(
        self,
        error: Exception,
        action: str,
        not_found_error: type[RemoteError] = RemoteError,
    ) -> NoReturn:
        """Translate a transport exception into a RemoteError.

        The response body is preferred as the error detail; the status code
        and transport error are used when the body is empty.

        Raises:
            RemoteError: Always; ``not_found_error`` for a 404 response
        """
        response = getattr(error, "response", None)
        if isinstance(error, HTTPError) and response is not None:
            status_code = response.status_code
            body = response.text or ""
            detail = body if body.strip() else f"status {status_code}: {error}"
            logger.error(f"HTTP {status_code} during '{action}': {detail}")
            if status_code == 404:
                raise not_found_error(
                    detail, status_code=status_code, action=action
                ) from error
            raise RemoteError(detail, status_code=status_code, action=action) from error

        logger.error(f"Transport error during '{action}': {error}")
        raise RemoteError(str(error), action=action) from error
