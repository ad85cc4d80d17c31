"""Module for Jira user operations."""

import logging

from requests.exceptions import RequestException

from ..models.jira import JiraUser
from .client import JiraClient

logger = logging.getLogger("jiractl.jira")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def get_current_user(self) -> JiraUser:
        """
        Get the authenticated user.

        Raises:
            RemoteError: On transport failure or a non-success response
        """
        try:
            myself_data = self.jira.myself()
        except RequestException as e:
            self._raise_remote_error(e, "Connection test failed")

        return JiraUser.from_api_response(myself_data)

    def test_connection(self) -> None:
        """
        Check that the server is reachable and accepts the credentials.

        Raises:
            RemoteError: If the "myself" call does not succeed
        """
        user = self.get_current_user()
        logger.info(f"Connected to {self.config.url} as {user.display_name}")
