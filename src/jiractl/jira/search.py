"""Module for Jira search operations."""

import logging

from requests.exceptions import RequestException

from ..exceptions import DecodeError
from ..models.jira import JiraIssue, JiraSearchResult
from .client import JiraClient
from .constants import (
    CLOUD_SEARCH_PATH,
    DEFAULT_SEARCH_LIMIT,
    SEARCH_FIELDS,
    SERVER_SEARCH_PATH,
)

logger = logging.getLogger("jiractl.jira")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self, jql: str, max_results: int = DEFAULT_SEARCH_LIMIT
    ) -> list[JiraIssue]:
        """
        Search for issues using JQL (Jira Query Language).

        Only a single page is fetched. The JQL is sent as given.

        Args:
            jql: JQL query string
            max_results: Maximum issues to return; 0 or less means 50

        Returns:
            List of matching issues, empty when nothing matches

        Raises:
            RemoteError: On transport failure or a non-success response
            DecodeError: If the response body is not a search result
        """
        if max_results <= 0:
            max_results = DEFAULT_SEARCH_LIMIT

        path = CLOUD_SEARCH_PATH if self.config.is_cloud else SERVER_SEARCH_PATH
        params = {
            "jql": jql,
            "maxResults": max_results,
            "fields": ",".join(SEARCH_FIELDS),
        }
        logger.debug(f"Searching {path} with JQL '{jql}' (maxResults={max_results})")

        try:
            response = self.jira.get(path, params=params)
        except RequestException as e:
            self._raise_remote_error(e, "Search failed")

        return self._parse_search_response(response, jql).issues

    def _parse_search_response(self, response: object, jql: str) -> JiraSearchResult:
        if not isinstance(response, dict):
            msg = f"Unexpected search response type for JQL '{jql}': {type(response).__name__}"
            logger.error(msg)
            raise DecodeError(msg)

        issues = response.get("issues", [])
        if not isinstance(issues, list) or not all(
            isinstance(issue, dict) and "key" in issue for issue in issues
        ):
            msg = f"Malformed 'issues' in search response for JQL '{jql}'"
            logger.error(msg)
            raise DecodeError(msg)

        result = JiraSearchResult.from_api_response(response, base_url=self.config.url)
        logger.debug(f"Search returned {len(result.issues)} issues (total={result.total})")
        return result
