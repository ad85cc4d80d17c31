"""
Jira search result models.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssue

logger = logging.getLogger(__name__)


class JiraSearchResult(ApiModel):
    """
    Model representing a single page of a Jira search (JQL) result.

    ``total`` is -1 when the endpoint does not report it (the Cloud
    ``search/jql`` endpoint omits it).
    """

    total: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search result data from the Jira API
            **kwargs: ``base_url`` is passed on to each issue

        Returns:
            A JiraSearchResult instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        issues = [
            JiraIssue.from_api_response(issue_data, base_url=kwargs.get("base_url"))
            for issue_data in data.get("issues") or []
            if issue_data
        ]

        raw_total = data.get("total")
        try:
            total = int(raw_total) if raw_total is not None else -1
        except (ValueError, TypeError):
            total = -1

        return cls(total=total, issues=issues)
