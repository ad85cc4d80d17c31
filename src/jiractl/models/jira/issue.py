"""
Jira issue models.

This module provides the Pydantic model for Jira issues.
"""

import logging
from typing import Any

from pydantic import Field

from ...utils.urls import browse_url
from ..base import ApiModel, TimestampMixin
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY
from .common import JiraIssueType, JiraPriority, JiraStatus, JiraUser

logger = logging.getLogger(__name__)


def _adf_to_text(node: Any) -> str:
    """Flatten an Atlassian Document Format node into plain text."""
    if isinstance(node, str):
        return node
    if isinstance(node, list):
        return "".join(_adf_to_text(child) for child in node)
    if not isinstance(node, dict):
        return EMPTY_STRING

    if node.get("type") == "text":
        return str(node.get("text", EMPTY_STRING))
    if node.get("type") == "hardBreak":
        return "\n"

    text = _adf_to_text(node.get("content", []))
    if node.get("type") in ("paragraph", "heading", "codeBlock", "listItem"):
        text += "\n"
    return text


class JiraIssue(ApiModel, TimestampMixin):
    """
    Model representing a Jira issue.

    Only the fixed field set jiractl works with is modelled; everything else
    in the response is ignored.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    description: str | None = None
    issue_type: JiraIssueType | None = None
    status: JiraStatus | None = None
    priority: JiraPriority | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    labels: list[str] = Field(default_factory=list)
    parent_key: str | None = None
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    url: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: ``base_url`` is used to build the browse URL

        Returns:
            A JiraIssue instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        fields = data.get("fields") or {}
        if not isinstance(fields, dict):
            fields = {}

        description = fields.get("description")
        if description is not None and not isinstance(description, str):
            # API v3 returns descriptions as ADF documents
            description = _adf_to_text(description).strip()

        parent_key = None
        if isinstance(parent := fields.get("parent"), dict):
            parent_key = parent.get("key")

        labels = fields.get("labels") or []
        if not isinstance(labels, list):
            labels = []

        key = str(data.get("key", JIRA_DEFAULT_KEY))
        base_url = kwargs.get("base_url")

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=key,
            summary=str(fields.get("summary") or EMPTY_STRING),
            description=description,
            issue_type=(
                JiraIssueType.from_api_response(fields["issuetype"])
                if fields.get("issuetype")
                else None
            ),
            status=(
                JiraStatus.from_api_response(fields["status"])
                if fields.get("status")
                else None
            ),
            priority=(
                JiraPriority.from_api_response(fields["priority"])
                if fields.get("priority")
                else None
            ),
            assignee=(
                JiraUser.from_api_response(fields["assignee"])
                if fields.get("assignee")
                else None
            ),
            reporter=(
                JiraUser.from_api_response(fields["reporter"])
                if fields.get("reporter")
                else None
            ),
            labels=[str(label) for label in labels],
            parent_key=parent_key,
            created=str(fields.get("created") or EMPTY_STRING),
            updated=str(fields.get("updated") or EMPTY_STRING),
            url=browse_url(base_url, key) if base_url else None,
        )
