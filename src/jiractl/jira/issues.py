"""Module for Jira issue operations."""

import logging
from collections.abc import Iterable
from typing import Any

from requests.exceptions import RequestException

from ..defaults import resolve_fields
from ..exceptions import DecodeError, IssueNotFoundError, ValidationError
from ..models.jira import JiraIssue, JiraIssueType
from .client import JiraClient
from .constants import ISSUE_FIELDS

logger = logging.getLogger("jiractl.jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(self, issue_key: str) -> JiraIssue:
        """
        Get a single issue by key.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            JiraIssue model of the issue

        Raises:
            ValidationError: If the key is empty
            IssueNotFoundError: If Jira does not know the key
            RemoteError: On any other transport or HTTP failure
            DecodeError: If the response is not an issue object
        """
        issue_key = (issue_key or "").strip()
        if not issue_key:
            raise ValidationError("Issue key is required")

        try:
            issue_data = self.jira.get_issue(issue_key, fields=",".join(ISSUE_FIELDS))
        except RequestException as e:
            self._raise_remote_error(
                e, f"Failed to get issue {issue_key}", not_found_error=IssueNotFoundError
            )

        if not isinstance(issue_data, dict) or "key" not in issue_data:
            msg = f"Unexpected response for issue {issue_key}: {type(issue_data).__name__}"
            logger.error(msg)
            raise DecodeError(msg)

        return JiraIssue.from_api_response(issue_data, base_url=self.config.url)

    def _build_issue_fields(
        self,
        project_key: str,
        issue_type: str,
        summary: str,
        description: str,
        assignee: str | None,
        labels: Iterable[str] | None,
        epic_link: str | None,
    ) -> dict[str, Any]:
        """Build the ``fields`` body of a create request with defaults applied."""
        resolved = resolve_fields(
            self.issue_defaults,
            assignee=assignee,
            labels=labels,
            epic_link=epic_link,
        )

        fields: dict[str, Any] = {
            "project": {"key": project_key},
            "issuetype": {"name": issue_type},
            "summary": summary,
            "description": description,
        }

        if resolved.assignee:
            fields["assignee"] = {"name": resolved.assignee}

        if resolved.labels:
            fields["labels"] = resolved.labels

        if resolved.epic_link:
            # Team-managed projects link epics through the parent field
            fields["parent"] = {"key": resolved.epic_link}

        return fields

    def create_issue(
        self,
        project_key: str,
        issue_type: str,
        summary: str,
        description: str = "",
        *,
        assignee: str | None = None,
        labels: Iterable[str] | None = None,
        epic_link: str | None = None,
    ) -> JiraIssue:
        """
        Create a new Jira issue.

        Assignee, labels and epic link fall back to the configured issue
        defaults when not given.

        Args:
            project_key: The key of the project
            issue_type: The name of the issue type
            summary: The issue summary
            description: The issue description
            assignee: Username to assign the issue to
            labels: Labels to set on the issue
            epic_link: Key of the epic to use as parent

        Returns:
            JiraIssue model representing the created issue

        Raises:
            ValidationError: If project, issue type or summary is empty
            RemoteError: If Jira rejects the request
            DecodeError: If the response does not contain an issue key
        """
        summary = (summary or "").strip()
        if not summary:
            raise ValidationError("Summary is required")
        if not project_key:
            raise ValidationError("Project key is required")
        if not issue_type:
            raise ValidationError("Issue type is required")

        fields = self._build_issue_fields(
            project_key,
            issue_type,
            summary,
            description or "",
            assignee,
            labels,
            epic_link,
        )
        logger.debug(f"Creating {issue_type} in {project_key} with fields: {fields}")

        try:
            response = self.jira.create_issue(fields=fields)
        except RequestException as e:
            self._raise_remote_error(e, "Failed to create issue")

        if not isinstance(response, dict) or not response.get("key"):
            msg = f"No issue key in create response: {response}"
            logger.error(msg)
            raise DecodeError(msg)

        issue_key = str(response["key"])
        logger.info(f"Created issue {issue_key}")

        return JiraIssue(
            id=str(response.get("id", "0")),
            key=issue_key,
            summary=summary,
            description=fields["description"],
            issue_type=JiraIssueType(name=issue_type),
            labels=list(fields.get("labels", [])),
            parent_key=fields.get("parent", {}).get("key"),
            url=self.browse_url(issue_key),
        )
