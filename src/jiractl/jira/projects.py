"""Module for Jira project operations."""

import logging

from requests.exceptions import RequestException

from ..exceptions import DecodeError, ValidationError
from ..models.jira import JiraIssueType
from .client import JiraClient

logger = logging.getLogger("jiractl.jira")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    def get_issue_types(self, project_key: str) -> list[JiraIssueType]:
        """
        Get the issue types available in a project.

        Args:
            project_key: The project key

        Returns:
            Issue types from the project metadata, in server order

        Raises:
            ValidationError: If the project key is empty
            RemoteError: If the project is unknown or inaccessible
            DecodeError: If the project metadata has no issue type list
        """
        if not project_key:
            raise ValidationError("Project key is required")

        try:
            project_data = self.jira.project(project_key)
        except RequestException as e:
            self._raise_remote_error(e, f"Failed to get project {project_key}")

        if not isinstance(project_data, dict):
            msg = f"Unexpected project response for {project_key}: {type(project_data).__name__}"
            logger.error(msg)
            raise DecodeError(msg)

        raw_types = project_data.get("issueTypes", [])
        if not isinstance(raw_types, list):
            msg = f"Malformed 'issueTypes' in project {project_key}"
            logger.error(msg)
            raise DecodeError(msg)

        return [
            JiraIssueType.from_api_response(issue_type)
            for issue_type in raw_types
            if isinstance(issue_type, dict) and issue_type.get("name")
        ]
