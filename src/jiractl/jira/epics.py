"""Module for Jira epic operations."""

import logging

from ..models.jira import JiraIssue
from .constants import EPIC_JQL_TEMPLATE, EPIC_SEARCH_LIMIT
from .search import SearchMixin

logger = logging.getLogger("jiractl.jira")


class EpicsMixin(SearchMixin):
    """Mixin for Jira epic operations."""

    def get_epics(self, project_key: str) -> list[JiraIssue]:
        """
        Get the unresolved epics of a project, newest first.

        Args:
            project_key: The project key

        Returns:
            Up to 100 epics
        """
        jql = EPIC_JQL_TEMPLATE.format(project_key=project_key)
        logger.debug(f"Fetching open epics for project {project_key}")
        return self.search_issues(jql, EPIC_SEARCH_LIMIT)
