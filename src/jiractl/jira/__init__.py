"""Jira API module for jiractl.

This module provides the Jira client used by the jiractl workflows.
"""

from .client import JiraClient
from .config import JiraConfig
from .epics import EpicsMixin
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .search import SearchMixin
from .users import UsersMixin


class JiraFetcher(
    ProjectsMixin,
    EpicsMixin,
    SearchMixin,
    IssuesMixin,
    UsersMixin,
):
    """
    The Jira client class providing all jiractl operations.

    - ProjectsMixin: issue types of a project
    - EpicsMixin: open epics of a project
    - SearchMixin: JQL search
    - IssuesMixin: issue creation and lookup
    - UsersMixin: current user and connectivity probe
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
