"""
Jira data models for jiractl.
"""

from .common import JiraIssueType, JiraPriority, JiraStatus, JiraUser
from .issue import JiraIssue
from .search import JiraSearchResult

__all__ = [
    "JiraIssue",
    "JiraIssueType",
    "JiraPriority",
    "JiraSearchResult",
    "JiraStatus",
    "JiraUser",
]
