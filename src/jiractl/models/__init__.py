"""
Pydantic models for Jira API responses.
"""

from .base import ApiModel, TimestampMixin
from .jira import (
    JiraIssue,
    JiraIssueType,
    JiraPriority,
    JiraSearchResult,
    JiraStatus,
    JiraUser,
)

__all__ = [
    "ApiModel",
    "JiraIssue",
    "JiraIssueType",
    "JiraPriority",
    "JiraSearchResult",
    "JiraStatus",
    "JiraUser",
    "TimestampMixin",
]
