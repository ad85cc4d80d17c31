"""
Base models for the jiractl API models.

This module provides the base class and timestamp helpers shared by the
Jira models.
"""

from typing import Any, TypeVar

from dateutil.parser import isoparse
from pydantic import BaseModel

from .constants import EMPTY_STRING

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.

    Subclasses build themselves from raw Jira JSON via ``from_api_response``.
    """

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")


class TimestampMixin:
    """
    Mixin for handling Atlassian API timestamp formats.
    """

    @staticmethod
    def format_timestamp(timestamp: str | None) -> str:
        """
        Format an Atlassian timestamp to a human-readable format.

        Args:
            timestamp: An ISO 8601 timestamp string, e.g. "2024-01-01T10:00:00.000+0000"

        Returns:
            A formatted date string, the input itself if it cannot be parsed,
            or an empty string when no timestamp is given
        """
        if not timestamp:
            return EMPTY_STRING

        try:
            return isoparse(timestamp).strftime("%Y-%m-%d %H:%M:%S")
        except (ValueError, TypeError):
            return timestamp
