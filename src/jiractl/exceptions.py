"""Exceptions raised by jiractl."""


class JiractlError(Exception):
    """Base class for all jiractl errors."""


class ConfigurationError(JiractlError):
    """Required configuration or credentials are missing."""


class ValidationError(JiractlError):
    """A caller supplied an invalid or missing required value."""


class DecodeError(JiractlError):
    """A Jira response could not be interpreted in the expected shape."""


class NotFoundError(JiractlError):
    """A named query or referenced issue does not exist."""


class RemoteError(JiractlError):
    """Jira answered with a non-success status or the transport failed.

    Attributes:
        status_code: HTTP status code, or None when no response was received
        detail: The response body when present, otherwise a generic message
    """

    def __init__(
        self, detail: str, status_code: int | None = None, action: str | None = None
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{action}: {detail}" if action else detail)


class IssueNotFoundError(RemoteError, NotFoundError):
    """Jira returned 404 for an issue key."""
