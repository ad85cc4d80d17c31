"""Resolution of per-call values against configured issue defaults.

Every optional field follows the same precedence: a non-empty call-site value
wins, then a non-empty configured default, then "unset".
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .config import IssueDefaults


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _clean_labels(labels: Iterable[str] | None) -> list[str]:
    if not labels:
        return []
    return list(
        dict.fromkeys(label.strip() for label in labels if label and label.strip())
    )


def resolve_value(override: str | None, configured: str | None) -> str | None:
    """Return the override if non-empty, else the configured value, else None."""
    return _clean(override) or _clean(configured)


def resolve_assignee(override: str | None, configured: str | None) -> str | None:
    return resolve_value(override, configured)


def resolve_epic_link(override: str | None, configured: str | None) -> str | None:
    return resolve_value(override, configured)


def resolve_issue_type(override: str | None, configured: str | None) -> str | None:
    return resolve_value(override, configured)


def resolve_labels(
    override: Iterable[str] | None, configured: Iterable[str] | None
) -> list[str]:
    """Return the override labels if any, else the configured ones, else []."""
    return _clean_labels(override) or _clean_labels(configured)


@dataclass(frozen=True)
class ResolvedFields:
    """Effective optional fields of a create-issue request."""

    assignee: str | None = None
    labels: list[str] = field(default_factory=list)
    epic_link: str | None = None


def resolve_fields(
    defaults: IssueDefaults | None,
    assignee: str | None = None,
    labels: Iterable[str] | None = None,
    epic_link: str | None = None,
) -> ResolvedFields:
    """Apply the precedence rule to every optional create-issue field."""
    defaults = defaults or IssueDefaults()
    return ResolvedFields(
        assignee=resolve_assignee(assignee, defaults.assignee),
        labels=resolve_labels(labels, defaults.labels),
        epic_link=resolve_epic_link(epic_link, defaults.epic_link),
    )
