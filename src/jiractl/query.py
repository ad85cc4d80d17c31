"""JQL template expansion for saved queries."""

from .jira.constants import DEFAULT_SEARCH_LIMIT

PROJECT_PLACEHOLDER = "${project}"


def expand_jql(template: str, project: str) -> str:
    """Replace every ``${project}`` in a JQL template with the project key.

    Other ``${...}`` sequences are left untouched. No escaping is applied.
    """
    return template.replace(PROJECT_PLACEHOLDER, project)


def effective_limit(limit: int | None, default_limit: int = DEFAULT_SEARCH_LIMIT) -> int:
    """Return ``limit`` unless it is unset or not positive."""
    if limit is None or limit <= 0:
        return default_limit
    return limit
