"""Formatting of Jira issues for terminal display."""

from .models.jira import JiraIssue

SUMMARY_WIDTH = 60
DETAIL_RULE = "─" * 57


def truncate(text: str, width: int = SUMMARY_WIDTH) -> str:
    """Shorten text to ``width`` characters, ending in '...' when cut."""
    if len(text) <= width:
        return text
    return text[: max(width - 3, 0)] + "..."


def format_issue_row(issue: JiraIssue) -> str:
    """One line per issue: key, status and truncated summary."""
    status = issue.status.name if issue.status else ""
    return f"{issue.key:<12} {status:<15} {truncate(issue.summary)}"


def format_issue_details(issue: JiraIssue) -> str:
    """
    Multi-line detail view of an issue.

    Only fields present on the issue are shown.
    """
    lines = [f"{issue.key}: {issue.summary}", DETAIL_RULE]

    if issue.status:
        lines.append(f"Status:      {issue.status.name}")
    if issue.issue_type and issue.issue_type.name:
        lines.append(f"Type:        {issue.issue_type.name}")
    if issue.priority:
        lines.append(f"Priority:    {issue.priority.name}")
    if issue.assignee:
        lines.append(f"Assignee:    {issue.assignee.display_name}")
    if issue.reporter:
        lines.append(f"Reporter:    {issue.reporter.display_name}")
    if issue.labels:
        lines.append(f"Labels:      {', '.join(issue.labels)}")
    if issue.parent_key:
        lines.append(f"Parent:      {issue.parent_key}")
    if issue.created:
        lines.append(f"Created:     {issue.format_timestamp(issue.created)}")
    if issue.updated:
        lines.append(f"Updated:     {issue.format_timestamp(issue.updated)}")
    if issue.url:
        lines.append(f"URL:         {issue.url}")
    if issue.description:
        lines.extend(["", "Description:", issue.description])

    return "\n".join(lines)


def format_creation_summary(
    project: str,
    issue_type: str,
    summary: str,
    description: str = "",
    epic: str | None = None,
) -> str:
    """The confirmation block shown before an issue is created."""
    lines = [
        "Creating issue:",
        f"  Project:     {project}",
        f"  Type:        {issue_type}",
        f"  Summary:     {summary}",
    ]
    if epic:
        lines.append(f"  Epic:        {epic}")
    if description:
        lines.append(f"  Description: {description}")
    return "\n".join(lines)
