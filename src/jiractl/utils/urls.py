"""URL-related utility functions for jiractl."""

import re
from urllib.parse import urlparse


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Atlassian Cloud or Server/Data Center.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False for Server/Data Center
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""

    # Localhost and private addresses are always Server/Data Center
    if (
        hostname == "localhost"
        or re.match(r"^127\.", hostname)
        or re.match(r"^192\.168\.", hostname)
        or re.match(r"^10\.", hostname)
        or re.match(r"^172\.(1[6-9]|2[0-9]|3[0-1])\.", hostname)
    ):
        return False

    return (
        ".atlassian.net" in hostname
        or ".jira.com" in hostname
        or ".jira-dev.com" in hostname
    )


def normalize_server_url(url: str | None) -> str:
    """Strip whitespace and trailing slashes from a server URL."""
    if not url:
        return ""
    return url.strip().rstrip("/")


def browse_url(server: str, issue_key: str) -> str:
    """Build the web URL of an issue, e.g. https://x.atlassian.net/browse/ABC-1."""
    return f"{normalize_server_url(server)}/browse/{issue_key}"
