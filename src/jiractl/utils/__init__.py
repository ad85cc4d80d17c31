"""
Utility functions for jiractl.
"""

from .decorators import handle_jiractl_errors
from .logging import log_config_param, mask_sensitive, setup_logging
from .urls import browse_url, is_atlassian_cloud_url, normalize_server_url

__all__ = [
    "browse_url",
    "handle_jiractl_errors",
    "is_atlassian_cloud_url",
    "log_config_param",
    "mask_sensitive",
    "normalize_server_url",
    "setup_logging",
]
