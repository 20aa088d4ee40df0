"""
Utility functions for the jira-mcp server.
"""

from .decorators import handle_jira_api_errors
from .env import getenv_with_fallback, is_env_ssl_verify, is_env_truthy
from .urls import is_atlassian_cloud_url

__all__ = [
    "getenv_with_fallback",
    "handle_jira_api_errors",
    "is_atlassian_cloud_url",
    "is_env_ssl_verify",
    "is_env_truthy",
]
