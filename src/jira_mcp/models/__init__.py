"""
Pydantic models for jira-mcp.

Provides the API response models used to format Jira data for tool results.
"""

from .base import ApiModel
from .jira import JiraIssue, JiraSearchResult, JiraTransition

__all__ = [
    "ApiModel",
    "JiraIssue",
    "JiraSearchResult",
    "JiraTransition",
]
