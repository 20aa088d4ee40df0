"""
Jira data models for the jira-mcp server.
"""

from .issue import JiraIssue
from .search import JiraSearchResult
from .workflow import JiraTransition

__all__ = [
    "JiraIssue",
    "JiraSearchResult",
    "JiraTransition",
]
