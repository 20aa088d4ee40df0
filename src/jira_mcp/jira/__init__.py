"""Jira API module for jira-mcp."""

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .issues import IssuesMixin
from .search import SearchMixin
from .transitions import TransitionsMixin


class JiraFetcher(
    IssuesMixin,
    TransitionsMixin,
    SearchMixin,
    CommentsMixin,
):
    """
    The main Jira client class providing access to all Jira operations
    used by the tool handlers.
    """

    pass


__all__ = ["JiraConfig", "JiraClient", "JiraFetcher"]
