"""Module for Jira comment operations."""

import logging
from typing import Any

from ..utils import handle_jira_api_errors
from .client import JiraClient

logger = logging.getLogger("jira-mcp.jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    @handle_jira_api_errors("add comment")
    def add_comment(self, issue_key: str, comment: str) -> dict[str, Any]:
        """Add a plain-text comment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Comment text to add

        Returns:
            The created comment details
        """
        result = self.jira.issue_add_comment(issue_key, comment)
        if not isinstance(result, dict):
            result = {}

        return {
            "id": result.get("id"),
            "body": result.get("body", comment),
            "created": result.get("created"),
            "author": (result.get("author") or {}).get("displayName", "Unknown"),
        }
