"""
Jira issue models.

This module provides the Pydantic model used to project Jira issues into
the compact views returned by the summary and search tools.
"""

import logging
from typing import Any

from ..base import EMPTY_STRING, JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY, ApiModel

logger = logging.getLogger("jira-mcp.models")

UNASSIGNED = "Unassigned"


def _name_of(value: Any) -> str | None:
    """Return the display name of a Jira object (status, user, ...)."""
    if isinstance(value, dict):
        return value.get("displayName") or value.get("name")
    if isinstance(value, str) and value:
        return value
    return None


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    status: str | None = None
    assignee: str | None = None
    issue_type: str | None = None
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API

        Returns:
            A JiraIssue instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        fields = data.get("fields") or {}

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            summary=str(fields.get("summary") or EMPTY_STRING),
            status=_name_of(fields.get("status")),
            assignee=_name_of(fields.get("assignee")),
            issue_type=_name_of(fields.get("issuetype")),
            created=str(fields.get("created") or EMPTY_STRING),
            updated=str(fields.get("updated") or EMPTY_STRING),
        )

    def to_summary_dict(self) -> dict[str, Any]:
        """Project the fields returned by the issue summary tool."""
        return {
            "key": self.key,
            "summary": self.summary,
            "status": self.status,
            "assignee": self.assignee or UNASSIGNED,
            "updated": self.updated,
        }

    def to_search_dict(self) -> dict[str, Any]:
        """Project the fields returned for each search hit."""
        return {
            "key": self.key,
            "summary": self.summary,
            "status": self.status,
            "created": self.created,
        }
