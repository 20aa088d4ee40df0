"""
Jira search result models.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssue

logger = logging.getLogger("jira-mcp.models")


class JiraSearchResult(ApiModel):
    """
    Model representing a Jira search (JQL) result.
    """

    total: int = 0
    start_at: int = 0
    max_results: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)
    next_page_token: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search result data from the Jira API

        Returns:
            A JiraSearchResult instance with issues in response order
        """
        if not data or not isinstance(data, dict):
            return cls()

        issues = [
            JiraIssue.from_api_response(issue_data)
            for issue_data in data.get("issues") or []
            if issue_data
        ]

        def _as_int(value: Any, default: int) -> int:
            try:
                return int(value) if value is not None else default
            except (ValueError, TypeError):
                return default

        return cls(
            total=_as_int(data.get("total"), -1),
            start_at=_as_int(data.get("startAt"), 0),
            max_results=_as_int(data.get("maxResults"), -1),
            issues=issues,
            next_page_token=data.get("nextPageToken"),
        )
