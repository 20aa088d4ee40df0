"""
Jira workflow models.
"""

import logging
from typing import Any

from ..base import EMPTY_STRING, JIRA_DEFAULT_ID, ApiModel

logger = logging.getLogger("jira-mcp.models")


class JiraTransition(ApiModel):
    """
    Model representing a Jira issue transition.

    Accepts both the raw REST shape (``{"id": "31", "to": {"name": ...}}``)
    and the flattened shape returned by ``Jira.get_issue_transitions``
    (``{"id": 31, "to": "Done"}``).
    """

    id: str = JIRA_DEFAULT_ID
    name: str = EMPTY_STRING
    to_status: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraTransition":
        if not data or not isinstance(data, dict):
            return cls()

        to_status = None
        target = data.get("to")
        if isinstance(target, dict):
            to_status = target.get("name")
        elif isinstance(target, str):
            to_status = target
        elif "to_status" in data:
            to_status = data.get("to_status")

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name") or EMPTY_STRING),
            to_status=to_status,
        )

    def matches_name(self, name: str) -> bool:
        """Case-insensitive comparison against the transition name."""
        return self.name.strip().casefold() == name.strip().casefold()
