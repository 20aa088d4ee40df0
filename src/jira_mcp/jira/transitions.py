"""Module for Jira transition operations."""

import logging
from typing import Any

from ..models import JiraTransition
from ..utils import handle_jira_api_errors
from .client import JiraClient

logger = logging.getLogger("jira-mcp.jira")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    @handle_jira_api_errors("get transitions")
    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """
        Get the transitions available from the issue's current status.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of JiraTransition models, in the order Jira returns them
        """
        transitions_data = self.jira.get_issue_transitions(issue_key)

        # The API might return transitions inside a 'transitions' key
        # or directly as a list
        transitions: list[Any] = []
        if isinstance(transitions_data, dict):
            transitions = transitions_data.get("transitions") or []
        elif isinstance(transitions_data, list):
            transitions = transitions_data

        return [
            JiraTransition.from_api_response(transition)
            for transition in transitions
            if isinstance(transition, dict)
        ]

    @handle_jira_api_errors("transition issue")
    def transition_issue(self, issue_key: str, transition_id: str | int) -> None:
        """
        Move an issue along a workflow transition.

        Jira validates the transition against the issue's current status;
        an invalid ID surfaces as a ProviderError with Jira's message.

        Args:
            issue_key: The key of the issue to transition
            transition_id: The ID of the transition to perform
        """
        logger.info(
            f"Transitioning issue {issue_key} with transition ID {transition_id}"
        )
        self.jira.set_issue_status_by_transition_id(issue_key, str(transition_id))
