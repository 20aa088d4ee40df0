"""Module for Jira issue operations."""

import logging
from typing import Any

from ..exceptions import ProviderError
from ..utils import handle_jira_api_errors
from .client import JiraClient

logger = logging.getLogger("jira-mcp.jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    @handle_jira_api_errors("get issue")
    def get_issue(self, issue_key: str) -> dict[str, Any]:
        """
        Get the full representation of a Jira issue.

        Args:
            issue_key: The issue key (e.g., PROJECT-123)

        Returns:
            The raw issue data returned by the Jira API

        Raises:
            ProviderError: If the issue cannot be retrieved
        """
        issue = self.jira.issue(issue_key)
        if not issue:
            raise ProviderError(f"Issue {issue_key} not found")
        return issue

    @handle_jira_api_errors("create issue")
    def create_issue(self, fields: dict[str, Any]) -> str:
        """
        Create a new Jira issue from a complete field map.

        Args:
            fields: Field ID to value mapping (project, summary, issuetype, ...)

        Returns:
            Issue key of the created issue

        Raises:
            ProviderError: If Jira rejects the issue or returns no key
        """
        logger.debug(f"Creating issue with fields: {sorted(fields)}")
        response = self.jira.create_issue(fields=fields)
        issue_key = response.get("key") if isinstance(response, dict) else None

        if not issue_key:
            raise ProviderError("No issue key returned from Jira API")

        logger.info(f"Created issue {issue_key}")
        return issue_key

    @handle_jira_api_errors("update issue")
    def update_issue(self, issue_key: str, fields: dict[str, Any]) -> None:
        """
        Edit the given fields of an existing issue.

        Only the fields present in ``fields`` are sent; Jira leaves every
        other field untouched.

        Args:
            issue_key: The issue key
            fields: Dictionary of fields to update
        """
        logger.debug(f"Updating issue {issue_key} fields: {sorted(fields)}")
        self.jira.update_issue_field(issue_key, fields)
        logger.info(f"Updated issue {issue_key}")

    @handle_jira_api_errors("delete issue")
    def delete_issue(self, issue_key: str) -> bool:
        """
        Delete a Jira issue. This cannot be undone.

        Args:
            issue_key: The key of the issue to delete

        Returns:
            True if the issue was deleted successfully
        """
        self.jira.delete_issue(issue_key)
        logger.info(f"Deleted issue {issue_key}")
        return True
