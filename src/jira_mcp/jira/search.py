"""Module for Jira search operations."""

import logging
from typing import Any

from ..models import JiraSearchResult
from ..utils import handle_jira_api_errors
from .client import JiraClient

logger = logging.getLogger("jira-mcp.jira")

SEARCH_FIELDS = "summary,status,assignee,created,updated,issuetype"

# Page size caps enforced by the Cloud v3 and Server/DC v2 search APIs
CLOUD_MAX_PAGE_SIZE = 100
SERVER_MAX_RESULTS = 50


class SearchMixin(JiraClient):
    """Mixin providing JQL search for Jira issues."""

    @handle_jira_api_errors("search issues")
    def search_issues(self, jql: str, limit: int = 10) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language).

        Cloud is queried through ``POST rest/api/3/search/jql`` with
        nextPageToken pagination; Server/DC through the v2 ``jql`` search.

        Args:
            jql: JQL query string (e.g., "status = Open ORDER BY created DESC")
            limit: Maximum issues to return

        Returns:
            JiraSearchResult with at most ``limit`` issues in Jira's order

        Raises:
            ValueError: If the JQL is empty on Jira Cloud
            TypeError: If Jira returns an unexpected response type
        """
        logger.debug(f"Searching issues with JQL '{jql}' (limit {limit})")

        if self.config.is_cloud:
            result = self._search_cloud(jql, limit)
        else:
            response = self.jira.jql(
                jql, fields=SEARCH_FIELDS, limit=min(limit, SERVER_MAX_RESULTS)
            )
            if response is not None and not isinstance(response, dict):
                msg = f"Unexpected return value type from `jira.jql`: {type(response)}"
                logger.error(msg)
                raise TypeError(msg)
            result = JiraSearchResult.from_api_response(response or {})

        # Some servers ignore maxResults
        result.issues = result.issues[:limit]
        return result

    def _search_cloud(self, jql: str, limit: int) -> JiraSearchResult:
        if not jql or not jql.strip():
            raise ValueError("JQL query cannot be empty for Jira Cloud API v3")

        request_body: dict[str, Any] = {
            "jql": jql,
            "maxResults": min(limit, CLOUD_MAX_PAGE_SIZE),
            "fields": SEARCH_FIELDS.split(","),
        }

        all_issues: list[dict[str, Any]] = []
        next_token = None
        while len(all_issues) < limit:
            if next_token:
                request_body["nextPageToken"] = next_token

            response = self.jira.post("rest/api/3/search/jql", json=request_body)
            if not isinstance(response, dict):
                msg = f"Unexpected return value type from v3 search API: {type(response)}"
                logger.error(msg)
                raise TypeError(msg)

            all_issues.extend(response.get("issues") or [])
            next_token = response.get("nextPageToken")
            if not next_token:
                break

        # v3 does not report a total
        return JiraSearchResult.from_api_response(
            {
                "issues": all_issues[:limit],
                "total": -1,
                "startAt": 0,
                "maxResults": limit,
                "nextPageToken": next_token if len(all_issues) >= limit else None,
            }
        )
