"""Tests for the Jira Issues mixin."""

import pytest

from jira_mcp.exceptions import JiraAuthenticationError, ProviderError
from tests.utils.factories import make_http_error


class TestIssuesMixin:
    def test_get_issue(self, jira_fetcher, issue_payload):
        jira_fetcher.jira.issue.return_value = issue_payload

        assert jira_fetcher.get_issue("PROJ-1") == issue_payload
        jira_fetcher.jira.issue.assert_called_once_with("PROJ-1")

    def test_get_issue_empty_response(self, jira_fetcher):
        jira_fetcher.jira.issue.return_value = {}

        with pytest.raises(ProviderError, match="Issue PROJ-9 not found"):
            jira_fetcher.get_issue("PROJ-9")

    def test_get_issue_not_found(self, jira_fetcher):
        jira_fetcher.jira.issue.side_effect = make_http_error(
            404, {"errorMessages": ["Issue Does Not Exist"]}
        )

        with pytest.raises(ProviderError) as exc_info:
            jira_fetcher.get_issue("PROJ-9")

        assert exc_info.value.status_code == 404
        assert "Issue Does Not Exist" in str(exc_info.value)
        assert "get issue" in str(exc_info.value)

    def test_get_issue_auth_failure(self, jira_fetcher):
        jira_fetcher.jira.issue.side_effect = make_http_error(401)

        with pytest.raises(JiraAuthenticationError):
            jira_fetcher.get_issue("PROJ-1")

    def test_create_issue(self, jira_fetcher):
        jira_fetcher.jira.create_issue.return_value = {"id": "10001", "key": "PROJ-7"}
        fields = {"project": {"key": "PROJ"}, "summary": "New"}

        assert jira_fetcher.create_issue(fields) == "PROJ-7"
        jira_fetcher.jira.create_issue.assert_called_once_with(fields=fields)

    def test_create_issue_without_key(self, jira_fetcher):
        jira_fetcher.jira.create_issue.return_value = {}

        with pytest.raises(ProviderError, match="No issue key returned"):
            jira_fetcher.create_issue({"summary": "New"})

    def test_create_issue_rejected(self, jira_fetcher):
        jira_fetcher.jira.create_issue.side_effect = make_http_error(
            400, {"errors": {"customfield_10401": "Option id '1' is not valid"}}
        )

        with pytest.raises(ProviderError) as exc_info:
            jira_fetcher.create_issue({"summary": "New"})

        assert exc_info.value.detail == "customfield_10401: Option id '1' is not valid"

    def test_update_issue(self, jira_fetcher):
        jira_fetcher.update_issue("PROJ-1", {"summary": "Renamed"})

        jira_fetcher.jira.update_issue_field.assert_called_once_with(
            "PROJ-1", {"summary": "Renamed"}
        )

    def test_delete_issue(self, jira_fetcher):
        assert jira_fetcher.delete_issue("PROJ-1") is True
        jira_fetcher.jira.delete_issue.assert_called_once_with("PROJ-1")
