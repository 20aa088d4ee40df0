"""Tests for the Jira Comments mixin."""

from jira_mcp.jira.comments import CommentsMixin


class TestCommentsMixin:
    def test_add_comment(self, jira_fetcher):
        jira_fetcher.jira.issue_add_comment.return_value = {
            "id": "10100",
            "body": "Looks good",
            "created": "2024-01-01T10:00:00.000+0000",
            "author": {"displayName": "Test User"},
        }

        result = jira_fetcher.add_comment("PROJ-1", "Looks good")

        jira_fetcher.jira.issue_add_comment.assert_called_once_with(
            "PROJ-1", "Looks good"
        )
        assert result == {
            "id": "10100",
            "body": "Looks good",
            "created": "2024-01-01T10:00:00.000+0000",
            "author": "Test User",
        }

    def test_add_comment_minimal_response(self, jira_fetcher):
        jira_fetcher.jira.issue_add_comment.return_value = None

        result = jira_fetcher.add_comment("PROJ-1", "Hi")

        assert result["body"] == "Hi"
        assert result["author"] == "Unknown"

    def test_fetcher_is_comments_mixin(self, jira_fetcher):
        assert isinstance(jira_fetcher, CommentsMixin)
