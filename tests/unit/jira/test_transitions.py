"""Tests for the Jira Transitions mixin."""

import pytest

from jira_mcp.exceptions import ProviderError
from tests.utils.factories import JiraTransitionFactory, make_http_error


class TestTransitionsMixin:
    def test_get_transitions_dict_format(self, jira_fetcher, transitions_payload):
        jira_fetcher.jira.get_issue_transitions.return_value = transitions_payload

        transitions = jira_fetcher.get_transitions("PROJ-1")

        assert [(t.id, t.name, t.to_status) for t in transitions] == [
            ("11", "In Progress", "In Progress"),
            ("31", "Closed", "Closed"),
        ]

    def test_get_transitions_list_format(self, jira_fetcher):
        jira_fetcher.jira.get_issue_transitions.return_value = [
            JiraTransitionFactory.create_flat(21, "Resolve"),
        ]

        transitions = jira_fetcher.get_transitions("PROJ-1")

        assert len(transitions) == 1
        assert transitions[0].id == "21"
        assert transitions[0].to_status == "Resolve"

    def test_get_transitions_empty(self, jira_fetcher):
        jira_fetcher.jira.get_issue_transitions.return_value = None

        assert jira_fetcher.get_transitions("PROJ-1") == []

    def test_transition_issue(self, jira_fetcher):
        jira_fetcher.transition_issue("PROJ-1", 31)

        jira_fetcher.jira.set_issue_status_by_transition_id.assert_called_once_with(
            "PROJ-1", "31"
        )

    def test_transition_issue_invalid_id(self, jira_fetcher):
        jira_fetcher.jira.set_issue_status_by_transition_id.side_effect = (
            make_http_error(
                400, {"errorMessages": ["Transition id '99' is not valid for this issue."]}
            )
        )

        with pytest.raises(ProviderError, match="is not valid for this issue"):
            jira_fetcher.transition_issue("PROJ-1", "99")
