"""
Test fixtures for Jira unit tests.

Builds on the root conftest.py fixtures with ready-made issue payloads.
"""

import pytest

from tests.utils.factories import JiraIssueFactory, JiraTransitionFactory


@pytest.fixture
def issue_payload():
    return JiraIssueFactory.create("PROJ-1")


@pytest.fixture
def transitions_payload():
    """Transitions as returned by the REST API, wrapped in 'transitions'."""
    return {
        "transitions": [
            JiraTransitionFactory.create("11", "In Progress"),
            JiraTransitionFactory.create("31", "Closed"),
        ]
    }
