"""
Root pytest configuration file for jira-mcp tests.

Provides the Jira client fixtures shared by the unit test packages.
"""

from unittest.mock import MagicMock, patch

import pytest

from jira_mcp.jira import JiraFetcher
from jira_mcp.jira.config import JiraConfig
from jira_mcp.logging_config import setup_logger
from tests.utils.factories import AuthConfigFactory

JIRA_ENV_VARS = (
    "JIRA_URL",
    "JIRA_HOST",
    "JIRA_USERNAME",
    "JIRA_USER",
    "JIRA_API_TOKEN",
    "JIRA_PASSWORD",
    "JIRA_PERSONAL_TOKEN",
    "JIRA_SSL_VERIFY",
    "READ_ONLY_MODE",
)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Rebind the package logger after tests that reconfigure it."""
    yield
    setup_logger()


@pytest.fixture
def clean_jira_env(monkeypatch):
    """Remove every Jira-related variable from the environment."""
    for name in JIRA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Example:
        def test_config(jira_config_factory):
            config = jira_config_factory(url="https://jira.example.com")
    """

    def _create_config(**overrides):
        defaults = {
            **AuthConfigFactory.create_cloud_auth_config(),
            "auth_type": "basic",
        }
        return JiraConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def mock_config(jira_config_factory):
    return jira_config_factory()


@pytest.fixture
def mock_atlassian_jira():
    """A MagicMock standing in for ``atlassian.Jira``."""
    mock_jira = MagicMock()
    mock_jira.issue.return_value = {}
    mock_jira.jql.return_value = {"issues": [], "total": 0}
    mock_jira.get_issue_transitions.return_value = []
    return mock_jira


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """A JiraFetcher whose underlying atlassian client is a MagicMock."""
    with patch("jira_mcp.jira.client.Jira", return_value=mock_atlassian_jira):
        fetcher = JiraFetcher(config=mock_config)
    assert fetcher.jira is mock_atlassian_jira
    return fetcher
