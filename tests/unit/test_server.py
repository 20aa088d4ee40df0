"""Unit tests for server"""

from contextlib import contextmanager
from unittest.mock import MagicMock, patch

import pytest
from mcp.shared.context import RequestContext
from mcp.shared.session import BaseSession
from mcp.types import CallToolRequest, CallToolRequestParams, TextContent

from jira_mcp.exceptions import ToolCallFailed
from jira_mcp.jira import JiraFetcher
from jira_mcp.server import AppContext, app, call_tool, list_tools, server_lifespan
from jira_mcp.tools import ToolDispatcher
from tests.utils.environment import env_vars


@pytest.fixture
def mock_jira_client():
    """Create a mock JiraFetcher with pre-configured return values."""
    mock_jira = MagicMock(spec=JiraFetcher)
    mock_jira.user_field.side_effect = lambda user: {"name": user}
    mock_jira.get_issue.return_value = {
        "key": "TEST-123",
        "fields": {"summary": "Test Issue", "status": {"name": "Open"}},
    }
    return mock_jira


@pytest.fixture
def app_context(mock_jira_client):
    """Create an AppContext with a dispatcher over the mock client."""
    return AppContext(dispatcher=ToolDispatcher(mock_jira_client))


@contextmanager
def mock_request_context(app_context):
    """Context manager to set the request_ctx context variable directly."""
    from mcp.server.lowlevel.server import request_ctx

    mock_session = MagicMock(spec=BaseSession)

    context = RequestContext(
        request_id="test-request-id",
        meta=None,
        session=mock_session,
        lifespan_context=app_context,
    )

    token = request_ctx.set(context)
    try:
        yield
    finally:
        request_ctx.reset(token)


@pytest.mark.anyio
async def test_server_lifespan():
    """Test the server_lifespan context manager."""
    with (
        env_vars(
            {
                "JIRA_URL": "https://jira.example.com",
                "JIRA_PERSONAL_TOKEN": "pat",
                "JIRA_USERNAME": None,
                "JIRA_API_TOKEN": None,
                "READ_ONLY_MODE": None,
            }
        ),
        patch("jira_mcp.server.JiraFetcher") as mock_fetcher,
    ):
        async with server_lifespan(MagicMock()) as ctx:
            assert isinstance(ctx, AppContext)
            assert ctx.dispatcher.jira is mock_fetcher.return_value
            assert ctx.dispatcher.read_only is False

        config = mock_fetcher.call_args.kwargs["config"]
        assert config.url == "https://jira.example.com"
        assert config.auth_type == "token"


@pytest.mark.anyio
async def test_server_lifespan_read_only():
    with (
        env_vars(
            {
                "JIRA_URL": "https://jira.example.com",
                "JIRA_PERSONAL_TOKEN": "pat",
                "READ_ONLY_MODE": "true",
            }
        ),
        patch("jira_mcp.server.JiraFetcher"),
    ):
        async with server_lifespan(MagicMock()) as ctx:
            assert ctx.dispatcher.read_only is True


@pytest.mark.anyio
async def test_server_lifespan_missing_config():
    """Missing configuration is fatal before any request is served."""
    with env_vars({"JIRA_URL": None, "JIRA_HOST": None}):
        with pytest.raises(ValueError, match="Missing required JIRA_URL"):
            async with server_lifespan(MagicMock()):
                pass


@pytest.mark.anyio
async def test_list_tools(app_context):
    with mock_request_context(app_context):
        tools = await list_tools()

    names = [tool.name for tool in tools]
    assert len(names) == 10
    assert "create_issue" in names
    assert "jira_create_issue" not in names
    schema = next(t for t in tools if t.name == "get_issue").inputSchema
    assert schema["required"] == ["issueKey"]


@pytest.mark.anyio
async def test_list_tools_read_only_mode(mock_jira_client):
    app_context = AppContext(
        dispatcher=ToolDispatcher(mock_jira_client, read_only=True)
    )
    with mock_request_context(app_context):
        tools = await list_tools()

    assert {tool.name for tool in tools} == {
        "get_issue",
        "get_issue_summary",
        "get_transitions",
        "search_issues",
    }


@pytest.mark.anyio
async def test_call_tool_success(app_context, mock_jira_client):
    with mock_request_context(app_context):
        result = await call_tool("get_issue_summary", {"issueKey": "TEST-123"})

    assert len(result) == 1
    assert isinstance(result[0], TextContent)
    assert '"key": "TEST-123"' in result[0].text
    mock_jira_client.get_issue.assert_called_once_with("TEST-123")


@pytest.mark.anyio
async def test_call_tool_unknown_tool(app_context):
    with mock_request_context(app_context):
        with pytest.raises(ToolCallFailed, match="Unknown tool: nope"):
            await call_tool("nope", {})


@pytest.mark.anyio
async def test_call_tool_provider_error(app_context, mock_jira_client):
    mock_jira_client.get_issue.side_effect = RuntimeError("boom")

    with mock_request_context(app_context):
        with pytest.raises(ToolCallFailed, match="boom"):
            await call_tool("get_issue", {"issueKey": "TEST-123"})


@pytest.mark.anyio
async def test_call_tool_without_context():
    with mock_request_context(AppContext()):
        with pytest.raises(ToolCallFailed, match="Jira is not configured"):
            await call_tool("get_issue", {"issueKey": "TEST-123"})


async def send_call_tool(name, arguments):
    """Run a tools/call request through the server's registered handler."""
    handler = app.request_handlers[CallToolRequest]
    request = CallToolRequest(
        method="tools/call",
        params=CallToolRequestParams(name=name, arguments=arguments),
    )
    return (await handler(request)).root


@pytest.mark.anyio
async def test_call_tool_request_success(app_context):
    with mock_request_context(app_context):
        result = await send_call_tool("get_issue_summary", {"issueKey": "TEST-123"})

    assert result.isError is False
    assert '"key": "TEST-123"' in result.content[0].text


@pytest.mark.anyio
async def test_call_tool_request_unknown_tool(app_context):
    with mock_request_context(app_context):
        result = await send_call_tool("jira_frobnicate", {})

    assert result.isError is True
    assert "Unknown tool: jira_frobnicate" in result.content[0].text


@pytest.mark.anyio
async def test_call_tool_request_provider_error_keeps_serving(
    app_context, mock_jira_client
):
    mock_jira_client.get_issue.side_effect = [
        RuntimeError("Error during get issue (404): Issue Does Not Exist"),
        {"key": "TEST-123", "fields": {"summary": "Test Issue"}},
    ]

    with mock_request_context(app_context):
        failed = await send_call_tool("get_issue", {"issueKey": "TEST-404"})
        recovered = await send_call_tool("get_issue", {"issueKey": "TEST-123"})

    assert failed.isError is True
    assert "Issue Does Not Exist" in failed.content[0].text
    assert recovered.isError is False
    assert '"summary": "Test Issue"' in recovered.content[0].text


@pytest.mark.anyio
@pytest.mark.parametrize("text_param", ["body", "comment"])
async def test_call_tool_request_add_comment_spellings(
    app_context, mock_jira_client, text_param
):
    with mock_request_context(app_context):
        result = await send_call_tool(
            "add_comment", {"issueKey": "A-1", text_param: "hi"}
        )

    assert result.isError is False
    assert result.content[0].text == "Comment added to A-1"
    mock_jira_client.add_comment.assert_called_once_with("A-1", "hi")


@pytest.mark.anyio
async def test_call_tool_request_add_comment_without_text(
    app_context, mock_jira_client
):
    with mock_request_context(app_context):
        result = await send_call_tool("add_comment", {"issueKey": "A-1"})

    assert result.isError is True
    mock_jira_client.add_comment.assert_not_called()
