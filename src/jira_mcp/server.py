import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from mcp.server import Server
from mcp.types import TextContent, Tool

from .exceptions import ToolCallFailed
from .jira import JiraFetcher
from .jira.config import JiraConfig
from .logging_config import log_config_param
from .tools import TOOLS, ToolDispatcher
from .utils import is_env_truthy

logger = logging.getLogger("jira-mcp")


@dataclass
class AppContext:
    """Application context for the Jira MCP server."""

    dispatcher: ToolDispatcher | None = None


def is_read_only_mode() -> bool:
    """Check if write tools are disabled via READ_ONLY_MODE."""
    return is_env_truthy("READ_ONLY_MODE")


def log_jira_config(config: JiraConfig) -> None:
    log_config_param(logger, "Jira", "URL", config.url)
    log_config_param(logger, "Jira", "Auth Type", config.auth_type)
    if config.auth_type == "basic":
        log_config_param(logger, "Jira", "Username", config.username)
        log_config_param(logger, "Jira", "API Token", config.api_token, sensitive=True)
    else:
        log_config_param(
            logger, "Jira", "Personal Token", config.personal_token, sensitive=True
        )
    log_config_param(logger, "Jira", "SSL Verify", str(config.ssl_verify))


@asynccontextmanager
async def server_lifespan(server: Server) -> AsyncIterator[AppContext]:
    """Build the Jira client once and share it with every tool call.

    Missing configuration is fatal: the ValueError from JiraConfig.from_env
    propagates before any request is served.
    """
    logger.info("Starting Jira MCP server")

    read_only = is_read_only_mode()
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")

    config = JiraConfig.from_env()
    log_jira_config(config)

    jira = JiraFetcher(config=config)
    logger.info("Jira client initialized successfully.")

    try:
        yield AppContext(dispatcher=ToolDispatcher(jira, read_only=read_only))
    finally:
        logger.info("Jira MCP server stopped")


app = Server("jira-mcp", lifespan=server_lifespan)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List the available Jira tools."""
    ctx = app.request_context.lifespan_context
    read_only = bool(ctx and ctx.dispatcher and ctx.dispatcher.read_only)

    return [
        Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.input_schema,
        )
        for tool in TOOLS
        if tool.read_only or not read_only
    ]


@app.call_tool()
async def call_tool(name: str, arguments: Any) -> Sequence[TextContent]:
    """Handle tool calls.

    Failures are raised as ToolCallFailed, which the MCP session reports as
    a tool result with isError set; the session itself keeps running.
    """
    ctx = app.request_context.lifespan_context
    if not ctx or not ctx.dispatcher:
        raise ToolCallFailed("Jira is not configured.")

    result = ctx.dispatcher.dispatch(name, arguments)
    if result.is_error:
        logger.error(f"Tool execution error: {result.text}")
        raise ToolCallFailed(result.text)

    return [TextContent(type="text", text=result.text)]


async def run_server(transport: str = "stdio", port: int = 8000) -> None:
    """Run the Jira MCP server with the specified transport."""
    if transport == "sse":
        from mcp.server.sse import SseServerTransport
        from starlette.applications import Starlette
        from starlette.requests import Request
        from starlette.responses import Response
        from starlette.routing import Mount, Route

        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as streams:
                await app.run(
                    streams[0], streams[1], app.create_initialization_options()
                )
            return Response()

        starlette_app = Starlette(
            routes=[
                Route("/sse", endpoint=handle_sse),
                Mount("/messages/", app=sse.handle_post_message),
            ],
        )

        import uvicorn

        config = uvicorn.Config(starlette_app, host="0.0.0.0", port=port)  # noqa: S104
        server = uvicorn.Server(config)
        # Stay in the current event loop
        await server.serve()
    else:
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream, write_stream, app.create_initialization_options()
            )
