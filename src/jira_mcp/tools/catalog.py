"""Tool catalog and argument validation.

The catalog is the single source for tool names, descriptions and argument
schemas; the MCP server advertises it and the dispatcher validates against it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from ..exceptions import InvalidArgumentsError, UnknownToolError
from .arguments import (
    AddCommentArgs,
    BulkTransitionArgs,
    CreateIssueArgs,
    IssueKeyArgs,
    SearchIssuesArgs,
    ToolArgs,
    TransitionIssueArgs,
    UpdateIssueArgs,
)

logger = logging.getLogger("jira-mcp.tools")

# Older clients call every tool with this prefix
LEGACY_PREFIX = "jira_"


@dataclass(frozen=True)
class ToolDefinition:
    """A named, schema-described tool."""

    name: str
    description: str
    arguments_model: type[ToolArgs]
    aliases: tuple[str, ...] = field(default=())
    read_only: bool = False

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool arguments, using the public names."""
        return self.arguments_model.model_json_schema(by_alias=True)

    @property
    def all_names(self) -> tuple[str, ...]:
        names = (self.name, *self.aliases)
        return (*names, *(f"{LEGACY_PREFIX}{name}" for name in names))


TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="create_issue",
        description=(
            "Create a new Jira issue. Severity, repair platform, discovery stage "
            "and probability accept friendly values (e.g. 'P1', 'FW') or raw option "
            "IDs; extraFields are raw field ID/value pairs applied last."
        ),
        arguments_model=CreateIssueArgs,
    ),
    ToolDefinition(
        name="get_issue",
        description="Get full details of a Jira issue",
        arguments_model=IssueKeyArgs,
        read_only=True,
    ),
    ToolDefinition(
        name="get_issue_summary",
        description=(
            "Get the key, summary, status, assignee and last update time of a Jira issue"
        ),
        arguments_model=IssueKeyArgs,
        read_only=True,
    ),
    ToolDefinition(
        name="update_issue",
        description=(
            "Update fields of a Jira issue. Only the parameters supplied are "
            "changed; omitted fields are left untouched."
        ),
        arguments_model=UpdateIssueArgs,
    ),
    ToolDefinition(
        name="delete_issue",
        description="Delete a Jira issue. This action is irreversible.",
        arguments_model=IssueKeyArgs,
    ),
    ToolDefinition(
        name="get_transitions",
        description="List the workflow transitions currently available for an issue",
        arguments_model=IssueKeyArgs,
        read_only=True,
    ),
    ToolDefinition(
        name="transition_issue",
        description="Transition a Jira issue using a transition ID from get_transitions",
        arguments_model=TransitionIssueArgs,
        aliases=("update_issue_status",),
    ),
    ToolDefinition(
        name="bulk_transition",
        description=(
            "Transition several issues by transition name (case-insensitive). "
            "Each issue is handled independently and reported on its own line."
        ),
        arguments_model=BulkTransitionArgs,
    ),
    ToolDefinition(
        name="search_issues",
        description="Search for Jira issues using JQL",
        arguments_model=SearchIssuesArgs,
        read_only=True,
    ),
    ToolDefinition(
        name="add_comment",
        description="Add a plain-text comment to a Jira issue",
        arguments_model=AddCommentArgs,
    ),
)

_TOOLS_BY_NAME: dict[str, ToolDefinition] = {
    name: tool for tool in TOOLS for name in tool.all_names
}


def get_tool_definition(name: str) -> ToolDefinition:
    """Look up a tool by its exact name or one of its aliases.

    Raises:
        UnknownToolError: If no tool has that name
    """
    try:
        return _TOOLS_BY_NAME[name]
    except KeyError:
        raise UnknownToolError(name) from None


def _invalid_arguments(tool: ToolDefinition, error: ValidationError) -> InvalidArgumentsError:
    """Turn the first pydantic error into an InvalidArgumentsError."""
    first = error.errors()[0]
    loc = first.get("loc") or ()
    param = str(loc[0]) if loc else "arguments"
    if first.get("type") == "missing":
        message = "missing required parameter"
    else:
        message = first.get("msg", "invalid value")
    logger.debug(f"Rejected arguments for {tool.name}: {error}")
    return InvalidArgumentsError(param, message)


def validate_arguments(
    name: str, arguments: dict[str, Any] | None
) -> tuple[ToolDefinition, ToolArgs]:
    """Validate a raw argument mapping against the named tool.

    Args:
        name: Tool name or alias
        arguments: Raw arguments; None is treated as empty

    Returns:
        The tool definition and the validated argument record, with
        declared defaults applied

    Raises:
        UnknownToolError: If the tool does not exist
        InvalidArgumentsError: If a parameter is missing or has the wrong type
    """
    tool = get_tool_definition(name)
    try:
        args = tool.arguments_model.model_validate(
            arguments if arguments is not None else {}
        )
    except ValidationError as e:
        raise _invalid_arguments(tool, e) from e
    return tool, args
