"""Tool catalog, validation and dispatch."""

from .catalog import TOOLS, ToolDefinition, get_tool_definition, validate_arguments
from .dispatcher import ToolDispatcher, ToolResult

__all__ = [
    "TOOLS",
    "ToolDefinition",
    "ToolDispatcher",
    "ToolResult",
    "get_tool_definition",
    "validate_arguments",
]
