class JiraMCPError(Exception):
    """Base exception for jira-mcp errors."""

    pass


class UnknownToolError(JiraMCPError):
    """Raised when a tool name is not part of the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArgumentsError(JiraMCPError):
    """Raised when tool arguments do not match the tool's schema."""

    def __init__(self, param: str, message: str) -> None:
        self.param = param
        super().__init__(f"Invalid argument '{param}': {message}")


class ProviderError(JiraMCPError):
    """Raised when the Jira API rejects or fails a request."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class JiraAuthenticationError(ProviderError):
    """Raised when Jira API authentication fails (401/403)."""

    pass


class ToolCallFailed(JiraMCPError):
    """Raised by the MCP handler so the session reports an error result."""

    pass
