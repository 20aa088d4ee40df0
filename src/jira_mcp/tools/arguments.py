"""
Typed argument records for every tool.

Each tool validates its raw argument mapping into exactly one of these
models. Public (wire) names are camelCase aliases; attributes are
snake_case.
"""

from typing import Annotated, Any

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    field_validator,
)

DEFAULT_ISSUE_TYPE = "Task"
DEFAULT_MAX_RESULTS = 10


def _numeric_string_to_int(value: Any) -> Any:
    """Accept "5" for an integer parameter; command line values arrive as text."""
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return value


NumericInt = Annotated[StrictInt, BeforeValidator(_numeric_string_to_int)]


def _body_or_comment_schema(schema: dict[str, Any]) -> None:
    """Advertise ``comment`` as an accepted spelling of ``body``."""
    properties = schema.setdefault("properties", {})
    properties["comment"] = {**properties["body"], "title": "Comment"}
    schema["required"] = [name for name in schema.get("required", []) if name != "body"]
    schema["anyOf"] = [{"required": ["body"]}, {"required": ["comment"]}]


class ToolArgs(BaseModel):
    """Base class for tool argument records."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class IssueKeyArgs(ToolArgs):
    issue_key: StrictStr = Field(
        alias="issueKey",
        min_length=1,
        description="Jira issue key (e.g., 'PROJ-123')",
    )


class CreateIssueArgs(ToolArgs):
    project_key: StrictStr = Field(
        alias="projectKey", min_length=1, description="Project key (e.g., 'PROJ')"
    )
    summary: StrictStr = Field(min_length=1, description="Issue summary")
    description: StrictStr | None = Field(default=None, description="Issue description")
    issue_type: StrictStr = Field(
        default=DEFAULT_ISSUE_TYPE,
        alias="issueType",
        description=f"Issue type name (default '{DEFAULT_ISSUE_TYPE}')",
    )
    parent: StrictStr | None = Field(
        default=None, description="Parent issue key, for sub-tasks"
    )
    assignee: StrictStr | None = Field(
        default=None, description="Assignee username (Server/DC) or account ID (Cloud)"
    )
    severity: StrictStr | None = Field(default=None, description="P0, P1, P2, P3")
    repair_platform: StrictStr | None = Field(
        default=None, alias="repairPlatform", description="e.g. FW, Android, iOS"
    )
    discovery_stage: StrictStr | None = Field(
        default=None, alias="discoveryStage", description="e.g. 开发, 测试, Code Review"
    )
    probability: StrictStr | None = Field(
        default=None, description="e.g. 10%, 100%, 必现"
    )
    extra_fields: dict[str, Any] | None = Field(
        default=None,
        alias="extraFields",
        description="Additional raw field ID/value pairs, applied last",
    )


class UpdateIssueArgs(IssueKeyArgs):
    assignee: StrictStr | None = Field(
        default=None, description="Assignee username (Server/DC) or account ID (Cloud)"
    )
    issue_type: StrictStr | None = Field(
        default=None, alias="issueType", description="New issue type name"
    )
    parent: StrictStr | None = Field(default=None, description="New parent issue key")
    summary: StrictStr | None = Field(default=None, description="New summary")
    description: StrictStr | None = Field(default=None, description="New description")
    time_estimate: StrictStr | None = Field(
        default=None, alias="timeEstimate", description="Original estimate, e.g. '16h'"
    )
    start_date: StrictStr | None = Field(
        default=None, alias="startDate", description="Start date (YYYY-MM-DD)"
    )
    due_date: StrictStr | None = Field(
        default=None, alias="dueDate", description="Due date (YYYY-MM-DD)"
    )
    extra_fields: dict[str, Any] | None = Field(
        default=None,
        alias="extraFields",
        description="Additional raw field ID/value pairs, applied last",
    )


class TransitionIssueArgs(IssueKeyArgs):
    transition_id: StrictStr | StrictInt = Field(
        alias="transitionId",
        description="Transition ID, as listed by get_transitions",
    )

    @field_validator("transition_id")
    @classmethod
    def normalize_transition_id(cls, value: str | int) -> str:
        value = str(value).strip()
        if not value:
            raise ValueError("transition ID must not be empty")
        return value


class BulkTransitionArgs(ToolArgs):
    issue_keys: list[StrictStr] = Field(
        alias="issueKeys",
        min_length=1,
        description="Issue keys to transition, processed in order",
    )
    transition_name: StrictStr = Field(
        alias="transitionName",
        min_length=1,
        description="Transition name (case-insensitive), e.g. 'Closed'",
    )


class SearchIssuesArgs(ToolArgs):
    jql: StrictStr = Field(description="JQL query string")
    max_results: NumericInt = Field(
        default=DEFAULT_MAX_RESULTS,
        alias="maxResults",
        gt=0,
        description=f"Maximum number of results (default {DEFAULT_MAX_RESULTS})",
    )


class AddCommentArgs(IssueKeyArgs):
    model_config = ConfigDict(json_schema_extra=_body_or_comment_schema)

    body: StrictStr = Field(
        validation_alias=AliasChoices("body", "comment"),
        min_length=1,
        description="Comment text",
    )


ToolArguments = (
    CreateIssueArgs
    | IssueKeyArgs
    | UpdateIssueArgs
    | TransitionIssueArgs
    | BulkTransitionArgs
    | SearchIssuesArgs
    | AddCommentArgs
)
