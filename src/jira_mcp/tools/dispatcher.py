"""Tool dispatch: validation, field mapping, provider call, formatting."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..exceptions import InvalidArgumentsError, JiraMCPError
from ..jira import JiraFetcher
from ..jira.fields import IssueFieldsBuilder, project_versions
from ..logging_config import log_operation
from .arguments import (
    AddCommentArgs,
    BulkTransitionArgs,
    CreateIssueArgs,
    IssueKeyArgs,
    SearchIssuesArgs,
    TransitionIssueArgs,
    UpdateIssueArgs,
)
from .catalog import validate_arguments
from .formatting import (
    BulkTransitionOutcome,
    format_bulk_outcomes,
    format_issue,
    format_issue_summary,
    format_search_result,
    format_transitions,
)

logger = logging.getLogger("jira-mcp.tools")


@dataclass(frozen=True)
class ToolResult:
    """Uniform success/failure envelope returned for every tool call."""

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(text=message, is_error=True)


class ToolDispatcher:
    """Routes tool calls to handlers backed by a single Jira fetcher."""

    def __init__(self, jira: JiraFetcher, read_only: bool = False) -> None:
        """
        Args:
            jira: The Jira fetcher every handler calls
            read_only: If True, tools that modify Jira are refused
        """
        self.jira = jira
        self.read_only = read_only
        self._handlers: dict[str, Callable[[Any], str]] = {
            "create_issue": self._create_issue,
            "get_issue": self._get_issue,
            "get_issue_summary": self._get_issue_summary,
            "update_issue": self._update_issue,
            "delete_issue": self._delete_issue,
            "get_transitions": self._get_transitions,
            "transition_issue": self._transition_issue,
            "bulk_transition": self._bulk_transition,
            "search_issues": self._search_issues,
            "add_comment": self._add_comment,
        }

    def dispatch(self, name: str, arguments: dict[str, Any] | None) -> ToolResult:
        """Run a tool and wrap the outcome; never raises for per-call errors."""
        try:
            with log_operation(logger, "call_tool", tool=name):
                return ToolResult.success(self.execute(name, arguments))
        except JiraMCPError as e:
            return ToolResult.failure(str(e))
        except Exception as e:  # noqa: BLE001 - every failure becomes an error result
            logger.debug(f"Unexpected error in tool {name}", exc_info=True)
            return ToolResult.failure(str(e) or type(e).__name__)

    def execute(self, name: str, arguments: dict[str, Any] | None) -> str:
        """
        Validate the arguments and run the tool.

        Returns:
            The tool's text result

        Raises:
            UnknownToolError: If the tool does not exist
            InvalidArgumentsError: If the arguments do not validate
            JiraMCPError: If the tool is refused in read-only mode
            ProviderError: If Jira rejects the request
        """
        tool, args = validate_arguments(name, arguments)
        if self.read_only and not tool.read_only:
            logger.warning(f"Attempted to call tool '{tool.name}' in read-only mode.")
            raise JiraMCPError(
                f"Operation '{tool.name}' is not available in read-only mode."
            )
        return self._handlers[tool.name](args)

    def _fields_builder(self) -> IssueFieldsBuilder:
        return IssueFieldsBuilder(user_field=self.jira.user_field)

    def _create_issue(self, args: CreateIssueArgs) -> str:
        builder = (
            self._fields_builder()
            .set_key("project", args.project_key)
            .set("summary", args.summary)
            .set("description", args.description)
            .set_named("issuetype", args.issue_type)
            .set("versions", project_versions(args.project_key))
            .set_user("assignee", args.assignee)
            .set_key("parent", args.parent)
            .set_option("severity", args.severity)
            .set_option("repairPlatform", args.repair_platform)
            .set_option("discoveryStage", args.discovery_stage)
            .set_option("probability", args.probability)
        )
        fields = builder.merge(args.extra_fields).build()
        issue_key = self.jira.create_issue(fields)
        return f"Success: {issue_key}"

    def _get_issue(self, args: IssueKeyArgs) -> str:
        return format_issue(self.jira.get_issue(args.issue_key))

    def _get_issue_summary(self, args: IssueKeyArgs) -> str:
        return format_issue_summary(self.jira.get_issue(args.issue_key))

    def _update_issue(self, args: UpdateIssueArgs) -> str:
        fields = (
            self._fields_builder()
            .set_user("assignee", args.assignee)
            .set_named("issuetype", args.issue_type)
            .set_key("parent", args.parent)
            .set("summary", args.summary)
            .set("description", args.description)
            .set_time_estimate(args.time_estimate)
            .set_mapped("startDate", args.start_date)
            .set_mapped("dueDate", args.due_date)
            .merge(args.extra_fields)
            .build()
        )
        if not fields:
            raise InvalidArgumentsError(
                "fields", "at least one field to update must be supplied"
            )
        self.jira.update_issue(args.issue_key, fields)
        return f"Success: Updated {args.issue_key}"

    def _delete_issue(self, args: IssueKeyArgs) -> str:
        self.jira.delete_issue(args.issue_key)
        return f"Success: Deleted {args.issue_key}"

    def _get_transitions(self, args: IssueKeyArgs) -> str:
        return format_transitions(self.jira.get_transitions(args.issue_key))

    def _transition_issue(self, args: TransitionIssueArgs) -> str:
        self.jira.transition_issue(args.issue_key, args.transition_id)
        return (
            f"Success: Transitioned {args.issue_key} "
            f"using transition {args.transition_id}"
        )

    def _bulk_transition(self, args: BulkTransitionArgs) -> str:
        outcomes = [
            self._transition_by_name(issue_key, args.transition_name)
            for issue_key in args.issue_keys
        ]
        failed = [outcome.issue_key for outcome in outcomes if not outcome.succeeded]
        if failed:
            logger.warning(
                f"Bulk transition '{args.transition_name}' incomplete for: {failed}"
            )
        return format_bulk_outcomes(outcomes)

    def _transition_by_name(
        self, issue_key: str, transition_name: str
    ) -> BulkTransitionOutcome:
        try:
            transitions = self.jira.get_transitions(issue_key)
            match = next(
                (t for t in transitions if t.matches_name(transition_name)), None
            )
            if match is None:
                return BulkTransitionOutcome(
                    issue_key, "not_found", f"no transition named '{transition_name}'"
                )
            self.jira.transition_issue(issue_key, match.id)
        except Exception as e:  # noqa: BLE001 - recorded per issue, the batch continues
            logger.warning(f"Bulk transition failed for {issue_key}: {e}")
            return BulkTransitionOutcome(issue_key, "error", str(e) or type(e).__name__)

        return BulkTransitionOutcome(
            issue_key, "success", f"transitioned via '{match.name}' (id {match.id})"
        )

    def _search_issues(self, args: SearchIssuesArgs) -> str:
        result = self.jira.search_issues(args.jql, limit=args.max_results)
        return format_search_result(result, args.max_results)

    def _add_comment(self, args: AddCommentArgs) -> str:
        self.jira.add_comment(args.issue_key, args.body)
        return f"Comment added to {args.issue_key}"

