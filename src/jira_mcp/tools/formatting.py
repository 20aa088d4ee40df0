"""Text rendering of tool results."""

import json
from dataclasses import dataclass
from typing import Any, Literal

from ..models import JiraIssue, JiraSearchResult, JiraTransition

BulkStatus = Literal["success", "not_found", "error"]

_STATUS_LABELS: dict[str, str] = {
    "success": "success",
    "not_found": "not found",
    "error": "error",
}


@dataclass(frozen=True)
class BulkTransitionOutcome:
    """Result of transitioning a single issue inside a bulk request."""

    issue_key: str
    status: BulkStatus
    detail: str

    @property
    def succeeded(self) -> bool:
        return self.status == "success"

    def to_line(self) -> str:
        return f"{self.issue_key}: {_STATUS_LABELS[self.status]} - {self.detail}"


def format_json(data: Any) -> str:
    """Serialize data as stable, human readable JSON."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_issue(issue: dict[str, Any]) -> str:
    return format_json(issue)


def format_issue_summary(issue: dict[str, Any]) -> str:
    return format_json(JiraIssue.from_api_response(issue).to_summary_dict())


def format_transitions(transitions: list[JiraTransition]) -> str:
    return format_json([transition.to_simplified_dict() for transition in transitions])


def format_search_result(result: JiraSearchResult, limit: int) -> str:
    """Render search hits in the order Jira returned them, at most ``limit``."""
    return format_json([issue.to_search_dict() for issue in result.issues[:limit]])


def format_bulk_outcomes(outcomes: list[BulkTransitionOutcome]) -> str:
    """One line per issue, in request order."""
    return "\n".join(outcome.to_line() for outcome in outcomes)
