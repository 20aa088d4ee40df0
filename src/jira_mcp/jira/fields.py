"""Friendly-name to Jira field mapping and the sparse issue field builder.

The tables below translate the domain vocabulary used by callers
("severity": "P1", "repairPlatform": "FW", ...) into the custom field IDs
and option IDs configured on the Jira instance.
"""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger("jira-mcp.jira")

# Friendly field key -> Jira field ID
FIELD_MAP: dict[str, str] = {
    "severity": "customfield_10401",
    "repairPlatform": "customfield_10404",
    "discoveryStage": "customfield_11000",
    "probability": "customfield_10716",
    "startDate": "customfield_10015",
    "dueDate": "duedate",
    "timeEstimate": "timetracking",
}

# Friendly field key -> friendly value -> Jira option ID
VALUE_MAP: dict[str, dict[str, str]] = {
    "severity": {"P0": "10301", "P1": "10302", "P2": "10303", "P3": "10304"},
    "repairPlatform": {"FW": "10311", "Android": "10309", "iOS": "10310"},
    "discoveryStage": {"开发": "11000", "测试": "11001", "Code Review": "11730"},
    "probability": {"10%": "10625", "100%": "10623", "必现": "10623"},
}

# Projects whose new issues always carry fixed "affects version" entries
PROJECT_VERSIONS: dict[str, list[dict[str, str]]] = {
    "COLOGNE": [{"id": "66200"}],
}


def map_value(field_key: str, value: str) -> str:
    """Translate a friendly value into the Jira option ID for a field.

    Values without a table entry are returned unchanged, so callers may pass
    option IDs directly.

    Args:
        field_key: Friendly field key (e.g. "severity")
        value: Friendly value (e.g. "P1") or a raw option ID

    Returns:
        The Jira option ID
    """
    return VALUE_MAP.get(field_key, {}).get(value, value)


def map_field(field_key: str, value: str) -> tuple[str, str]:
    """Translate a friendly field key and value into Jira identifiers.

    Args:
        field_key: Friendly field key; unknown keys are used as the field ID
        value: Friendly value or raw option ID

    Returns:
        Tuple of (field ID, option ID)
    """
    return FIELD_MAP.get(field_key, field_key), map_value(field_key, value)


def project_versions(project_key: str) -> list[dict[str, str]] | None:
    """Return the fixed versions new issues in a project must carry, if any."""
    versions = PROJECT_VERSIONS.get(project_key)
    return [dict(version) for version in versions] if versions else None


class IssueFieldsBuilder:
    """Builds a Jira field map one optional input at a time.

    Every setter is a no-op when its input is ``None``, so an omitted
    argument never adds, overwrites or clears a field.
    """

    def __init__(
        self, user_field: Callable[[str], dict[str, str]] | None = None
    ) -> None:
        """
        Args:
            user_field: Callable turning a user identifier into the Jira
                user reference (see ``JiraClient.user_field``). Defaults to
                the Server/DC ``{"name": ...}`` form.
        """
        self._fields: dict[str, Any] = {}
        self._user_field = user_field or (lambda user: {"name": user})

    def set(self, field_id: str, value: Any) -> "IssueFieldsBuilder":
        if value is not None:
            self._fields[field_id] = value
        return self

    def set_named(self, field_id: str, name: str | None) -> "IssueFieldsBuilder":
        """Set a field referenced by name, e.g. issuetype."""
        if name is not None:
            self._fields[field_id] = {"name": name}
        return self

    def set_key(self, field_id: str, key: str | None) -> "IssueFieldsBuilder":
        """Set a field referenced by key, e.g. project or parent."""
        if key is not None:
            self._fields[field_id] = {"key": key}
        return self

    def set_user(self, field_id: str, user: str | None) -> "IssueFieldsBuilder":
        if user is not None:
            self._fields[field_id] = self._user_field(user)
        return self

    def set_option(self, field_key: str, value: str | None) -> "IssueFieldsBuilder":
        """Set a select-list field from its friendly key and value."""
        if value is not None:
            field_id, option_id = map_field(field_key, value)
            self._fields[field_id] = {"id": option_id}
        return self

    def set_mapped(self, field_key: str, value: Any) -> "IssueFieldsBuilder":
        """Set a plain-valued field addressed by its friendly key."""
        if value is not None:
            self._fields[FIELD_MAP.get(field_key, field_key)] = value
        return self

    def set_time_estimate(self, estimate: str | None) -> "IssueFieldsBuilder":
        """Set the original estimate, a Jira duration such as "16h"."""
        if estimate is not None:
            self._fields[FIELD_MAP["timeEstimate"]] = {"originalEstimate": estimate}
        return self

    def merge(self, extra_fields: dict[str, Any] | None) -> "IssueFieldsBuilder":
        """Apply raw field ID/value pairs; they win over anything set before."""
        if extra_fields:
            overridden = sorted(set(extra_fields) & set(self._fields))
            if overridden:
                logger.debug(f"Raw fields override mapped fields: {overridden}")
            self._fields.update(extra_fields)
        return self

    def build(self) -> dict[str, Any]:
        return dict(self._fields)
