"""Enums and board-wide constants for Kanban MCP."""

from enum import Enum

DEFAULT_STATUSES: tuple[str, ...] = ("未着手", "進行中", "完了", "保留")
PRIORITY_DEFAULT_OPTIONS: tuple[str, ...] = ("高", "中", "低")
MEDIUM_PRIORITY = "中"
UNSET_STATUS_LABEL = "ステータス未設定"
UNSET_PRIORITY_LABEL = "（未設定）"
DEFAULT_SNAPSHOT_LOCATION = "mock://task.xlsx"


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable board (default)
    JSON = "json"  # Machine-readable with all fields


class RunMode(str, Enum):
    """Which implementation currently backs the board API."""

    MOCK = "mock"
    HOST = "host"


class ValidationField(str, Enum):
    """Task columns that carry an allow-list of option values."""

    STATUS = "ステータス"
    MAJOR_CATEGORY = "大分類"
    MINOR_CATEGORY = "中分類"
    PRIORITY = "優先度"


_FIELD_ALIASES = {
    "status": ValidationField.STATUS,
    "majorCategory": ValidationField.MAJOR_CATEGORY,
    "major_category": ValidationField.MAJOR_CATEGORY,
    "minorCategory": ValidationField.MINOR_CATEGORY,
    "minor_category": ValidationField.MINOR_CATEGORY,
    "priority": ValidationField.PRIORITY,
}


def canonical_field_key(key: object) -> str:
    """
    Map a validation key onto its column name.

    English aliases ("priority", "majorCategory", ...) resolve to the Japanese
    column keys used on the wire. Unknown keys are returned trimmed, unchanged.
    """
    text = str(key).strip()
    alias = _FIELD_ALIASES.get(text)
    return alias.value if alias else text
