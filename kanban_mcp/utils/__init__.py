"""Utility functions for Kanban MCP."""

from kanban_mcp.utils.formatters import (
    _format_board_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_validations_markdown,
)
from kanban_mcp.utils.normalizers import (
    normalize_priority,
    normalize_task,
    normalize_text,
    normalize_validation_values,
    parse_task_no,
    sanitize_status,
    to_iso_date,
)
from kanban_mcp.utils.payloads import (
    decode_push_payload,
    denormalize_status_label,
    normalize_state_payload,
    normalize_status_label,
    sanitize_task_list,
    sanitize_task_record,
)

__all__ = [
    "normalize_text",
    "sanitize_status",
    "normalize_priority",
    "to_iso_date",
    "normalize_validation_values",
    "parse_task_no",
    "normalize_task",
    "decode_push_payload",
    "normalize_state_payload",
    "sanitize_task_record",
    "sanitize_task_list",
    "normalize_status_label",
    "denormalize_status_label",
    "_format_task_concise",
    "_format_tasks_concise",
    "_format_task_markdown",
    "_format_board_markdown",
    "_format_validations_markdown",
]
