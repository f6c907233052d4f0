"""Helpers for payloads arriving from a host backend or push channel."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from kanban_mcp.enums import UNSET_STATUS_LABEL
from kanban_mcp.errors import MalformedPushPayload
from kanban_mcp.models.task import TASK_COLUMNS
from kanban_mcp.utils.normalizers import normalize_text

logger = logging.getLogger(__name__)

_TITLE_KEYS = TASK_COLUMNS["title"]


def decode_push_payload(raw: Any) -> dict[str, Any]:
    """
    Decode a pushed payload into a dict.

    Strings and bytes are parsed as JSON; mappings are copied. Empty or
    non-mapping results decode to {}.

    Raises:
        MalformedPushPayload: If a string payload is not valid JSON
    """
    if not raw:
        return {}
    if isinstance(raw, (str, bytes, bytearray)):
        try:
            decoded = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedPushPayload(f"Failed to parse payload string - {e}") from e
        return dict(decoded) if isinstance(decoded, Mapping) else {}
    if isinstance(raw, Mapping):
        return dict(raw)
    return {}


def normalize_state_payload(raw: Any) -> dict[str, Any]:
    """Like decode_push_payload, but malformed input is logged and yields {}."""
    try:
        return decode_push_payload(raw)
    except MalformedPushPayload:
        logger.warning("Ignoring malformed push payload", exc_info=True)
        return {}


def sanitize_task_record(task: Any, fallback_index: int = 0) -> dict[str, Any] | None:
    """
    Tidy one task record received from a backend.

    Records without a title are rejected (None). The title is trimmed and a
    missing or blank "No" is filled with ``fallback_index + 1``. Any other
    keys pass through untouched.
    """
    if not isinstance(task, Mapping):
        return None
    title_key = next((key for key in _TITLE_KEYS if key in task), _TITLE_KEYS[0])
    title = normalize_text(task.get(title_key))
    if not title:
        return None
    sanitized = dict(task)
    sanitized[title_key] = title
    if not normalize_text(sanitized.get("No")):
        sanitized["No"] = fallback_index + 1
    return sanitized


def sanitize_task_list(raw: Any) -> list[dict[str, Any]]:
    """Sanitize a list of task records, dropping the invalid ones."""
    if not isinstance(raw, (list, tuple)):
        return []
    result: list[dict[str, Any]] = []
    for item in raw:
        sanitized = sanitize_task_record(item, len(result))
        if sanitized is not None:
            result.append(sanitized)
    return result


def normalize_status_label(value: Any) -> str:
    """Display label for a status; blank statuses get a placeholder label."""
    return normalize_text(value) or UNSET_STATUS_LABEL


def denormalize_status_label(value: Any) -> str:
    """Inverse of normalize_status_label: the placeholder maps back to ''."""
    text = normalize_text(value)
    return "" if text == UNSET_STATUS_LABEL else text
