"""Normalization helpers that keep task fields in canonical form."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from kanban_mcp.enums import DEFAULT_STATUSES
from kanban_mcp.errors import ValidationError
from kanban_mcp.models.task import TaskPatch, TaskRecord

if TYPE_CHECKING:
    from kanban_mcp.registry import StatusSet

_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%Y.%m.%d",
)

# Optional sign, ASCII digits, optional all-zero fraction.
_TASK_NO_RE = re.compile(r"([+-]?\d+)(?:\.0*)?", re.ASCII)


def normalize_text(value: Any) -> str:
    """Stringify and trim; ``None`` becomes an empty string."""
    if value is None:
        return ""
    return str(value).strip()


def sanitize_status(value: Any) -> str:
    """Return the trimmed status, falling back to the first default status."""
    return normalize_text(value) or DEFAULT_STATUSES[0]


def normalize_priority(value: Any) -> str:
    """Trim a priority value. No vocabulary is enforced here."""
    if value is None:
        return ""
    return str(value).strip()


def _format_date(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _parse_date_text(text: str) -> datetime | None:
    iso = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def to_iso_date(value: Any) -> str:
    """
    Canonicalize a due date as ``YYYY-MM-DD``.

    Accepts date/datetime objects, epoch milliseconds and common textual
    forms. Timezone-aware values are converted to local time first. Anything
    falsy or unparseable yields an empty string.

    Args:
        value: Raw due date value

    Returns:
        Zero-padded ISO date, or '' if the value cannot be interpreted
    """
    if not value:
        return ""

    parsed: date | None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return _format_date(value)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            parsed = datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError):
            return ""
    else:
        parsed = _parse_date_text(str(value).strip())

    if parsed is None:
        return ""
    if isinstance(parsed, datetime) and parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return _format_date(parsed)


def normalize_validation_values(raw: Any) -> list[str]:
    """
    Clean a list of option values.

    Values are trimmed, blanks dropped and duplicates removed while keeping
    the first occurrence. Anything that is not a list or tuple yields [].
    """
    if not isinstance(raw, (list, tuple)):
        return []
    seen: set[str] = set()
    values: list[str] = []
    for item in raw:
        text = normalize_text(item)
        if not text or text in seen:
            continue
        seen.add(text)
        values.append(text)
    return values


def parse_task_no(value: Any) -> int | None:
    """
    Interpret a positional identifier.

    Integral numbers and plain ASCII numeric strings ("3", "+3", "3.0") are
    accepted. Bools, fractional values, blank strings and any other text
    (digit separators, non-ASCII digits, exponents) return None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        match = _TASK_NO_RE.fullmatch(value.strip())
        if match is None:
            return None
        return int(match.group(1))
    return None


def normalize_task(payload: Any, statuses: StatusSet | None = None) -> TaskRecord:
    """
    Build a complete, canonical task record from a (partial) payload.

    The resolved status is recorded in ``statuses`` before the title is
    checked, so a rejected payload can still introduce a new status.

    Args:
        payload: Mapping (column keys or field names) or TaskPatch
        statuses: Status set that collects every status seen

    Returns:
        Normalized TaskRecord

    Raises:
        ValidationError: If the title is missing or blank
    """
    if isinstance(payload, TaskPatch):
        patch = payload
    else:
        patch = TaskPatch.model_validate(dict(payload) if isinstance(payload, Mapping) else {})

    status = sanitize_status(patch.status)
    if statuses is not None:
        statuses.add(status)

    title = normalize_text(patch.title)
    if not title:
        raise ValidationError("title required")

    return TaskRecord(
        status=status,
        major_category=normalize_text(patch.major_category),
        minor_category=normalize_text(patch.minor_category),
        title=title,
        assignee=normalize_text(patch.assignee),
        priority=normalize_priority(patch.priority),
        due_date=to_iso_date(patch.due_date),
        note="" if patch.note is None else patch.note,
    )
