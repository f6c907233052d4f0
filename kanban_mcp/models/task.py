"""Core task models for Kanban MCP."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator

# Wire key (spreadsheet column) -> accepted aliases, per field.
TASK_COLUMNS: dict[str, tuple[str, ...]] = {
    "status": ("ステータス", "status"),
    "major_category": ("大分類", "majorCategory", "major_category"),
    "minor_category": ("中分類", "minorCategory", "minor_category"),
    "title": ("タスク", "title"),
    "assignee": ("担当者", "assignee"),
    "priority": ("優先度", "priority"),
    "due_date": ("期限", "dueDate", "due_date"),
    "note": ("備考", "note"),
}


def _column(name: str, **kwargs: Any) -> Any:
    keys = TASK_COLUMNS[name]
    return Field(validation_alias=AliasChoices(*keys), serialization_alias=keys[0], **kwargs)


class TaskRecord(BaseModel):
    """A single kanban card as kept by the store (always normalized)."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = _column("status")
    major_category: str = _column("major_category", default="")
    minor_category: str = _column("minor_category", default="")
    title: str = _column("title")
    assignee: str = _column("assignee", default="")
    priority: str = _column("priority", default="")
    due_date: str = _column("due_date", default="")
    note: str = _column("note", default="")

    def to_wire(self) -> dict[str, Any]:
        """Serialize using the spreadsheet column keys."""
        return self.model_dump(by_alias=True)


class NumberedTask(TaskRecord):
    """A task paired with its current 1-based position ("No")."""

    no: int = Field(validation_alias=AliasChoices("No", "no"), serialization_alias="No")


class TaskPatch(BaseModel):
    """
    Partial task update.

    Every field is optional; only fields that were explicitly supplied
    (``model_fields_set``) override the stored record during a merge.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: str | None = _column("status", default=None)
    major_category: str | None = _column("major_category", default=None)
    minor_category: str | None = _column("minor_category", default=None)
    title: str | None = _column("title", default=None)
    assignee: str | None = _column("assignee", default=None)
    priority: str | None = _column("priority", default=None)
    due_date: str | None = _column("due_date", default=None)
    note: str | None = _column("note", default=None)

    @field_validator("*", mode="before")
    @classmethod
    def stringify(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (date, datetime)):
            return v.isoformat()
        if info.field_name == "due_date" and isinstance(v, (int, float)) and not isinstance(v, bool):
            # Epoch milliseconds, as produced by JS Date.getTime()
            try:
                return datetime.fromtimestamp(v / 1000).isoformat()
            except (OverflowError, OSError, ValueError):
                return ""
        return str(v)

    def changes(self) -> dict[str, str | None]:
        """Return only the explicitly supplied fields, keyed by field name."""
        return self.model_dump(exclude_unset=True)
