"""Status set and per-field validation registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from kanban_mcp.enums import DEFAULT_STATUSES, PRIORITY_DEFAULT_OPTIONS, ValidationField, canonical_field_key
from kanban_mcp.utils.normalizers import normalize_validation_values

logger = logging.getLogger(__name__)


class StatusSet:
    """Insertion-ordered set of every status ever recorded. Never shrinks."""

    def __init__(self, initial: Iterable[str] = DEFAULT_STATUSES) -> None:
        self._items: dict[str, None] = {}
        self.update(initial)

    def add(self, status: str) -> None:
        if status and status not in self._items:
            self._items[status] = None
            logger.debug("New status recorded: %s", status)

    def update(self, statuses: Iterable[str]) -> None:
        for status in statuses:
            self.add(status)

    def to_list(self) -> list[str]:
        return list(self._items)

    def __contains__(self, status: object) -> bool:
        return status in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"StatusSet({self.to_list()!r})"


class ValidationRegistry:
    """
    Allowed option values per task column.

    The registry is replaced wholesale on every update. ``status`` and
    ``priority`` are never left empty: they fall back to the status set and
    the default priorities respectively. Status values accepted here are
    merged into the status set, but not the other way around.
    """

    def __init__(self, statuses: StatusSet, initial: Mapping[str, Any] | None = None) -> None:
        self._statuses = statuses
        self._values: dict[str, list[str]] = {}
        self.update(initial or {})

    @property
    def statuses(self) -> StatusSet:
        return self._statuses

    def snapshot(self) -> dict[str, list[str]]:
        """Return a copy that callers may mutate freely."""
        return {key: list(values) for key, values in self._values.items()}

    def get(self, field: ValidationField | str) -> list[str]:
        key = field.value if isinstance(field, ValidationField) else canonical_field_key(field)
        return list(self._values.get(key, []))

    def update(self, payload: Any) -> dict[str, list[str]]:
        """
        Replace the registry with cleaned values from ``payload``.

        Args:
            payload: Mapping of column key -> list of candidate values.
                Anything that is not a mapping is treated as empty.

        Returns:
            Snapshot of the new registry
        """
        cleaned: dict[str, list[str]] = {}
        if isinstance(payload, Mapping):
            for key, raw in payload.items():
                values = normalize_validation_values(raw)
                if values:
                    cleaned[canonical_field_key(key)] = values

        status_key = ValidationField.STATUS.value
        priority_key = ValidationField.PRIORITY.value
        if not cleaned.get(status_key):
            cleaned[status_key] = self._statuses.to_list()
        if not cleaned.get(priority_key):
            cleaned[priority_key] = list(PRIORITY_DEFAULT_OPTIONS)

        self._values = cleaned
        self._statuses.update(cleaned[status_key])
        logger.debug("Validation registry updated: %s", {k: len(v) for k, v in cleaned.items()})
        return self.snapshot()
