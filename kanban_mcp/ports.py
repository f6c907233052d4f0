"""
Board API port.

Tools and the runtime depend on this Protocol rather than on a concrete
store, so the in-memory mock and a host-provided backend are interchangeable.
"""

from __future__ import annotations

from typing import Any, Protocol

from kanban_mcp.models.results import ReloadResult, ValidationsUpdate
from kanban_mcp.models.task import NumberedTask, TaskPatch

TaskPayload = TaskPatch | dict[str, Any]


class BoardApi(Protocol):
    """Capability set every board backend provides. All operations are coroutines."""

    async def list_tasks(self) -> list[NumberedTask]: ...

    async def list_statuses(self) -> list[str]: ...

    async def get_validations(self) -> dict[str, list[str]]: ...

    async def update_validations(self, payload: Any) -> ValidationsUpdate: ...

    async def add_task(self, payload: TaskPayload) -> NumberedTask: ...

    async def update_task(self, no: Any, payload: TaskPayload) -> NumberedTask: ...

    async def delete_task(self, no: Any) -> bool: ...

    async def move_task(self, no: Any, status: str) -> NumberedTask: ...

    async def save_snapshot(self) -> str: ...

    async def reload_from_snapshot(self) -> ReloadResult: ...
