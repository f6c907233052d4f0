"""In-memory task store used when no host backend is available."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, timedelta
from typing import Any

from kanban_mcp.enums import DEFAULT_SNAPSHOT_LOCATION, DEFAULT_STATUSES, PRIORITY_DEFAULT_OPTIONS, ValidationField
from kanban_mcp.errors import TaskNotFoundError
from kanban_mcp.models.results import ReloadResult, ValidationsUpdate
from kanban_mcp.models.task import NumberedTask, TaskPatch, TaskRecord
from kanban_mcp.ports import TaskPayload
from kanban_mcp.registry import StatusSet, ValidationRegistry
from kanban_mcp.utils.normalizers import normalize_task, parse_task_no

logger = logging.getLogger(__name__)

SAMPLE_MAJOR_CATEGORIES = ("プロジェクトA", "プロジェクトB", "プロジェクトC")
SAMPLE_MINOR_CATEGORIES = ("企画", "設計", "実装", "検証")
SAMPLE_ASSIGNEES = ("田中", "佐藤", "鈴木", "高橋")


class MockTaskStore:
    """
    Ordered, in-memory task list implementing the board API.

    Tasks are addressed by their 1-based position ("No"), derived from the
    current order on every call. Deleting a task shifts every later task
    down by one. The store assumes a single caller; no locking is done.
    """

    def __init__(
        self,
        tasks: Iterable[Mapping[str, Any] | TaskPatch] = (),
        *,
        statuses: StatusSet | None = None,
        validations: Mapping[str, Any] | None = None,
        snapshot_location: str = DEFAULT_SNAPSHOT_LOCATION,
    ) -> None:
        self._statuses = statuses if statuses is not None else StatusSet()
        self._tasks: list[TaskRecord] = [normalize_task(t, self._statuses) for t in tasks]
        self._registry = ValidationRegistry(self._statuses, validations)
        self._snapshot_location = snapshot_location
        logger.info("MockTaskStore ready tasks=%d statuses=%d", len(self._tasks), len(self._statuses))

    @property
    def registry(self) -> ValidationRegistry:
        return self._registry

    @property
    def statuses(self) -> StatusSet:
        return self._statuses

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- helpers ----

    def _numbered(self) -> list[NumberedTask]:
        return [self._with_no(task, idx + 1) for idx, task in enumerate(self._tasks)]

    @staticmethod
    def _with_no(task: TaskRecord, no: int) -> NumberedTask:
        return NumberedTask(**task.model_dump(), no=no)

    def _locate(self, no: Any) -> int | None:
        parsed = parse_task_no(no)
        if parsed is None or parsed < 1 or parsed > len(self._tasks):
            return None
        return parsed - 1

    @staticmethod
    def _as_patch(payload: TaskPayload | None) -> TaskPatch:
        if isinstance(payload, TaskPatch):
            return payload
        return TaskPatch.model_validate(dict(payload) if isinstance(payload, Mapping) else {})

    # ---- board API ----

    async def list_tasks(self) -> list[NumberedTask]:
        return self._numbered()

    async def list_statuses(self) -> list[str]:
        return self._statuses.to_list()

    async def get_validations(self) -> dict[str, list[str]]:
        return self._registry.snapshot()

    async def update_validations(self, payload: Any) -> ValidationsUpdate:
        updated = self._registry.update(payload)
        return ValidationsUpdate(ok=True, validations=updated, statuses=self._statuses.to_list())

    async def add_task(self, payload: TaskPayload) -> NumberedTask:
        """
        Append a new task.

        Raises:
            ValidationError: If the title is blank
        """
        record = normalize_task(self._as_patch(payload), self._statuses)
        self._tasks.append(record)
        logger.debug("Task added No.%d title=%r", len(self._tasks), record.title)
        return self._with_no(record, len(self._tasks))

    async def update_task(self, no: Any, payload: TaskPayload) -> NumberedTask:
        """
        Merge ``payload`` over the task at ``no`` and re-normalize the result.

        Only explicitly supplied fields override; the merged record is
        normalized as a whole, so a blank merged title is still rejected.

        Raises:
            TaskNotFoundError: If ``no`` does not resolve to a task
            ValidationError: If the merged title is blank
        """
        index = self._locate(no)
        if index is None:
            raise TaskNotFoundError(no)
        merged = self._tasks[index].model_dump()
        merged.update(self._as_patch(payload).changes())
        updated = normalize_task(merged, self._statuses)
        self._tasks[index] = updated
        logger.debug("Task updated No.%d", index + 1)
        return self._with_no(updated, index + 1)

    async def delete_task(self, no: Any) -> bool:
        index = self._locate(no)
        if index is None:
            logger.debug("Delete ignored, no task at No.%r", no)
            return False
        removed = self._tasks.pop(index)
        logger.debug("Task deleted No.%d title=%r", index + 1, removed.title)
        return True

    async def move_task(self, no: Any, status: str) -> NumberedTask:
        return await self.update_task(no, TaskPatch(status=status))

    async def save_snapshot(self) -> str:
        logger.info("Snapshot requested; mock store keeps state in memory (%s)", self._snapshot_location)
        return self._snapshot_location

    async def reload_from_snapshot(self) -> ReloadResult:
        logger.info("Reload requested; returning in-memory state")
        return ReloadResult(
            ok=True,
            tasks=self._numbered(),
            statuses=self._statuses.to_list(),
            validations=self._registry.snapshot(),
        )


def sample_tasks(today: date | None = None, count: int = 8) -> list[dict[str, str]]:
    """Build demo tasks with rotating statuses, categories and due dates."""
    today = today or date.today()
    tasks = []
    for idx in range(count):
        due = today + timedelta(days=idx - 2)
        tasks.append(
            {
                "ステータス": DEFAULT_STATUSES[idx % len(DEFAULT_STATUSES)],
                "大分類": SAMPLE_MAJOR_CATEGORIES[idx % len(SAMPLE_MAJOR_CATEGORIES)],
                "中分類": SAMPLE_MINOR_CATEGORIES[idx % len(SAMPLE_MINOR_CATEGORIES)],
                "タスク": f"サンプルタスク {idx + 1}",
                "担当者": SAMPLE_ASSIGNEES[idx % len(SAMPLE_ASSIGNEES)],
                "優先度": PRIORITY_DEFAULT_OPTIONS[idx % len(PRIORITY_DEFAULT_OPTIONS)],
                "期限": due.isoformat(),
                "備考": "モックデータ" if idx % 2 == 0 else "",
            }
        )
    return tasks


def create_mock_store(
    today: date | None = None,
    sample_count: int = 8,
    snapshot_location: str = DEFAULT_SNAPSHOT_LOCATION,
) -> MockTaskStore:
    """
    Create a store seeded with sample tasks and default option lists.

    Args:
        today: Reference date for sample due dates (defaults to today)
        sample_count: Number of sample tasks to seed
        snapshot_location: Token returned by save_snapshot

    Returns:
        Ready-to-use MockTaskStore
    """
    statuses = StatusSet()
    validations = {
        ValidationField.MAJOR_CATEGORY.value: list(SAMPLE_MAJOR_CATEGORIES),
        ValidationField.MINOR_CATEGORY.value: list(SAMPLE_MINOR_CATEGORIES),
        ValidationField.PRIORITY.value: list(PRIORITY_DEFAULT_OPTIONS),
    }
    return MockTaskStore(
        sample_tasks(today, sample_count),
        statuses=statuses,
        validations=validations,
        snapshot_location=snapshot_location,
    )
