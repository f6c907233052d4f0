"""Tests for the in-memory task store."""

import pytest

from kanban_mcp import (
    PRIORITY_DEFAULT_OPTIONS,
    NumberedTask,
    ReloadResult,
    TaskNotFoundError,
    TaskPatch,
    ValidationError,
    ValidationField,
    ValidationsUpdate,
)
from kanban_mcp.store import SAMPLE_MAJOR_CATEGORIES, SAMPLE_MINOR_CATEGORIES, create_mock_store, sample_tasks

STATUS = ValidationField.STATUS.value
PRIORITY = ValidationField.PRIORITY.value

# ============================================================================
# Seeding Tests
# ============================================================================


class TestSeeding:
    """Tests for the sample-data seeded store."""

    def test_sample_tasks_rotate_fields(self, today):
        """Test sample tasks rotate status, categories and due dates."""
        tasks = sample_tasks(today, 8)
        assert len(tasks) == 8
        assert [t["ステータス"] for t in tasks[:5]] == ["未着手", "進行中", "完了", "保留", "未着手"]
        assert tasks[0]["期限"] == "2025-01-13"
        assert tasks[2]["期限"] == "2025-01-15"
        assert tasks[0]["備考"] == "モックデータ"
        assert tasks[1]["備考"] == ""
        assert tasks[3]["優先度"] == "高"

    @pytest.mark.asyncio
    async def test_seeded_store_lists_samples(self, seeded_store):
        """Test the seeded store numbers the sample tasks 1..8."""
        tasks = await seeded_store.list_tasks()
        assert [t.no for t in tasks] == list(range(1, 9))
        assert tasks[0].title == "サンプルタスク 1"
        assert tasks[7].due_date == "2025-01-20"

    @pytest.mark.asyncio
    async def test_seeded_validations(self, seeded_store):
        """Test the seeded registry holds statuses, categories and priorities."""
        validations = await seeded_store.get_validations()
        assert validations[STATUS] == ["未着手", "進行中", "完了", "保留"]
        assert validations[ValidationField.MAJOR_CATEGORY.value] == list(SAMPLE_MAJOR_CATEGORIES)
        assert validations[ValidationField.MINOR_CATEGORY.value] == list(SAMPLE_MINOR_CATEGORIES)
        assert validations[PRIORITY] == list(PRIORITY_DEFAULT_OPTIONS)

    @pytest.mark.asyncio
    async def test_sample_count_and_location(self, today):
        """Test the factory options."""
        store = create_mock_store(today=today, sample_count=0, snapshot_location="mock://other.xlsx")
        assert await store.list_tasks() == []
        assert await store.save_snapshot() == "mock://other.xlsx"


# ============================================================================
# Read Operation Tests
# ============================================================================


class TestReads:
    """Tests for list and validation reads."""

    @pytest.mark.asyncio
    async def test_list_returns_copies(self, small_store):
        """Test mutating a listed task does not change the store."""
        tasks = await small_store.list_tasks()
        tasks[0].title = "Changed"
        tasks.pop()
        again = await small_store.list_tasks()
        assert again[0].title == "First"
        assert len(again) == 3

    @pytest.mark.asyncio
    async def test_list_statuses(self, small_store):
        """Test statuses come back in first-seen order."""
        assert await small_store.list_statuses() == ["未着手", "進行中", "完了", "保留"]

    @pytest.mark.asyncio
    async def test_get_validations_is_idempotent(self, seeded_store):
        """Test two reads without writes are equal."""
        assert await seeded_store.get_validations() == await seeded_store.get_validations()


# ============================================================================
# Add Tests
# ============================================================================


class TestAddTask:
    """Tests for adding tasks."""

    @pytest.mark.asyncio
    async def test_add_to_empty_store(self, empty_store):
        """Test the basic add scenario on an empty store."""
        added = await empty_store.add_task({"タスク": "Write report"})
        assert isinstance(added, NumberedTask)
        tasks = await empty_store.list_tasks()
        assert len(tasks) == 1
        assert tasks[0].title == "Write report"
        assert tasks[0].status == "未着手"
        assert tasks[0].no == 1
        assert tasks[0].to_wire()["No"] == 1

    @pytest.mark.asyncio
    async def test_add_appends_and_returns_new_length(self, small_store):
        """Test add appends exactly one record and returns No == new length."""
        before = len(await small_store.list_tasks())
        added = await small_store.add_task(TaskPatch(title="Fourth", status="保留"))
        after = await small_store.list_tasks()
        assert len(after) == before + 1
        assert added.no == len(after) == 4
        assert after[-1].title == "Fourth"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    async def test_add_blank_title_fails(self, small_store, title):
        """Test blank titles are rejected and nothing is appended."""
        with pytest.raises(ValidationError):
            await small_store.add_task({"タスク": title})
        assert len(await small_store.list_tasks()) == 3

    @pytest.mark.asyncio
    async def test_add_new_status_grows_status_set(self, empty_store):
        """Test a new status becomes visible in list_statuses."""
        await empty_store.add_task({"タスク": "T", "ステータス": "レビュー"})
        assert "レビュー" in await empty_store.list_statuses()

    @pytest.mark.asyncio
    async def test_add_non_mapping_payload_fails(self, empty_store):
        """Test a non-mapping payload behaves like an empty one."""
        with pytest.raises(ValidationError):
            await empty_store.add_task("Write report")


# ============================================================================
# Update / Move Tests
# ============================================================================


class TestUpdateTask:
    """Tests for updating and moving tasks."""

    @pytest.mark.asyncio
    async def test_update_status_only_changes_status(self, small_store):
        """Test a status update leaves other fields unchanged."""
        before = (await small_store.list_tasks())[1]
        await small_store.update_task(2, {"ステータス": "完了"})
        after = (await small_store.list_tasks())[1]
        assert after.status == "完了"
        assert after.model_dump(exclude={"status"}) == before.model_dump(exclude={"status"})

    @pytest.mark.asyncio
    async def test_update_blank_status_falls_back(self, small_store):
        """Test a blank status falls back to the default status."""
        updated = await small_store.update_task(2, {"status": "  "})
        assert updated.status == "未着手"

    @pytest.mark.asyncio
    async def test_update_returns_position(self, small_store):
        """Test the returned record carries its position."""
        updated = await small_store.update_task("3", TaskPatch(assignee="鈴木"))
        assert updated.no == 3
        assert updated.assignee == "鈴木"
        assert updated.due_date == "2025-02-01"

    @pytest.mark.asyncio
    async def test_update_can_clear_optional_field(self, small_store):
        """Test an explicit empty value clears an optional field."""
        updated = await small_store.update_task(3, {"期限": ""})
        assert updated.due_date == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("no", [0, 4, -1, 1.5, "2.5", "abc", None, True])
    async def test_update_missing_task_raises(self, small_store, no):
        """Test out-of-range and non-integral identifiers raise TaskNotFoundError."""
        with pytest.raises(TaskNotFoundError):
            await small_store.update_task(no, {"タスク": "x"})

    @pytest.mark.asyncio
    async def test_update_blank_title_fails_and_keeps_record(self, small_store):
        """Test a merge that blanks the title is rejected."""
        with pytest.raises(ValidationError):
            await small_store.update_task(1, {"タスク": " "})
        assert (await small_store.list_tasks())[0].title == "First"

    @pytest.mark.asyncio
    async def test_update_explicit_none_title_fails(self, small_store):
        """Test an explicit None title overrides and is rejected."""
        with pytest.raises(ValidationError):
            await small_store.update_task(1, TaskPatch(title=None))

    @pytest.mark.asyncio
    async def test_update_unset_fields_are_preserved(self, small_store):
        """Test fields absent from the patch keep their values."""
        updated = await small_store.update_task(1, TaskPatch(note="memo"))
        assert updated.title == "First"
        assert updated.priority == "高"
        assert updated.note == "memo"

    @pytest.mark.asyncio
    async def test_move_task(self, small_store):
        """Test move_task changes the status only."""
        moved = await small_store.move_task(1, "進行中")
        assert moved.status == "進行中"
        assert moved.title == "First"
        assert moved.no == 1

    @pytest.mark.asyncio
    async def test_move_missing_task_raises(self, small_store):
        """Test moving a missing task raises TaskNotFoundError."""
        with pytest.raises(TaskNotFoundError, match="not found"):
            await small_store.move_task(9, "完了")


# ============================================================================
# Delete Tests
# ============================================================================


class TestDeleteTask:
    """Tests for deleting tasks."""

    @pytest.mark.asyncio
    async def test_delete_shifts_later_tasks(self, small_store):
        """Test deleting k moves the former k+1 record to k."""
        third = (await small_store.list_tasks())[2]
        assert await small_store.delete_task(2) is True
        tasks = await small_store.list_tasks()
        assert len(tasks) == 2
        assert tasks[1].title == third.title
        assert tasks[1].no == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("no", [0, 4, "1.5", 2.5, "", "x", "1_0", "１"])
    async def test_delete_missing_returns_false(self, small_store, no):
        """Test invalid identifiers return False and leave the store unchanged."""
        before = await small_store.list_tasks()
        assert await small_store.delete_task(no) is False
        assert await small_store.list_tasks() == before

    @pytest.mark.asyncio
    async def test_delete_rejects_digit_separators(self, today):
        """Test '1_0' is not read as No.10 even when task 10 exists."""
        store = create_mock_store(today=today, sample_count=12)
        assert await store.delete_task("1_0") is False
        assert len(await store.list_tasks()) == 12

    @pytest.mark.asyncio
    async def test_delete_accepts_numeric_string(self, small_store):
        """Test numeric strings are valid identifiers."""
        assert await small_store.delete_task("1") is True
        assert (await small_store.list_tasks())[0].title == "Second"


# ============================================================================
# Validation and Snapshot Tests
# ============================================================================


class TestValidationsAndSnapshots:
    """Tests for validation updates, save and reload."""

    @pytest.mark.asyncio
    async def test_update_validations_result(self, seeded_store):
        """Test update_validations returns ok, validations and statuses."""
        result = await seeded_store.update_validations({"priority": ["A", "A", "B", ""]})
        assert isinstance(result, ValidationsUpdate)
        assert result.ok is True
        assert result.validations[PRIORITY] == ["A", "B"]
        assert result.statuses == await seeded_store.list_statuses()
        assert (await seeded_store.get_validations())[PRIORITY] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_update_validations_empty_status(self, two_status_store):
        """Test an empty status list yields the full status set."""
        result = await two_status_store.update_validations({"status": []})
        assert result.validations[STATUS] == ["未着手", "完了"]

    @pytest.mark.asyncio
    async def test_validation_statuses_grow_list_statuses(self, empty_store):
        """Test statuses introduced by validations are listed."""
        await empty_store.update_validations({"status": ["新規"]})
        assert "新規" in await empty_store.list_statuses()

    @pytest.mark.asyncio
    async def test_save_snapshot(self, empty_store):
        """Test save returns the mock location token."""
        assert await empty_store.save_snapshot() == "mock://task.xlsx"

    @pytest.mark.asyncio
    async def test_reload_returns_current_state(self, small_store):
        """Test reload returns the in-memory state unchanged."""
        await small_store.add_task({"タスク": "Fourth"})
        result = await small_store.reload_from_snapshot()
        assert isinstance(result, ReloadResult)
        assert result.ok is True
        assert [t.title for t in result.tasks] == ["First", "Second", "Third", "Fourth"]
        assert result.statuses == await small_store.list_statuses()
        assert result.validations == await small_store.get_validations()
