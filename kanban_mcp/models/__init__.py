"""Pydantic models for Kanban MCP."""

from kanban_mcp.models.inputs import (
    AddTaskInput,
    DeleteTaskInput,
    GetValidationsInput,
    ListTasksInput,
    MoveTaskInput,
    PriorityOptionsInput,
    UpdateTaskInput,
    UpdateValidationsInput,
)
from kanban_mcp.models.results import PriorityChoices, ReloadResult, SelectOption, ValidationsUpdate
from kanban_mcp.models.task import NumberedTask, TaskPatch, TaskRecord

__all__ = [
    # Task models
    "TaskRecord",
    "NumberedTask",
    "TaskPatch",
    # Result models
    "ValidationsUpdate",
    "ReloadResult",
    "SelectOption",
    "PriorityChoices",
    # Tool input models
    "ListTasksInput",
    "GetValidationsInput",
    "PriorityOptionsInput",
    "AddTaskInput",
    "UpdateTaskInput",
    "DeleteTaskInput",
    "MoveTaskInput",
    "UpdateValidationsInput",
]
