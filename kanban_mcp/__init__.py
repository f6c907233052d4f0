"""
MCP Server for a kanban task board.

This server exposes a kanban board (status columns, categories, priorities
and due dates) as MCP tools. When no host backend is attached, an in-memory
mock store seeded with sample tasks serves every operation.
"""

# Re-export enums and constants
from kanban_mcp.enums import (
    DEFAULT_STATUSES,
    PRIORITY_DEFAULT_OPTIONS,
    UNSET_STATUS_LABEL,
    ResponseFormat,
    RunMode,
    ValidationField,
)

# Re-export errors
from kanban_mcp.errors import KanbanError, MalformedPushPayload, TaskNotFoundError, ValidationError

# Re-export models
from kanban_mcp.models import (
    AddTaskInput,
    DeleteTaskInput,
    GetValidationsInput,
    ListTasksInput,
    MoveTaskInput,
    NumberedTask,
    PriorityChoices,
    PriorityOptionsInput,
    ReloadResult,
    SelectOption,
    TaskPatch,
    TaskRecord,
    UpdateTaskInput,
    UpdateValidationsInput,
    ValidationsUpdate,
)

# Re-export core components
from kanban_mcp.ports import BoardApi
from kanban_mcp.priority import PriorityOptionHelper
from kanban_mcp.registry import StatusSet, ValidationRegistry
from kanban_mcp.runtime import BoardRuntime
from kanban_mcp.store import MockTaskStore, create_mock_store

# Re-export MCP server instance
from kanban_mcp.server import BoardContext, mcp

# Re-export tools
from kanban_mcp.tools import (
    kanban_add_task,
    kanban_delete_task,
    kanban_get_validations,
    kanban_list_statuses,
    kanban_list_tasks,
    kanban_move_task,
    kanban_priority_options,
    kanban_reload,
    kanban_save,
    kanban_update_task,
    kanban_update_validations,
)

__all__ = [
    # Enums and constants
    "ResponseFormat",
    "RunMode",
    "ValidationField",
    "DEFAULT_STATUSES",
    "PRIORITY_DEFAULT_OPTIONS",
    "UNSET_STATUS_LABEL",
    # Errors
    "KanbanError",
    "ValidationError",
    "TaskNotFoundError",
    "MalformedPushPayload",
    # Task and result models
    "TaskRecord",
    "NumberedTask",
    "TaskPatch",
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
    # Core components
    "BoardApi",
    "StatusSet",
    "ValidationRegistry",
    "MockTaskStore",
    "create_mock_store",
    "PriorityOptionHelper",
    "BoardRuntime",
    # MCP server
    "mcp",
    "BoardContext",
    # Tools
    "kanban_list_tasks",
    "kanban_list_statuses",
    "kanban_get_validations",
    "kanban_priority_options",
    "kanban_add_task",
    "kanban_update_task",
    "kanban_delete_task",
    "kanban_move_task",
    "kanban_update_validations",
    "kanban_save",
    "kanban_reload",
]
