"""MCP tool definitions for the kanban board."""

# Import all tools to register them with the MCP server
from kanban_mcp.tools.board import (
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
    # Read tools
    "kanban_list_tasks",
    "kanban_list_statuses",
    "kanban_get_validations",
    "kanban_priority_options",
    # Write tools
    "kanban_add_task",
    "kanban_update_task",
    "kanban_delete_task",
    "kanban_move_task",
    "kanban_update_validations",
    # Snapshot tools
    "kanban_save",
    "kanban_reload",
]
