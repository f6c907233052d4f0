"""MCP tool definitions for the kanban board."""

import json

from mcp.server.fastmcp import Context
from mcp.types import ToolAnnotations

from kanban_mcp.enums import ResponseFormat
from kanban_mcp.errors import KanbanError
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
from kanban_mcp.ports import BoardApi
from kanban_mcp.priority import PriorityOptionHelper
from kanban_mcp.server import mcp
from kanban_mcp.utils.formatters import (
    _format_board_markdown,
    _format_task_markdown,
    _format_tasks_concise,
    _format_validations_markdown,
)
from kanban_mcp.utils.payloads import denormalize_status_label


def _board(ctx: Context) -> BoardApi:
    """Return the active board API for this session."""
    return ctx.request_context.lifespan_context.api


def _dumps(data: object) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


@mcp.tool(
    name="kanban_list_tasks",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def kanban_list_tasks(params: ListTasksInput, ctx: Context) -> str:
    """
    List the tasks on the board, grouped by status column.

    Each task carries its "No": the 1-based position on the board. Numbers
    are recomputed on every call and shift after a delete, so list again
    before updating, moving or deleting.

    Args:
        params: ListTasksInput containing an optional status filter and response_format

    Returns:
        Markdown board, concise lines, or JSON

    Examples:
        - Whole board: params with no filter
        - One column: params with status="進行中"
        - Machine-readable: params with response_format="json"
    """
    api = _board(ctx)
    tasks = await api.list_tasks()
    if params.status:
        tasks = [t for t in tasks if t.status == params.status]

    if params.response_format == ResponseFormat.JSON:
        return _dumps({"count": len(tasks), "tasks": [t.to_wire() for t in tasks]})

    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks, params.status)

    statuses = [params.status] if params.status else await api.list_statuses()
    title = f"Board ({params.status})" if params.status else "Board"
    return _format_board_markdown(tasks, statuses, title)


@mcp.tool(
    name="kanban_list_statuses",
    annotations=ToolAnnotations(
        title="List Statuses",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def kanban_list_statuses(ctx: Context) -> str:
    """
    List every status that has been used on the board.

    Returns:
        JSON array of status names, in the order they were first seen
    """
    return _dumps(await _board(ctx).list_statuses())


@mcp.tool(
    name="kanban_get_validations",
    annotations=ToolAnnotations(
        title="Get Validations",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def kanban_get_validations(params: GetValidationsInput, ctx: Context) -> str:
    """
    Show the allowed values per column (status, categories, priority).

    Args:
        params: GetValidationsInput containing response_format

    Returns:
        Markdown list or JSON object of column -> allowed values
    """
    validations = await _board(ctx).get_validations()
    if params.response_format == ResponseFormat.JSON:
        return _dumps(validations)
    return _format_validations_markdown(validations)


@mcp.tool(
    name="kanban_update_validations",
    annotations=ToolAnnotations(
        title="Update Validations",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def kanban_update_validations(params: UpdateValidationsInput, ctx: Context) -> str:
    """
    Replace the allowed values per column.

    The whole registry is replaced: columns not supplied are dropped. Values
    are trimmed and de-duplicated. An empty status list falls back to every
    known status; an empty priority list falls back to 高/中/低.

    Args:
        params: UpdateValidationsInput containing the new column -> values mapping

    Returns:
        JSON with the new validations and the known statuses

    Examples:
        - Custom priorities: validations={"priority": ["A", "B", "C"]}
        - Categories: validations={"majorCategory": ["Sales", "Ops"]}
    """
    result = await _board(ctx).update_validations(params.validations)
    return _dumps(result.model_dump())


@mcp.tool(
    name="kanban_add_task",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def kanban_add_task(params: AddTaskInput, ctx: Context) -> str:
    """
    Add a new task at the end of the board.

    A blank status falls back to '未着手'. Due dates are stored as YYYY-MM-DD;
    unparseable dates are dropped.

    Args:
        params: AddTaskInput containing the title and optional fields

    Returns:
        Confirmation with the stored task and its No.

    Examples:
        - Simple task: params with title="Write report"
        - Full task: params with title="Review", status="進行中", priority="高", due_date="2025-03-31"
    """
    try:
        task = await _board(ctx).add_task(params.to_patch())
    except KanbanError as e:
        return f"Error: {e}"
    return f"Task added.\n{_format_task_markdown(task)}"


@mcp.tool(
    name="kanban_update_task",
    annotations=ToolAnnotations(
        title="Update Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def kanban_update_task(params: UpdateTaskInput, ctx: Context) -> str:
    """
    Update fields of an existing task.

    Only the supplied fields change; the rest are kept. The merged task is
    re-validated, so the title can never become blank.

    Args:
        params: UpdateTaskInput containing the task No. and fields to change

    Returns:
        Confirmation with the updated task, or an error message

    Examples:
        - Reassign: params with no=3, assignee="佐藤"
        - Clear due date: params with no=3, due_date=""
    """
    try:
        task = await _board(ctx).update_task(params.no, params.to_patch())
    except KanbanError as e:
        return f"Error: {e}\nTip: Use kanban_list_tasks to find current task numbers."
    return f"Task {params.no} updated.\n{_format_task_markdown(task)}"


@mcp.tool(
    name="kanban_delete_task",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def kanban_delete_task(params: DeleteTaskInput, ctx: Context) -> str:
    """
    Delete a task. Every later task moves up by one number.

    Args:
        params: DeleteTaskInput containing the task No.

    Returns:
        Confirmation message
    """
    if await _board(ctx).delete_task(params.no):
        return f"Task {params.no} deleted. Later tasks were renumbered."
    return f"Task {params.no} not found; nothing deleted."


@mcp.tool(
    name="kanban_move_task",
    annotations=ToolAnnotations(
        title="Move Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def kanban_move_task(params: MoveTaskInput, ctx: Context) -> str:
    """
    Move a task to another status column.

    Args:
        params: MoveTaskInput containing the task No. and target status

    Returns:
        Confirmation with the moved task, or an error message

    Examples:
        - Start work: params with no=2, status="進行中"
        - Finish: params with no=2, status="完了"
    """
    status = denormalize_status_label(params.status)
    try:
        task = await _board(ctx).move_task(params.no, status)
    except KanbanError as e:
        return f"Error: {e}\nTip: Use kanban_list_tasks to find current task numbers."
    return f"Task {params.no} moved to {task.status}.\n{_format_task_markdown(task)}"


@mcp.tool(
    name="kanban_save",
    annotations=ToolAnnotations(
        title="Save Board",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def kanban_save(ctx: Context) -> str:
    """
    Save the board to its backing snapshot.

    Returns:
        Location the board was saved to
    """
    location = await _board(ctx).save_snapshot()
    return f"Board saved to {location}"


@mcp.tool(
    name="kanban_reload",
    annotations=ToolAnnotations(
        title="Reload Board",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def kanban_reload(ctx: Context) -> str:
    """
    Reload the board from its backing snapshot.

    Returns:
        JSON with tasks, statuses and validations after the reload
    """
    result = await _board(ctx).reload_from_snapshot()
    return _dumps(
        {
            "ok": result.ok,
            "tasks": [t.to_wire() for t in result.tasks],
            "statuses": result.statuses,
            "validations": result.validations,
        }
    )


@mcp.tool(
    name="kanban_priority_options",
    annotations=ToolAnnotations(
        title="Priority Options",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def kanban_priority_options(params: PriorityOptionsInput, ctx: Context) -> str:
    """
    Compute the priority choices for a task and which one to select.

    A current value that is not an allowed option is kept as an extra
    choice. Without a current value, an unset choice is offered unless
    prefer_default is set.

    Args:
        params: PriorityOptionsInput containing current_value and prefer_default

    Returns:
        JSON with "options" (value/label pairs), "selected" and "default"
    """
    validations = await _board(ctx).get_validations()
    helper = PriorityOptionHelper(lambda: validations)
    choices = helper.build_choices(params.current_value, prefer_default=params.prefer_default)
    payload = choices.model_dump()
    payload["default"] = helper.get_default_value()
    return _dumps(payload)
