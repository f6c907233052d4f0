"""Formatting utilities for board output."""

from kanban_mcp.models.task import NumberedTask
from kanban_mcp.utils.payloads import normalize_status_label


def _format_task_concise(task: NumberedTask) -> str:
    """
    Format a single task in concise format for token efficiency.

    Output: "#5: Title [進行中] (高, due:2024-12-31, 田中)"
    """
    title = task.title[:50] if task.title else "No title"

    meta = []
    if task.priority:
        meta.append(task.priority)
    if task.due_date:
        meta.append(f"due:{task.due_date}")
    if task.assignee:
        meta.append(task.assignee)

    line = f"#{task.no}: {title} [{normalize_status_label(task.status)}]"
    if meta:
        return f"{line} ({', '.join(meta)})"
    return line


def _format_tasks_concise(tasks: list[NumberedTask], title: str | None = None) -> str:
    """
    Format a list of tasks in concise format.

    Output:
    2 task(s) | 進行中
    #1: Task one [進行中] (高)
    #4: Task two [進行中]
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"

    lines = [header]
    for task in tasks:
        lines.append(_format_task_concise(task))
    return "\n".join(lines)


def _format_task_markdown(task: NumberedTask) -> str:
    """Format a single task as markdown."""
    lines = [f"### [{task.no}] {task.title or 'No title'}"]

    details = [f"**Status**: {normalize_status_label(task.status)}"]
    category = " / ".join(c for c in (task.major_category, task.minor_category) if c)
    if category:
        details.append(f"**Category**: {category}")
    if task.priority:
        details.append(f"**Priority**: {task.priority}")
    if task.assignee:
        details.append(f"**Assignee**: {task.assignee}")
    if task.due_date:
        details.append(f"**Due**: {task.due_date}")
    lines.append(" | ".join(details))

    if task.note:
        lines.append(f"**Note:** {task.note}")

    return "\n".join(lines)


def _format_board_markdown(
    tasks: list[NumberedTask],
    statuses: list[str] | None = None,
    title: str = "Board",
) -> str:
    """
    Format tasks as a markdown board, one section per status column.

    Columns follow ``statuses`` order; statuses that only appear on tasks
    are appended after them. Empty columns are listed as such.
    """
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    columns: dict[str, list[NumberedTask]] = {s: [] for s in (statuses or [])}
    for task in tasks:
        columns.setdefault(task.status, []).append(task)

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]
    for status, column in columns.items():
        lines.append(f"## {normalize_status_label(status)} ({len(column)})")
        lines.append("")
        if not column:
            lines.append("_No tasks_")
            lines.append("")
            continue
        for task in column:
            lines.append(_format_task_markdown(task))
            lines.append("")

    return "\n".join(lines)


def _format_validations_markdown(validations: dict[str, list[str]], title: str = "Validations") -> str:
    """Format the validation registry as a markdown list."""
    if not validations:
        return f"# {title}\n\nNo validations defined."

    lines = [f"# {title}", ""]
    for key, values in validations.items():
        lines.append(f"- **{key}**: {', '.join(values) if values else '(none)'}")
    return "\n".join(lines)
