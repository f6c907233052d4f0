"""Input models for Kanban MCP tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kanban_mcp.enums import ResponseFormat
from kanban_mcp.models.task import TaskPatch

# ============================================================================
# Read Tool Input Models
# ============================================================================


class ListTasksInput(BaseModel):
    """Input model for listing tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    status: str | None = Field(default=None, description="Only list tasks with this status (e.g., '進行中')")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' board, 'concise' lines, or 'json'",
    )


class GetValidationsInput(BaseModel):
    """Input model for reading the validation registry."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class PriorityOptionsInput(BaseModel):
    """Input model for computing priority choices."""

    model_config = ConfigDict(str_strip_whitespace=True)

    current_value: str | None = Field(default=None, description="Priority currently set on the task, if any")
    prefer_default: bool = Field(
        default=False,
        description="Select the default priority instead of offering an unset option",
    )


# ============================================================================
# Write Tool Input Models
# ============================================================================


class _TaskFieldsInput(BaseModel):
    """Optional task fields shared by the add and update inputs."""

    model_config = ConfigDict(str_strip_whitespace=True)

    status: str | None = Field(default=None, description="Status column (e.g., '未着手', '進行中', '完了')")
    major_category: str | None = Field(default=None, description="Major category (大分類)")
    minor_category: str | None = Field(default=None, description="Minor category (中分類)")
    assignee: str | None = Field(default=None, description="Person responsible for the task")
    priority: str | None = Field(default=None, description="Priority (e.g., '高', '中', '低')")
    due_date: str | None = Field(default=None, description="Due date, e.g. '2025-03-31' or '2025/03/31'")
    note: str | None = Field(default=None, description="Free-form note (備考)")

    def to_patch(self) -> TaskPatch:
        """Convert the explicitly supplied fields into a TaskPatch."""
        return TaskPatch.model_validate(self.model_dump(exclude_unset=True, exclude={"no"}))


class AddTaskInput(_TaskFieldsInput):
    """Input model for adding a new task."""

    title: str = Field(..., description="Task title (required)", max_length=1000)


class UpdateTaskInput(_TaskFieldsInput):
    """Input model for updating a task."""

    no: int = Field(..., description="Task No. as shown by kanban_list_tasks", ge=1)
    title: str | None = Field(default=None, description="New task title", max_length=1000)


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    no: int = Field(..., description="Task No. to delete", ge=1)


class MoveTaskInput(BaseModel):
    """Input model for moving a task to another status column."""

    model_config = ConfigDict(str_strip_whitespace=True)

    no: int = Field(..., description="Task No. to move", ge=1)
    status: str = Field(..., description="Target status column")


class UpdateValidationsInput(BaseModel):
    """Input model for replacing the validation registry."""

    validations: dict[str, list[str]] = Field(
        default_factory=dict,
        description=(
            "Allowed values per column, e.g. {'priority': ['高', '中', '低'], 'majorCategory': ['A']}. "
            "Columns left out are dropped; status and priority fall back to defaults."
        ),
    )

    @field_validator("validations")
    @classmethod
    def validate_keys(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        if any(not key.strip() for key in v):
            raise ValueError("Validation column names cannot be empty")
        return v
