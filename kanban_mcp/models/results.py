"""Result models returned by board API operations."""

from pydantic import BaseModel, Field

from kanban_mcp.models.task import NumberedTask


class ValidationsUpdate(BaseModel):
    """Outcome of replacing the validation registry."""

    ok: bool = True
    validations: dict[str, list[str]] = Field(default_factory=dict)
    statuses: list[str] = Field(default_factory=list)


class ReloadResult(BaseModel):
    """Full board state as returned after a reload."""

    ok: bool = True
    tasks: list[NumberedTask] = Field(default_factory=list)
    statuses: list[str] = Field(default_factory=list)
    validations: dict[str, list[str]] = Field(default_factory=dict)


class SelectOption(BaseModel):
    """One entry of a selection widget."""

    value: str
    label: str


class PriorityChoices(BaseModel):
    """Priority options for a selection widget plus the value to select."""

    options: list[SelectOption] = Field(default_factory=list)
    selected: str = ""

    @property
    def values(self) -> list[str]:
        return [opt.value for opt in self.options]
