"""Priority choices derived from the validation registry."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from kanban_mcp.enums import MEDIUM_PRIORITY, PRIORITY_DEFAULT_OPTIONS, UNSET_PRIORITY_LABEL, ValidationField
from kanban_mcp.models.results import PriorityChoices, SelectOption
from kanban_mcp.utils.normalizers import normalize_text, normalize_validation_values

ValidationsGetter = Callable[[], Mapping[str, Sequence[str]] | None]


class PriorityOptionHelper:
    """
    Computes the priority options a selection widget should offer.

    ``get_validations`` is called on every query so the options always
    reflect the current registry.
    """

    def __init__(
        self,
        get_validations: ValidationsGetter,
        default_options: Sequence[str] = PRIORITY_DEFAULT_OPTIONS,
    ) -> None:
        if not callable(get_validations):
            raise TypeError("PriorityOptionHelper requires a get_validations callable")
        self._get_validations = get_validations
        self._default_options = tuple(default_options)

    def get_options(self) -> list[str]:
        source = self._get_validations() or {}
        base = source.get(ValidationField.PRIORITY.value)
        if not isinstance(base, (list, tuple)) or not base:
            base = self._default_options
        options = normalize_validation_values(list(base))
        if not options:
            for value in self._default_options:
                if value not in options:
                    options.append(value)
        return options

    def get_default_value(self) -> str:
        options = self.get_options()
        if MEDIUM_PRIORITY in options:
            return MEDIUM_PRIORITY
        return options[0] if options else ""

    def build_choices(self, current_value: Any = None, *, prefer_default: bool = False) -> PriorityChoices:
        """
        Build the option list and selected value for a priority selector.

        An unset pseudo-option leads the list only when there is no current
        value and defaults are not forced. A current value missing from the
        options is appended so it is not silently lost.

        Args:
            current_value: Value currently stored on the task
            prefer_default: Select the default instead of leaving it unset

        Returns:
            PriorityChoices with options and the resolved selection
        """
        current = normalize_text(current_value)
        option_values = self.get_options()

        options: list[SelectOption] = []
        if not current and not prefer_default:
            options.append(SelectOption(value="", label=UNSET_PRIORITY_LABEL))
        options.extend(SelectOption(value=v, label=v) for v in option_values)
        if current and current not in option_values:
            options.append(SelectOption(value=current, label=current))

        values = [opt.value for opt in options]
        selection = current
        if not selection or selection not in values:
            if not prefer_default and "" in values:
                selection = ""
            else:
                selection = self.get_default_value()
        if selection not in values:
            selection = values[0] if values else ""
        return PriorityChoices(options=options, selected=selection)
