"""Exception types raised by the board store and runtime."""


class KanbanError(Exception):
    """Base class for all board errors surfaced to callers."""


class ValidationError(KanbanError, ValueError):
    """A task payload failed normalization (e.g. blank title)."""


class TaskNotFoundError(KanbanError, LookupError):
    """A positional identifier does not resolve to a stored task."""

    def __init__(self, no: object) -> None:
        self.no = no
        super().__init__(f"Task No.{no} not found")


class MalformedPushPayload(KanbanError, ValueError):
    """A pushed string payload could not be decoded as JSON."""
