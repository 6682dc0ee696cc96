# File: src/models/api.py
"""
Result and error models returned to the UI layer.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from .event import Event


class PlannerError(Exception):
    """Base class for errors surfaced to the UI layer."""


class EventValidationError(PlannerError, ValueError):
    """A candidate event was rejected at save time."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class MissingTitleError(EventValidationError):
    def __init__(self, message: str = "Please add a title"):
        super().__init__(message, field='title')


class InvalidTimeFormatError(EventValidationError):
    def __init__(self, message: str = "Times must use the HH:MM format", field: str = 'start'):
        super().__init__(message, field=field)


class InvalidTimeRangeError(EventValidationError):
    def __init__(self, message: str = "End time must be after start time"):
        super().__init__(message, field='end')


class EventNotFoundError(PlannerError, KeyError):
    """No event with the requested id."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Event not found"


class CsvImportError(PlannerError):
    """The CSV contents could not be imported; nothing was changed."""


@dataclass
class ValidationError:
    """Represents a validation error."""
    field: str
    message: str
    entry_index: Optional[int] = None

    def __str__(self) -> str:
        """String representation of error."""
        if self.entry_index is not None:
            return f"Entry {self.entry_index} - {self.field}: {self.message}"
        return f"{self.field}: {self.message}"


@dataclass
class SaveResult:
    """Outcome of a successful save."""
    event: Event
    created: bool
    warnings: List[str] = field(default_factory=list)
    overlapping: List[Event] = field(default_factory=list)

    def has_warnings(self) -> bool:
        """Check if the save raised an advisory."""
        return bool(self.warnings)
