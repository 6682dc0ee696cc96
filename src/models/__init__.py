from .enums import Day
from .common import time_to_row, format_row, is_valid_time, grid_rows, row_labels
from .event import Event, event_from_dict, new_event_id
from .settings import DisplaySettings, is_hex_color
from .api import (
    PlannerError,
    EventValidationError,
    MissingTitleError,
    InvalidTimeFormatError,
    InvalidTimeRangeError,
    EventNotFoundError,
    CsvImportError,
    ValidationError,
    SaveResult,
)

__all__ = [
    "Day",
    "time_to_row",
    "format_row",
    "is_valid_time",
    "grid_rows",
    "row_labels",
    "Event",
    "event_from_dict",
    "new_event_id",
    "DisplaySettings",
    "is_hex_color",
    "PlannerError",
    "EventValidationError",
    "MissingTitleError",
    "InvalidTimeFormatError",
    "InvalidTimeRangeError",
    "EventNotFoundError",
    "CsvImportError",
    "ValidationError",
    "SaveResult",
]
