# File: src/models/enums.py

from enum import Enum
from typing import Union

class Day(Enum):
    """Weekday of an abstract week (no calendar date attached)."""
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def index(self) -> int:
        """Monday=0 .. Sunday=6."""
        return list(Day).index(self)

    @property
    def short_name(self) -> str:
        return self.value[:3]

    @classmethod
    def from_value(cls, value: Union["Day", str]) -> "Day":
        """
        Resolve a Day from an enum member, a full name or a three-letter
        abbreviation (case-insensitive).

        Raises:
            ValueError: if the value names no weekday
        """
        if isinstance(value, cls):
            return value
        clean = str(value).strip().lower()
        for day in cls:
            if clean in (day.value.lower(), day.short_name.lower(), day.name.lower()):
                return day
        raise ValueError(f"Unknown day: {value!r}")
