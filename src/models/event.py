# File: src/models/event.py

import uuid
from dataclasses import dataclass, field, replace
from typing import Optional

from src.core.config_manager import Config
from .enums import Day
from .common import time_to_row


def new_event_id() -> str:
    """Fresh opaque identifier for an event."""
    return uuid.uuid4().hex


@dataclass
class Event:
    """A user-authored block in the weekly grid."""
    title: str
    day: Day
    start: str  # "HH:MM" format
    end: str    # "HH:MM" format
    category: str = ""
    color: str = Config.DEFAULT_ACCENT_COLOR
    notes: str = ""
    id: str = field(default_factory=new_event_id)

    def __post_init__(self):
        """Convert string day to enum and normalize optional text fields."""
        if not isinstance(self.day, Day):
            self.day = Day.from_value(self.day)
        self.category = self.category or ""
        self.notes = self.notes or ""

    @property
    def start_row(self) -> float:
        return time_to_row(self.start)

    @property
    def end_row(self) -> float:
        return time_to_row(self.end)

    def duration_rows(self) -> float:
        """Span on the grid in hours (half-hour granularity)."""
        return self.end_row - self.start_row

    def overlaps_with(self, other: 'Event') -> bool:
        """Check if this event shares grid time with another on the same day."""
        if self.day != other.day:
            return False
        return max(self.start_row, other.start_row) < min(self.end_row, other.end_row)

    def copy(self, **changes) -> 'Event':
        """Return a copy with the given fields replaced (id kept unless given)."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert to a snapshot record."""
        return {
            'id': self.id,
            'title': self.title,
            'day': self.day.value,
            'start': self.start,
            'end': self.end,
            'category': self.category,
            'color': self.color,
            'notes': self.notes,
        }


def event_from_dict(data: dict, event_id: Optional[str] = None) -> Event:
    """
    Create Event from a loose record.

    Missing optional fields take their defaults. ``event_id`` overrides the
    record's id; when neither is present a fresh id is generated.

    Raises:
        ValueError: if the day is unknown or title/start/end are missing
    """
    missing = [k for k in ('title', 'start', 'end') if data.get(k) is None]
    if missing:
        raise ValueError(f"Event record missing fields: {', '.join(missing)}")

    resolved_id = event_id or data.get('id') or new_event_id()
    return Event(
        id=str(resolved_id),
        title=str(data['title']),
        day=Day.from_value(data.get('day') or Config.DEFAULT_DAY),
        start=str(data['start']).strip(),
        end=str(data['end']).strip(),
        category=str(data.get('category') or ''),
        color=str(data['color']) if data.get('color') is not None else Config.DEFAULT_ACCENT_COLOR,
        notes=str(data.get('notes') or ''),
    )
