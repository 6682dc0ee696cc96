# File: src/processors/layout_engine.py
"""
Sort/layout engine.
Produces the day-grouped, time-ordered projection of the events and the
vertical geometry of each event block on the grid.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from src.core.config_manager import Config
from src.models import Day, Event
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class EventBlock:
    """An event positioned in its day column."""
    event: Event
    top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


def _sort_key(event: Event) -> Tuple[int, float]:
    try:
        start = event.start_row
    except ValueError:
        start = float('inf')
    return event.day.index, start


def sort_events(events: Iterable[Event]) -> List[Event]:
    """
    Order by weekday (Monday first), then start row.
    Stable: ties keep their original order.
    """
    return sorted(events, key=_sort_key)


def group_by_day(events: Iterable[Event]) -> Dict[Day, List[Event]]:
    """Partition sorted events into one column per day (all seven present)."""
    columns: Dict[Day, List[Event]] = {day: [] for day in Day}
    for event in sort_events(events):
        columns[event.day].append(event)
    return columns


def event_geometry(
    event: Event,
    row_height: float = Config.ROW_HEIGHT,
    dense: bool = False
) -> Tuple[float, float]:
    """
    Vertical offset and height of an event block.

    Raises:
        ValueError: if the event's times cannot be parsed
    """
    density = 2 if dense else 1
    start_row = event.start_row
    top = start_row * row_height * density
    height = (event.end_row - start_row) * row_height * density
    return top, height


def layout_week(
    events: Iterable[Event],
    row_height: float = Config.ROW_HEIGHT,
    dense: bool = False
) -> Dict[Day, List[EventBlock]]:
    """
    Position every event in its day column.

    Overlapping events are not stacked; their blocks overlap.
    Events with unparseable times are left out.
    """
    layout: Dict[Day, List[EventBlock]] = {}
    for day, day_events in group_by_day(events).items():
        blocks = []
        for event in day_events:
            try:
                top, height = event_geometry(event, row_height, dense)
            except ValueError as e:
                logger.warning(f"Cannot place '{event.title}' on {day.value}: {e}")
                continue
            blocks.append(EventBlock(event=event, top=top, height=height))
        layout[day] = blocks
    return layout
