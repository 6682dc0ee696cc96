# File: src/core/event_store.py
"""
In-memory event collection.

Owns event identity: ids are unique after every mutation. Successful
mutations notify subscribers with the full current event list.
"""

from typing import Callable, Iterable, Iterator, List, Optional

from src.models.event import Event
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

Listener = Callable[[List[Event]], None]


class EventStore:
    """Single-owner mutable collection of events in insertion order."""

    def __init__(self, events: Optional[Iterable[Event]] = None):
        self._events: List[Event] = []
        self._listeners: List[Listener] = []
        if events:
            self._events = self._checked_unique(events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> List[Event]:
        """Copy of the events in insertion order."""
        return list(self._events)

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked after each successful mutation."""
        self._listeners.append(listener)

    def get(self, event_id: str) -> Optional[Event]:
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    def contains(self, event_id: str) -> bool:
        return self.get(event_id) is not None

    def add(self, event: Event) -> bool:
        """Append the event unless its id is already present."""
        if self.contains(event.id):
            logger.debug(f"Add skipped, id already present: {event.id}")
            return False
        self._events.append(event)
        self._notify()
        return True

    def update(self, event: Event) -> bool:
        """Replace the event with the same id in place. No-op if absent."""
        for i, existing in enumerate(self._events):
            if existing.id == event.id:
                self._events[i] = event
                self._notify()
                return True
        logger.debug(f"Update skipped, id not found: {event.id}")
        return False

    def delete(self, event_id: str) -> bool:
        """Remove the event with the given id. No-op if absent."""
        remaining = [e for e in self._events if e.id != event_id]
        if len(remaining) == len(self._events):
            logger.debug(f"Delete skipped, id not found: {event_id}")
            return False
        self._events = remaining
        self._notify()
        return True

    def replace_all(self, events: Iterable[Event]) -> None:
        """
        Substitute the whole collection.

        No semantic validation is run on the new events.

        Raises:
            ValueError: if the new events contain duplicate ids (store unchanged)
        """
        self._events = self._checked_unique(events)
        logger.info(f"Event store replaced with {len(self._events)} events")
        self._notify()

    @staticmethod
    def _checked_unique(events: Iterable[Event]) -> List[Event]:
        new_events = list(events)
        seen = set()
        for event in new_events:
            if event.id in seen:
                raise ValueError(f"Duplicate event id: {event.id}")
            seen.add(event.id)
        return new_events

    def _notify(self) -> None:
        snapshot = self.events
        for listener in self._listeners:
            listener(snapshot)
