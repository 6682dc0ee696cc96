# File: src/services/snapshot_service.py
"""
Snapshot codec: maps the events and display settings to six independently
keyed JSON entries in a KeyValueStore.

Reads never raise: an absent, unreadable or corrupt entry yields that
entry's default. Writes are handed to a BackgroundWriter and never raise.
"""

import json
from typing import Any, Iterable, List, Optional, Tuple, Type, Union

from src.core.config_manager import Config
from src.models import DisplaySettings, Event, event_from_dict
from src.services.background_writer import BackgroundWriter
from src.services.storage import KeyValueStore
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class SnapshotService:
    """Loads and persists the planner snapshot, one key at a time."""

    # logical name -> (settings attribute, default, accepted JSON types)
    SETTINGS_KEYS = {
        Config.KEY_TITLE: ('title', Config.DEFAULT_TITLE, (str,)),
        Config.KEY_BACKGROUND_COLOR: ('background_color', Config.DEFAULT_BACKGROUND_COLOR, (str,)),
        Config.KEY_ACCENT_COLOR: ('accent_color', Config.DEFAULT_ACCENT_COLOR, (str,)),
        Config.KEY_PHOTO: ('photo', None, (str, type(None))),
        Config.KEY_DENSE_HOURS: ('dense_hours', Config.DEFAULT_DENSE_HOURS, (bool,)),
    }

    def __init__(self, store: KeyValueStore, writer: Optional[BackgroundWriter] = None):
        """
        Initialize snapshot service.

        Args:
            store: Key/value backend
            writer: Background write queue (a private one is created if omitted)
        """
        self.store = store
        self.writer = writer or BackgroundWriter()

    # --------------------------------------------------------------------------
    # Loading
    # --------------------------------------------------------------------------

    def load_value(self, name: str, default: Any, expected: Tuple[Type, ...]) -> Any:
        """Read one entry, falling back to ``default`` on any problem."""
        key = Config.storage_key(name)
        try:
            raw = self.store.get_item(key)
        except Exception as e:
            logger.debug(f"Could not read '{key}', using default: {e}")
            return default

        if not raw:
            return default

        try:
            value = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.debug(f"Corrupt JSON in '{key}', using default: {e}")
            return default

        if not isinstance(value, expected):
            logger.debug(f"Unexpected type {type(value).__name__} in '{key}', using default")
            return default
        return value

    def load_settings(self) -> DisplaySettings:
        """Load all scalar display settings, each independently."""
        values = {
            attr: self.load_value(name, default, expected)
            for name, (attr, default, expected) in self.SETTINGS_KEYS.items()
        }
        return DisplaySettings(**values)

    def load_events(self) -> List[Event]:
        """
        Load the event collection.

        Records that cannot be coerced into an Event, or that repeat an
        earlier id, are dropped.
        """
        records = self.load_value(Config.KEY_EVENTS, [], (list,))
        events: List[Event] = []
        seen = set()
        for i, record in enumerate(records):
            if not isinstance(record, dict):
                logger.warning(f"Dropping stored event #{i}: not a record")
                continue
            try:
                event = event_from_dict(record)
            except (TypeError, ValueError) as e:
                logger.warning(f"Dropping stored event #{i}: {e}")
                continue
            if event.id in seen:
                logger.warning(f"Dropping stored event #{i}: duplicate id {event.id}")
                continue
            seen.add(event.id)
            events.append(event)

        logger.info(f"Loaded {len(events)} events from storage")
        return events

    # --------------------------------------------------------------------------
    # Saving (fire-and-forget)
    # --------------------------------------------------------------------------

    def save_value(self, name: str, value: Union[str, bool, None, list]) -> None:
        """Serialize now, write in the background."""
        key = Config.storage_key(name)
        payload = json.dumps(value, ensure_ascii=False)
        self.writer.submit(key, lambda: self.store.set_item(key, payload))

    def save_events(self, events: Iterable[Event]) -> None:
        self.save_value(Config.KEY_EVENTS, [e.to_dict() for e in events])

    def save_settings(self, settings: DisplaySettings, names: Optional[Iterable[str]] = None) -> None:
        """Persist the named settings entries (all of them by default)."""
        for name in (names if names is not None else self.SETTINGS_KEYS):
            attr = self.SETTINGS_KEYS[name][0]
            self.save_value(name, getattr(settings, attr))

    def flush(self) -> None:
        self.writer.flush()

    def close(self) -> None:
        self.writer.close()
