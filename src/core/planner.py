# File: src/core/planner.py
"""
Main planner module for the Weekly Planner.
Exposes the operations the UI layer calls and coordinates the store,
validation, layout and persistence components.
"""

from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional

from src.core.config_manager import Config
from src.core.event_store import EventStore
from src.models import (
    Day,
    DisplaySettings,
    Event,
    EventNotFoundError,
    SaveResult,
    is_hex_color,
    new_event_id,
    row_labels,
)
from src.processors.layout_engine import EventBlock, layout_week, sort_events
from src.processors.overlap_detector import find_overlaps
from src.processors.validator import EventValidator
from src.services.background_writer import BackgroundWriter
from src.services.csv_service import CsvService
from src.services.snapshot_service import SnapshotService
from src.services.storage import KeyValueStore, SQLiteKeyValueStore
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

_UNSET = object()

OVERLAP_WARNING = "This overlaps another event on the same day."


class Planner:
    """
    Application core for the weekly planner.

    Owns the event store and display settings, hydrated once from the
    snapshot and written back after every mutation.
    """

    def __init__(
        self,
        snapshot: SnapshotService,
        events: Optional[List[Event]] = None,
        settings: Optional[DisplaySettings] = None
    ):
        """
        Initialize the planner.

        Args:
            snapshot: Persistence codec used for every write-back
            events: Initial events (already loaded)
            settings: Initial display settings (already loaded)
        """
        self.snapshot = snapshot
        self.store = EventStore(events or [])
        self._settings = settings or DisplaySettings()
        self.validator = EventValidator()
        self.csv_service = CsvService()

        self.store.subscribe(self.snapshot.save_events)

    @classmethod
    def open(
        cls,
        store: Optional[KeyValueStore] = None,
        writer: Optional[BackgroundWriter] = None
    ) -> 'Planner':
        """Hydrate a planner from a key/value store (SQLite file by default)."""
        if store is None:
            Config.ensure_dirs()
            store = SQLiteKeyValueStore(Config.DB_FILE)
        snapshot = SnapshotService(store, writer)
        planner = cls(
            snapshot,
            events=snapshot.load_events(),
            settings=snapshot.load_settings(),
        )
        logger.info(f"Planner opened with {len(planner.store)} events")
        return planner

    # --------------------------------------------------------------------------
    # Read side
    # --------------------------------------------------------------------------

    @property
    def settings(self) -> DisplaySettings:
        return replace(self._settings)

    @property
    def events(self) -> List[Event]:
        """Events in store order (the order used for CSV export)."""
        return self.store.events

    def is_existing(self, event_id: str) -> bool:
        """True when the id belongs to a saved event (edit rather than add)."""
        return self.store.contains(event_id)

    def sorted_events(self) -> List[Event]:
        return sort_events(self.store)

    def layout(self, row_height: float = Config.ROW_HEIGHT) -> Dict[Day, List[EventBlock]]:
        """Positioned blocks per day column for the current density."""
        return layout_week(self.store, row_height=row_height, dense=self._settings.dense_hours)

    def row_labels(self) -> List[str]:
        return row_labels(self._settings.dense_hours)

    def color_choices(self) -> Dict[str, List[str]]:
        """Swatches offered by the settings panel, keyed by setting name."""
        return {
            'accent_color': list(Config.ACCENT_PALETTE),
            'background_color': list(Config.BACKGROUND_PALETTE),
        }

    # --------------------------------------------------------------------------
    # Event operations
    # --------------------------------------------------------------------------

    def add_event(self) -> Event:
        """Return a fresh unsaved draft with default values."""
        return Event(
            id=new_event_id(),
            title="",
            day=Day.from_value(Config.DEFAULT_DAY),
            start=Config.DEFAULT_START,
            end=Config.DEFAULT_END,
            category=Config.DEFAULT_CATEGORY,
            color=self._settings.accent_color,
            notes="",
        )

    def edit_event(self, event_id: str) -> Event:
        """
        Return an editable copy of a saved event.

        Raises:
            EventNotFoundError: if no event has this id
        """
        event = self.store.get(event_id)
        if event is None:
            raise EventNotFoundError(f"No event with id {event_id}")
        return event.copy()

    def save_event(self, candidate: Event) -> SaveResult:
        """
        Validate and commit a candidate (insert or update by id).

        Overlap with another same-day event does not block the save; it is
        reported in the result's warnings.

        Raises:
            EventValidationError: on a missing title, malformed time or
                invalid time range (nothing is changed)
        """
        # copy() re-runs __post_init__, so a day set by name becomes a Day
        event = candidate.copy()
        self.validator.validate(event)

        overlapping = find_overlaps(event, self.store)
        warnings = []
        if overlapping:
            warnings.append(OVERLAP_WARNING)
            titles = ", ".join(e.title for e in overlapping)
            logger.warning(f"'{event.title}' overlaps: {titles}")

        created = not self.store.contains(event.id)
        if created:
            self.store.add(event)
        else:
            self.store.update(event)

        logger.info(f"{'Added' if created else 'Updated'} event '{event.title}' on {event.day.value}")
        return SaveResult(event=event, created=created, warnings=warnings, overlapping=overlapping)

    def delete_event(self, event_id: str) -> bool:
        """Remove an event. Returns False if it did not exist."""
        deleted = self.store.delete(event_id)
        if deleted:
            logger.info(f"Deleted event {event_id}")
        return deleted

    # --------------------------------------------------------------------------
    # CSV interchange
    # --------------------------------------------------------------------------

    def export_csv(self) -> str:
        return self.csv_service.export_csv(self.store)

    def export_csv_file(self, directory: Path) -> Path:
        return self.csv_service.write_export(self.store, directory)

    def import_csv(self, contents: str) -> int:
        """
        Replace every event with the CSV's records.

        Imported events are not validated. Returns the number imported.

        Raises:
            CsvImportError: if the contents are malformed (nothing is changed)
        """
        events = self.csv_service.import_csv(contents)
        self.store.replace_all(events)
        logger.info(f"Imported {len(events)} events from CSV")
        return len(events)

    def import_csv_file(self, path: Path) -> int:
        events = self.csv_service.read_import(path)
        self.store.replace_all(events)
        logger.info(f"Imported {len(events)} events from {path}")
        return len(events)

    # --------------------------------------------------------------------------
    # Display settings
    # --------------------------------------------------------------------------

    def set_display_settings(
        self,
        *,
        title=_UNSET,
        background_color=_UNSET,
        accent_color=_UNSET,
        photo=_UNSET,
        dense_hours=_UNSET
    ) -> DisplaySettings:
        """
        Change any subset of the display settings; only changed entries are persisted.

        Raises:
            ValueError: on a color that is not '#rgb'/'#rrggbb' or a wrongly
                typed value (nothing is changed)
        """
        requested = {
            Config.KEY_TITLE: ('title', title),
            Config.KEY_BACKGROUND_COLOR: ('background_color', background_color),
            Config.KEY_ACCENT_COLOR: ('accent_color', accent_color),
            Config.KEY_PHOTO: ('photo', photo),
            Config.KEY_DENSE_HOURS: ('dense_hours', dense_hours),
        }
        changes = {}
        changed_keys = []
        for key, (attr, value) in requested.items():
            if value is _UNSET:
                continue
            self._check_setting(attr, value)
            if getattr(self._settings, attr) != value:
                changes[attr] = value
                changed_keys.append(key)

        if changes:
            self._settings = replace(self._settings, **changes)
            self.snapshot.save_settings(self._settings, changed_keys)
            logger.debug(f"Display settings changed: {', '.join(changes)}")
        return self.settings

    @staticmethod
    def _check_setting(attr: str, value) -> None:
        if attr in ('background_color', 'accent_color'):
            if not is_hex_color(value):
                raise ValueError(f"Invalid color for {attr}: {value!r}")
        elif attr == 'title':
            if not isinstance(value, str):
                raise ValueError("Title must be a string")
        elif attr == 'photo':
            if value is not None and not isinstance(value, str):
                raise ValueError("Photo must be a string reference or None")
        elif attr == 'dense_hours':
            if not isinstance(value, bool):
                raise ValueError("dense_hours must be a boolean")

    # --------------------------------------------------------------------------
    # Lifecycle
    # --------------------------------------------------------------------------

    def flush(self) -> None:
        """Wait for queued persistence writes."""
        self.snapshot.flush()

    def close(self) -> None:
        self.snapshot.close()
