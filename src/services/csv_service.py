# File: src/services/csv_service.py
"""
Tabular codec: CSV export and import of the event collection.

Export writes the fixed column order with every value quoted. Import maps
columns by header name, gives every record a fresh id and is all-or-nothing:
any malformed row aborts the whole import.
"""

import csv
import io
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from src.core.config_manager import Config
from src.models import CsvImportError, Day, Event, event_from_dict, new_event_id
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

# Normalized header name -> Event field
COLUMN_FIELDS: Dict[str, str] = {
    'title': 'title',
    'name': 'title',
    'subject': 'title',
    'day': 'day',
    'weekday': 'day',
    'start': 'start',
    'start_time': 'start',
    'end': 'end',
    'end_time': 'end',
    'category': 'category',
    'color': 'color',
    'colour': 'color',
    'notes': 'notes',
    'note': 'notes',
}

# Used when a column is absent from the file
FIELD_DEFAULTS: Dict[str, str] = {
    'title': '',
    'day': Config.DEFAULT_DAY,
    'start': Config.DEFAULT_START,
    'end': Config.DEFAULT_END,
    'category': '',
    'color': Config.DEFAULT_ACCENT_COLOR,
    'notes': '',
}


class CsvService:
    """Converts between events and CSV text."""

    def __init__(self, columns: Optional[List[str]] = None):
        self.columns = columns or list(Config.CSV_COLUMNS)

    # --------------------------------------------------------------------------
    # Export
    # --------------------------------------------------------------------------

    def export_csv(self, events: Iterable[Event]) -> str:
        """
        Render events as CSV, one row per event in the given order.

        The header is plain; every value is quote-wrapped with inner quotes doubled.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
        count = 0
        for event in events:
            record = event.to_dict()
            writer.writerow(['' if record.get(c) is None else record.get(c) for c in self.columns])
            count += 1

        logger.debug(f"Exported {count} events to CSV")
        header = ','.join(self.columns)
        body = buffer.getvalue().rstrip('\n')
        return f"{header}\n{body}" if body else header

    def write_export(self, events: Iterable[Event], directory: Path) -> Path:
        """Write the export under its fixed filename and return the path."""
        path = Path(directory) / Config.EXPORT_FILENAME
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.export_csv(events), encoding='utf-8')
        logger.info(f"CSV exported to {path}")
        return path

    # --------------------------------------------------------------------------
    # Import
    # --------------------------------------------------------------------------

    def import_csv(self, text: str) -> List[Event]:
        """
        Parse CSV text into new events with fresh ids.

        Raises:
            CsvImportError: if the text is empty, has no recognised column,
                has a row wider than the header, names an unknown day, or is
                not parseable as CSV
        """
        if text is None:
            raise CsvImportError("Failed to import CSV: no contents")

        try:
            rows = [row for row in csv.reader(io.StringIO(text.lstrip('\ufeff')), strict=True) if row]
        except csv.Error as e:
            raise CsvImportError(f"Failed to import CSV: {e}") from e

        if not rows:
            raise CsvImportError("Failed to import CSV: file is empty")

        header, *body = rows
        fields = self._map_header(header)

        events = [
            self._row_to_event(row, fields, row_no)
            for row_no, row in enumerate(body, start=2)
        ]
        logger.info(f"Parsed {len(events)} events from CSV")
        return events

    def read_import(self, path: Path) -> List[Event]:
        """Read a CSV file and parse it."""
        try:
            text = Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise CsvImportError(f"Failed to import CSV: {e}") from e
        return self.import_csv(text)

    def _map_header(self, header: List[str]) -> List[Optional[str]]:
        """Resolve each header cell to an Event field (None for unknown columns)."""
        fields: List[Optional[str]] = []
        for raw in header:
            name = raw.replace('"', '').strip().lower().replace(' ', '_')
            field_name = COLUMN_FIELDS.get(name)
            if field_name is None:
                logger.debug(f"Ignoring CSV column '{raw}'")
            fields.append(field_name)

        if not any(fields):
            raise CsvImportError("Failed to import CSV: no recognised columns in header")

        missing = sorted(set(FIELD_DEFAULTS) - set(f for f in fields if f))
        if missing:
            logger.warning(f"CSV is missing columns, using defaults: {', '.join(missing)}")
        return fields

    def _row_to_event(self, row: List[str], fields: List[Optional[str]], row_no: int) -> Event:
        if len(row) > len(fields) and any(cell.strip() for cell in row[len(fields):]):
            raise CsvImportError(
                f"Failed to import CSV: row {row_no} has {len(row)} fields, header has {len(fields)}"
            )

        record = dict(FIELD_DEFAULTS)
        for field_name, value in zip(fields, row):
            if field_name:
                record[field_name] = value

        day = record['day'].strip() or Config.DEFAULT_DAY
        try:
            record['day'] = Day.from_value(day)
        except ValueError as e:
            raise CsvImportError(f"Failed to import CSV: row {row_no}: {e}") from e

        return event_from_dict(record, event_id=new_event_id())
