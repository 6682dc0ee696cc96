# File: src/models/common.py
"""
Time model: conversion between "HH:MM" strings and grid rows.

A grid row is a real-valued coordinate counting hours since the grid start
hour, snapped down to the half hour.
"""

import math
import re
from typing import List

from src.core.config_manager import Config

# Loose numeric shape accepted by the grid conversion
_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")
# Strict zero-padded 24h form required for stored events
_STRICT_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def time_to_row(time: str, start_hour: int = Config.GRID_START_HOUR) -> float:
    """
    Convert an "HH:MM" string to a grid row.

    Raises:
        ValueError: if the string is not two numeric fields separated by ':'
    """
    match = _TIME_PATTERN.match(time) if isinstance(time, str) else None
    if not match:
        raise ValueError(f"Malformed time: {time!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    return (hour - start_hour) + (0.5 if minute >= 30 else 0)


def format_row(row: float) -> str:
    """Format an absolute hour value as "HH:MM"; any fraction renders as ':30'."""
    whole = math.floor(row)
    mins = ':30' if (row - whole) > 0 else ':00'
    hh = ((whole % 24) + 24) % 24
    return f"{hh:02d}{mins}"


def is_valid_time(value: str) -> bool:
    """Check for a zero-padded 24-hour "HH:MM" string."""
    return isinstance(value, str) and bool(_STRICT_TIME_PATTERN.match(value))


def grid_rows(dense: bool = False) -> List[float]:
    """Absolute hour of every rendered row: hourly, or half-hourly when dense."""
    if dense:
        return [Config.GRID_START_HOUR + i * 0.5 for i in range(Config.GRID_HOURS * 2)]
    return [float(Config.GRID_START_HOUR + i) for i in range(Config.GRID_HOURS)]


def row_labels(dense: bool = False) -> List[str]:
    """Time labels for the grid's left column."""
    return [format_row(h) for h in grid_rows(dense)]
