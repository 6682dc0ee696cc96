# File: src/models/settings.py
"""
Data models for planner display settings.
"""

import re
from dataclasses import dataclass, asdict
from typing import Optional

from src.core.config_manager import Config

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_hex_color(value: str) -> bool:
    """Check for a '#rgb' or '#rrggbb' token."""
    return isinstance(value, str) and bool(_HEX_COLOR.match(value))


@dataclass
class DisplaySettings:
    """Scalar presentation settings persisted next to the events."""
    title: str = Config.DEFAULT_TITLE
    background_color: str = Config.DEFAULT_BACKGROUND_COLOR
    accent_color: str = Config.DEFAULT_ACCENT_COLOR
    photo: Optional[str] = None  # data URI or file reference
    dense_hours: bool = Config.DEFAULT_DENSE_HOURS

    @property
    def density(self) -> int:
        """Row multiplier: 2 for half-hour rows, 1 for hourly rows."""
        return 2 if self.dense_hours else 1

    def to_dict(self) -> dict:
        return asdict(self)
