# File: src/core/config_manager.py
"""
Centralized configuration management for the Weekly Planner.
Loads settings from environment variables with hardcoded defaults.
"""

import os
import logging
from pathlib import Path
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from src/core/

    # Subdirectories
    DATA_DIR = Path(os.getenv("PLANNER_DATA_DIR", str(BASE_DIR / "data")))
    LOGS_DIR = BASE_DIR / "logs"

    # Files
    DB_FILE = Path(os.getenv("PLANNER_DB_FILE", str(DATA_DIR / "planner.db")))
    EXPORT_FILENAME = "kids-weekly-planner.csv"

    # Logging
    LOG_LEVEL = getattr(logging, os.getenv("PLANNER_LOG_LEVEL", "INFO").upper(), logging.INFO)

    # Persisted state keys (each stored independently)
    STORAGE_PREFIX = os.getenv("PLANNER_STORAGE_PREFIX", "kwp:")
    KEY_TITLE = "title"
    KEY_BACKGROUND_COLOR = "backgroundColor"
    KEY_ACCENT_COLOR = "accentColor"
    KEY_PHOTO = "photo"
    KEY_EVENTS = "events"
    KEY_DENSE_HOURS = "denseHours"

    # Display defaults
    DEFAULT_TITLE = "Kids Weekly Planner"
    DEFAULT_BACKGROUND_COLOR = "#f8fafc"
    DEFAULT_ACCENT_COLOR = "#2563eb"
    DEFAULT_DENSE_HOURS = False

    ACCENT_PALETTE: List[str] = [
        '#2563eb', '#ef4444', '#22c55e', '#06b6d4',
        '#f59e0b', '#8b5cf6', '#14b8a6', '#e11d48',
    ]
    BACKGROUND_PALETTE: List[str] = [
        '#f8fafc', '#fef2f2', '#f0fdf4', '#f0f9ff',
        '#fffbeb', '#faf5ff', '#f0fdfa', '#fef7f7',
    ]

    # New event draft defaults
    DEFAULT_DAY = "Monday"
    DEFAULT_START = "09:00"
    DEFAULT_END = "10:00"
    DEFAULT_CATEGORY = "School"

    # Grid
    GRID_START_HOUR = 7   # 07:00
    GRID_HOURS = 15       # 07:00-22:00 exclusive
    ROW_HEIGHT = 48

    # CSV interchange
    CSV_COLUMNS: List[str] = ['title', 'day', 'start', 'end', 'category', 'color', 'notes']

    @classmethod
    def storage_key(cls, name: str) -> str:
        """Full persisted key for a logical entry name."""
        return f"{cls.STORAGE_PREFIX}{name}"

    @classmethod
    def ensure_dirs(cls) -> None:
        """Create data and log directories if missing."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)
        cls.DB_FILE.parent.mkdir(parents=True, exist_ok=True)
        cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)
