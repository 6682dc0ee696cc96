# File: src/processors/overlap_detector.py
"""
Same-day overlap detection, used as a non-blocking advisory before save.
"""

from typing import Iterable, List

from src.models import Event
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


def overlaps(a: Event, b: Event) -> bool:
    """
    True when both events are on the same day and their half-open
    [start, end) grid intervals intersect.
    """
    return a.overlaps_with(b)


def find_overlaps(candidate: Event, events: Iterable[Event]) -> List[Event]:
    """
    Return every other event (by id) the candidate overlaps.

    Events whose times cannot be parsed are never reported.
    """
    found: List[Event] = []
    for other in events:
        if other.id == candidate.id:
            continue
        try:
            if overlaps(candidate, other):
                found.append(other)
        except ValueError as e:
            logger.debug(f"Skipping overlap check against '{other.title}': {e}")
    return found
