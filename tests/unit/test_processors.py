# File: tests/unit/test_processors.py
"""
Unit tests for the overlap detector, validator and layout engine.
"""

import pytest

from src.models import (
    Day,
    EventValidationError,
    MissingTitleError,
    InvalidTimeFormatError,
    InvalidTimeRangeError,
)
from src.processors.overlap_detector import overlaps, find_overlaps
from src.processors.validator import EventValidator
from src.processors.layout_engine import (
    sort_events,
    group_by_day,
    event_geometry,
    layout_week,
)


# ==================== Overlap Detector Tests ====================

class TestOverlapDetector:
    """Tests for same-day overlap detection."""

    def test_overlapping_same_day(self, make_event):
        homework = make_event(title="Homework", start="16:00", end="17:00")
        snack = make_event(title="Snack", start="16:30", end="17:00")

        assert overlaps(homework, snack) is True

    def test_touching_intervals_do_not_overlap(self, make_event):
        a = make_event(start="09:00", end="10:00")
        b = make_event(start="10:00", end="11:00")

        assert overlaps(a, b) is False

    def test_different_days_never_overlap(self, make_event):
        a = make_event(day=Day.MONDAY, start="09:00", end="12:00")
        b = make_event(day=Day.TUESDAY, start="09:00", end="12:00")

        assert overlaps(a, b) is False

    @pytest.mark.parametrize("first, second", [
        (("09:00", "10:00"), ("09:30", "11:00")),
        (("09:00", "12:00"), ("10:00", "11:00")),
        (("09:00", "10:00"), ("10:00", "11:00")),
        (("13:00", "14:00"), ("09:00", "10:00")),
    ])
    def test_symmetry(self, make_event, first, second):
        a = make_event(start=first[0], end=first[1])
        b = make_event(start=second[0], end=second[1])

        assert overlaps(a, b) == overlaps(b, a)

    def test_half_hour_snapping(self, make_event):
        # 09:00-09:20 snaps to [2, 2) and so covers nothing
        a = make_event(start="09:00", end="09:20")
        b = make_event(start="09:10", end="09:50")

        assert overlaps(a, b) is False

    def test_find_overlaps_excludes_self(self, make_event):
        candidate = make_event(id="c", start="09:00", end="10:00")
        same = candidate.copy(title="Old version")
        other = make_event(id="o", start="09:30", end="10:30")
        later = make_event(id="l", start="11:00", end="12:00")

        found = find_overlaps(candidate, [same, other, later])

        assert [e.id for e in found] == ["o"]

    def test_find_overlaps_skips_unparseable(self, make_event):
        candidate = make_event(start="09:00", end="10:00")
        broken = make_event(start="soon", end="later")

        assert find_overlaps(candidate, [broken]) == []


# ==================== Validator Tests ====================

class TestEventValidator:
    """Tests for save-time validation."""

    def setup_method(self):
        self.validator = EventValidator()

    def test_valid_event(self, make_event):
        self.validator.validate(make_event())
        assert self.validator.is_valid(make_event()) is True

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_rejects_empty_title(self, make_event, title):
        with pytest.raises(MissingTitleError):
            self.validator.validate(make_event(title=title))

    def test_rejects_inverted_range(self, make_event):
        with pytest.raises(InvalidTimeRangeError):
            self.validator.validate(make_event(start="10:00", end="09:00"))

    def test_rejects_empty_range(self, make_event):
        with pytest.raises(InvalidTimeRangeError):
            self.validator.validate(make_event(start="10:00", end="10:00"))

    @pytest.mark.parametrize("start, end", [
        ("9:00", "10:00"),
        ("ab:cd", "10:00"),
        ("09:00", "25:00"),
        ("09:00", ""),
    ])
    def test_rejects_malformed_times(self, make_event, start, end):
        with pytest.raises(InvalidTimeFormatError):
            self.validator.validate(make_event(start=start, end=end))

    def test_title_checked_before_times(self, make_event):
        with pytest.raises(MissingTitleError):
            self.validator.validate(make_event(title="", start="10:00", end="09:00"))

    def test_errors_are_value_errors(self, make_event):
        with pytest.raises(ValueError):
            self.validator.validate(make_event(title=""))
        assert issubclass(InvalidTimeRangeError, EventValidationError)

    def test_collect_errors(self, make_event):
        errors = self.validator.collect_errors(make_event(title=" ", start="11:00", end="10:00"))

        assert [e.field for e in errors] == ["title", "end"]

    def test_collect_errors_format_skips_range(self, make_event):
        errors = self.validator.collect_errors(make_event(start="x", end="10:00"))

        assert [e.field for e in errors] == ["start"]

    def test_overlap_is_not_a_validation_failure(self, make_event):
        # Validator looks at the candidate alone
        assert self.validator.collect_errors(make_event(start="09:00", end="10:00")) == []

    def test_logger_named_after_class(self):
        assert self.validator.logger.name == "EventValidator"
        assert self.validator.logger is self.validator.logger


# ==================== Layout Engine Tests ====================

class TestLayoutEngine:
    """Tests for sorting, grouping and geometry."""

    def test_sort_by_day_then_start(self, make_event):
        events = [
            make_event(title="Wed", day=Day.WEDNESDAY, start="10:00", end="11:00"),
            make_event(title="Mon9", day=Day.MONDAY, start="09:00", end="10:00"),
            make_event(title="Mon8", day=Day.MONDAY, start="08:00", end="09:00"),
        ]

        assert [e.title for e in sort_events(events)] == ["Mon8", "Mon9", "Wed"]

    def test_sort_is_stable(self, make_event):
        events = [
            make_event(title="first", start="09:00", end="10:00"),
            make_event(title="second", start="09:15", end="10:00"),  # same row as first
            make_event(title="third", start="09:00", end="09:30"),
        ]

        assert [e.title for e in sort_events(events)] == ["first", "second", "third"]

    def test_sort_does_not_mutate_input(self, make_event):
        events = [make_event(day=Day.SUNDAY), make_event(day=Day.MONDAY)]
        sort_events(events)
        assert events[0].day is Day.SUNDAY

    def test_unparseable_start_sorts_last_in_day(self, make_event):
        events = [
            make_event(title="broken", start="later", end="x"),
            make_event(title="ok", start="20:00", end="21:00"),
        ]

        assert [e.title for e in sort_events(events)] == ["ok", "broken"]

    def test_group_by_day_has_every_column(self, make_event):
        columns = group_by_day([make_event(day=Day.FRIDAY)])

        assert list(columns) == list(Day)
        assert len(columns[Day.FRIDAY]) == 1
        assert columns[Day.MONDAY] == []

    def test_geometry_hourly(self, make_event):
        top, height = event_geometry(make_event(start="09:00", end="10:30"), row_height=48)

        assert top == 96
        assert height == 72

    def test_geometry_dense(self, make_event):
        top, height = event_geometry(make_event(start="09:00", end="10:30"), row_height=48, dense=True)

        assert top == 192
        assert height == 144

    def test_layout_keeps_overlapping_blocks(self, make_event):
        a = make_event(title="Homework", start="16:00", end="17:00")
        b = make_event(title="Snack", start="16:30", end="17:00")

        blocks = layout_week([a, b])[Day.MONDAY]

        assert [blk.event.title for blk in blocks] == ["Homework", "Snack"]
        assert blocks[1].top < blocks[0].bottom

    def test_layout_skips_unplaceable_events(self, make_event):
        layout = layout_week([make_event(start="soon", end="later"), make_event()])

        assert len(layout[Day.MONDAY]) == 1
