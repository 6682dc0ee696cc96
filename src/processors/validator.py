# File: src/processors/validator.py
"""
Save-time validation of candidate events.
Title, time format and time range checks are blocking; overlap is not checked here.
"""

from typing import List

from src.models import (
    Event,
    ValidationError,
    EventValidationError,
    MissingTitleError,
    InvalidTimeFormatError,
    InvalidTimeRangeError,
    is_valid_time,
)
from src.utils.logger import LoggerMixin


class EventValidator(LoggerMixin):
    """Validates a single candidate event before it is committed."""

    def validate(self, event: Event) -> None:
        """
        Run the blocking checks in order and raise on the first failure.

        Raises:
            MissingTitleError: title is empty or whitespace
            InvalidTimeFormatError: start or end is not a zero-padded "HH:MM"
            InvalidTimeRangeError: start is not strictly before end
        """
        if not (event.title or "").strip():
            raise MissingTitleError()

        for field_name in ('start', 'end'):
            if not is_valid_time(getattr(event, field_name)):
                raise InvalidTimeFormatError(
                    f"{field_name.capitalize()} time must use the HH:MM format",
                    field=field_name,
                )

        # Zero-padded fixed-width strings compare chronologically
        if event.start >= event.end:
            raise InvalidTimeRangeError()

    def collect_errors(self, event: Event) -> List[ValidationError]:
        """Return every failed check as a ValidationError record, without raising."""
        errors: List[ValidationError] = []

        if not (event.title or "").strip():
            errors.append(ValidationError('title', str(MissingTitleError())))

        times_ok = True
        for field_name in ('start', 'end'):
            if not is_valid_time(getattr(event, field_name)):
                times_ok = False
                errors.append(ValidationError(field_name, "Must use the HH:MM format"))

        if times_ok and event.start >= event.end:
            errors.append(ValidationError('end', str(InvalidTimeRangeError())))

        return errors

    def is_valid(self, event: Event) -> bool:
        try:
            self.validate(event)
        except EventValidationError as e:
            self.logger.debug(f"Candidate '{event.title}' rejected: {e}")
            return False
        return True
