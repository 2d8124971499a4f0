"""Volunteer record model, time-of-day rules, and the line format.

File format (no header, no quoting):
    <name>, <identifier>, <contact>, <total_hours>

A comma inside any field corrupts the line: it then has more than four
fields and is skipped on load.

This module defines:
    - VolunteerRecord dataclass
    - parse_time / whole_hours_between for shift hours
    - format_line / parse_line for the persisted text form
"""

import re
from dataclasses import dataclass
from datetime import time
from typing import Optional

from volunteerlog.core.exceptions import (
    InvalidTimeFormatError,
    InvalidTimeRangeError,
    MalformedHoursFieldError,
)
from volunteerlog.core.logging import get_logger

logger = get_logger(__name__)

FIELD_SEPARATOR = ", "
FIELD_COUNT = 4

_TIME_PATTERN = re.compile(r"^([0-9]{2}):([0-9]{2})$")
_HOURS_PATTERN = re.compile(r"^[0-9]+$")


# =============================================================================
# DATACLASSES
# =============================================================================


@dataclass
class VolunteerRecord:
    """One volunteer and their accumulated service.

    Attributes:
        name: Display name, not unique
        identifier: Unique lookup key (email address)
        contact: Phone number, stored as given
        total_hours: Sum of all logged whole hours
    """

    name: str
    identifier: str
    contact: str
    total_hours: int = 0

    def add_hours(self, hours: int) -> None:
        self.total_hours += hours

    def to_line(self) -> str:
        return format_line(self)


# =============================================================================
# TIME RULES
# =============================================================================


def parse_time(value: str) -> time:
    """Parse a 24-hour HH:MM time of day.

    Args:
        value: Text such as "09:00" or "17:45"

    Returns:
        Parsed time

    Raises:
        InvalidTimeFormatError: If value is not a valid HH:MM time
    """
    text = (value or "").strip()
    match = _TIME_PATTERN.match(text)
    if not match:
        raise InvalidTimeFormatError(f"Invalid time format: {value!r} (use HH:MM)")

    try:
        return time(int(match.group(1)), int(match.group(2)))
    except ValueError as e:
        raise InvalidTimeFormatError(f"Invalid time format: {value!r} (use HH:MM)") from e


def whole_hours_between(start: time, end: time) -> int:
    """Whole hours worked between two times on the same day.

    Partial hours are dropped: 09:00 to 12:59 is 3 hours.

    Raises:
        InvalidTimeRangeError: If end is earlier than start
    """
    start_minutes = start.hour * 60 + start.minute
    end_minutes = end.hour * 60 + end.minute
    if end_minutes < start_minutes:
        raise InvalidTimeRangeError(
            f"End time {end.strftime('%H:%M')} is before start time {start.strftime('%H:%M')}"
        )
    return (end_minutes - start_minutes) // 60


# =============================================================================
# LINE FORMAT
# =============================================================================


def format_line(record: VolunteerRecord) -> str:
    """Render a record as one line of the volunteer file (no newline)."""
    return FIELD_SEPARATOR.join(
        [record.name, record.identifier, record.contact, str(record.total_hours)]
    )


def parse_line(line: str) -> Optional[VolunteerRecord]:
    """Parse one line of the volunteer file.

    Splits on a bare comma and strips each field, so both "a, b, c, 1"
    and "a,b,c,1" are accepted.

    Args:
        line: Line text, with or without trailing newline

    Returns:
        The record, or None if the line does not have exactly four
        fields or the identifier is blank

    Raises:
        MalformedHoursFieldError: If the hours field is not a non-negative integer
    """
    fields = line.rstrip("\r\n").split(",")
    if len(fields) != FIELD_COUNT:
        return None

    name, identifier, contact, hours_text = (f.strip() for f in fields)
    if not identifier:
        logger.warning("Skipping line with blank identifier", extra={"context": {"name": name}})
        return None

    if not _HOURS_PATTERN.match(hours_text):
        raise MalformedHoursFieldError(
            f"Hours field is not a whole number for {identifier}: {hours_text!r}"
        )

    return VolunteerRecord(
        name=name,
        identifier=identifier,
        contact=contact,
        total_hours=int(hours_text),
    )
