"""Data package - Volunteer records and their flat-file store.

Modules:
    - models: VolunteerRecord, time rules, line format
    - store: VolunteerStore (register, log hours, load, save)
"""

from volunteerlog.db.models import (
    VolunteerRecord,
    format_line,
    parse_line,
    parse_time,
    whole_hours_between,
)
from volunteerlog.db.store import VolunteerStore

__all__ = [
    "VolunteerRecord",
    "VolunteerStore",
    "format_line",
    "parse_line",
    "parse_time",
    "whole_hours_between",
]
