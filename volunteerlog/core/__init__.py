"""Core package - Configuration, logging, exceptions.

This package provides foundational infrastructure used by all other layers.

Modules:
    - config: Environment and configuration management
    - logging: Structured JSON logging
    - exceptions: Custom exception hierarchy
"""

from volunteerlog.core.exceptions import (
    DuplicateOrEmptyIdentifierError,
    InvalidTimeFormatError,
    InvalidTimeRangeError,
    MalformedHoursFieldError,
    StoreError,
    StoreIOError,
    UnknownIdentifierError,
    ValidationError,
    VolunteerLogError,
)

__all__ = [
    "VolunteerLogError",
    "ValidationError",
    "DuplicateOrEmptyIdentifierError",
    "UnknownIdentifierError",
    "InvalidTimeFormatError",
    "InvalidTimeRangeError",
    "StoreError",
    "MalformedHoursFieldError",
    "StoreIOError",
]
