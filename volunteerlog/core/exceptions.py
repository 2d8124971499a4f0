"""Volunteer Log Exception Hierarchy.

All custom exceptions inherit from VolunteerLogError. Every one of them
is recoverable: the store raises, the GUI shows a message and lets the
operator try again.

Exception Hierarchy:
    VolunteerLogError (base)
    ├── ValidationError
    │   ├── DuplicateOrEmptyIdentifierError
    │   ├── UnknownIdentifierError
    │   └── InvalidTimeFormatError
    │       └── InvalidTimeRangeError
    └── StoreError
        ├── MalformedHoursFieldError
        └── StoreIOError
"""


class VolunteerLogError(Exception):
    """Base exception for all Volunteer Log errors.

    Allows broad exception handling at the GUI boundary.
    """

    pass


class ValidationError(VolunteerLogError):
    """Input to a store operation was rejected.

    The store is never modified when one of these is raised.
    """

    pass


class DuplicateOrEmptyIdentifierError(ValidationError):
    """Registration used an empty identifier or one already in the store.

    The existing record is never overwritten.
    """

    pass


class UnknownIdentifierError(ValidationError):
    """No volunteer is registered under the given identifier."""

    pass


class InvalidTimeFormatError(ValidationError):
    """A time-of-day string is not a valid 24-hour HH:MM value.

    Raised when:
        - Hour or minute is out of range ("25:99")
        - The text is not HH:MM at all ("noon", "9:00", "")
    """

    pass


class InvalidTimeRangeError(InvalidTimeFormatError):
    """End time is earlier than start time.

    Shifts crossing midnight are not supported.
    """

    pass


class StoreError(VolunteerLogError):
    """Loading or saving the volunteer file failed."""

    pass


class MalformedHoursFieldError(StoreError):
    """A saved line has a total-hours field that is not an integer.

    Fails the whole load; nothing from the file is merged.
    """

    pass


class StoreIOError(StoreError):
    """The volunteer file could not be read or written.

    Always chained from the underlying OSError.
    """

    pass
