"""Tests for exception hierarchy."""

import pytest

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


class TestExceptionHierarchy:
    """Test exception inheritance."""

    def test_all_exceptions_inherit_from_volunteerlogerror(self):
        """All custom exceptions should inherit from VolunteerLogError."""
        exceptions = [
            ValidationError,
            DuplicateOrEmptyIdentifierError,
            UnknownIdentifierError,
            InvalidTimeFormatError,
            InvalidTimeRangeError,
            StoreError,
            MalformedHoursFieldError,
            StoreIOError,
        ]
        for exc_class in exceptions:
            assert issubclass(exc_class, VolunteerLogError)

    def test_input_errors_are_validation_errors(self):
        """Rejected inputs share ValidationError."""
        for exc_class in [
            DuplicateOrEmptyIdentifierError,
            UnknownIdentifierError,
            InvalidTimeFormatError,
        ]:
            assert issubclass(exc_class, ValidationError)
            assert not issubclass(exc_class, StoreError)

    def test_time_range_is_a_time_format_error(self):
        """Callers catching InvalidTimeFormatError also catch range errors."""
        assert issubclass(InvalidTimeRangeError, InvalidTimeFormatError)

    def test_file_errors_are_store_errors(self):
        """Load/save failures share StoreError."""
        assert issubclass(MalformedHoursFieldError, StoreError)
        assert issubclass(StoreIOError, StoreError)


class TestExceptionMessages:
    """Test exceptions can be raised with messages."""

    def test_volunteerlogerror_with_message(self):
        with pytest.raises(VolunteerLogError, match="test error"):
            raise VolunteerLogError("test error")

    def test_catching_base_exception(self):
        """Can catch specific errors with base class."""
        try:
            raise StoreIOError("disk full")
        except VolunteerLogError as e:
            assert "disk full" in str(e)

    def test_store_io_error_keeps_cause(self):
        """Chained OSError is available on __cause__."""
        with pytest.raises(StoreIOError) as exc_info:
            try:
                raise PermissionError("denied")
            except OSError as e:
                raise StoreIOError("Error saving file") from e
        assert isinstance(exc_info.value.__cause__, PermissionError)
