"""Volunteer record store with flat-file persistence.

Provides:
    - Registration with unique, non-empty identifiers
    - Hour logging from HH:MM start/end times
    - Snapshot listing for display
    - Load/save of the VolunteerLog.csv line format

Not thread-safe. One store is created at startup and handed to the GUI.

Usage:
    from volunteerlog.db.store import VolunteerStore

    store = VolunteerStore()
    store.load(Path("VolunteerLog.csv"))
    store.register("Ana Ruiz", "ana@x.org", "555-1111")
    hours = store.log_hours("ana@x.org", "09:00", "13:00")
    store.save(Path("VolunteerLog.csv"))
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional, Union

from volunteerlog.core.exceptions import (
    DuplicateOrEmptyIdentifierError,
    StoreIOError,
    UnknownIdentifierError,
)
from volunteerlog.core.logging import get_logger
from volunteerlog.db.models import (
    VolunteerRecord,
    format_line,
    parse_line,
    parse_time,
    whole_hours_between,
)

logger = get_logger(__name__)

PathLike = Union[str, Path]


class VolunteerStore:
    """In-memory volunteer records keyed by identifier.

    Records keep insertion order. Callers only ever receive copies;
    the store is the sole owner of the live records.
    """

    def __init__(self) -> None:
        self._records: dict[str, VolunteerRecord] = {}
        self._dirty = False

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._records

    @property
    def is_dirty(self) -> bool:
        """True when records changed since the last successful save."""
        return self._dirty

    # -------------------------------------------------------------------------
    # Records
    # -------------------------------------------------------------------------

    def register(self, name: str, identifier: str, contact: str) -> VolunteerRecord:
        """Register a new volunteer with zero hours.

        Args:
            name: Display name
            identifier: Unique key (email)
            contact: Phone number

        Returns:
            Copy of the new record

        Raises:
            DuplicateOrEmptyIdentifierError: If identifier is blank or taken
        """
        identifier = (identifier or "").strip()
        if not identifier or identifier in self._records:
            raise DuplicateOrEmptyIdentifierError(
                f"Identifier already exists or is empty: {identifier!r}"
            )

        record = VolunteerRecord(
            name=(name or "").strip(),
            identifier=identifier,
            contact=(contact or "").strip(),
        )
        self._records[identifier] = record
        self._dirty = True

        logger.info("Volunteer registered", extra={"context": {"identifier": identifier}})
        return replace(record)

    def log_hours(self, identifier: str, start_time: str, end_time: str) -> int:
        """Add the whole hours between start and end to a volunteer.

        Both times are validated before anything changes.

        Args:
            identifier: Registered identifier
            start_time: Shift start, HH:MM
            end_time: Shift end, HH:MM

        Returns:
            Hours credited for this shift

        Raises:
            UnknownIdentifierError: If no volunteer has this identifier
            InvalidTimeFormatError: If either time is not HH:MM
            InvalidTimeRangeError: If end is before start
        """
        record = self._records.get((identifier or "").strip())
        if record is None:
            raise UnknownIdentifierError(f"No volunteer found with identifier {identifier!r}")

        hours = whole_hours_between(parse_time(start_time), parse_time(end_time))
        record.add_hours(hours)
        self._dirty = True

        logger.info(
            "Hours logged",
            extra={
                "context": {
                    "identifier": record.identifier,
                    "hours": hours,
                    "total_hours": record.total_hours,
                }
            },
        )
        return hours

    def get(self, identifier: str) -> Optional[VolunteerRecord]:
        """Copy of the record for identifier, or None."""
        record = self._records.get((identifier or "").strip())
        return replace(record) if record is not None else None

    def list_records(self) -> list[VolunteerRecord]:
        """Copies of all records in insertion order."""
        return [replace(r) for r in self._records.values()]

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self, path: PathLike) -> int:
        """Merge records from a volunteer file.

        A missing file is not an error. Lines without exactly four fields
        are skipped. Records in the file replace in-memory records with
        the same identifier; other in-memory records are kept.

        The whole file is parsed before anything is merged, so a failed
        load leaves the store as it was.

        Args:
            path: Volunteer file

        Returns:
            Number of records read from the file

        Raises:
            MalformedHoursFieldError: If a line has a non-integer hours field
            StoreIOError: If the file exists but cannot be read
        """
        path = Path(path)
        if not path.exists():
            logger.info(
                "No existing log found. Starting fresh.",
                extra={"context": {"path": str(path)}},
            )
            return 0

        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise StoreIOError(f"Error reading file {path}: {e}") from e

        loaded: list[VolunteerRecord] = []
        for line in lines:
            record = parse_line(line)
            if record is not None:
                loaded.append(record)

        for record in loaded:
            self._records[record.identifier] = record

        logger.info(
            "Volunteer data loaded",
            extra={
                "context": {
                    "path": str(path),
                    "lines": len(lines),
                    "records": len(loaded),
                }
            },
        )
        return len(loaded)

    def save(self, path: PathLike) -> int:
        """Write every record to the volunteer file, replacing its contents.

        Args:
            path: Volunteer file

        Returns:
            Number of records written

        Raises:
            StoreIOError: If the file cannot be written
        """
        path = Path(path)
        try:
            with open(path, "w", encoding="utf-8") as f:
                for record in self._records.values():
                    f.write(format_line(record) + "\n")
        except OSError as e:
            logger.error(
                f"Failed to save volunteer log: {e}",
                extra={"context": {"path": str(path), "error": str(e)}},
            )
            raise StoreIOError(f"Error saving file {path}: {e}") from e

        self._dirty = False
        logger.info(
            "Volunteer log saved",
            extra={"context": {"path": str(path), "records": len(self._records)}},
        )
        return len(self._records)
