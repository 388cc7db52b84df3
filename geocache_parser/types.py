"""Record types for geocache data.

Records are immutable ``NamedTuple`` instances: every ``extract()`` call
builds a new one, so a record read earlier is never changed by a later
call. The ``TypedDict`` classes describe the JSON-ready dictionaries
returned by ``to_dict()``.

Example:
    >>> from geocache_parser.types import LocRecord
    >>> record = LocRecord("GC123", "Test Cache", 45.0, -122.0, "http://x")
    >>> record.to_dict()["cache_id"]
    'GC123'
"""

from datetime import date
from typing import Dict, List, NamedTuple, Tuple, TypedDict

from .constants import NO_LOGS_TEXT, NO_TRAVEL_BUGS_TEXT


class LogEntryDict(TypedDict):
    """Dictionary form of a LogEntry."""

    date: str
    type: str
    finder: str
    text: str


class TravelBugDict(TypedDict):
    """Dictionary form of a TravelBug."""

    reference_code: str
    name: str


class CacheRecordDict(TypedDict):
    """Dictionary form of a CacheRecord."""

    cache_id: str
    latitude: float
    longitude: float
    date_placed: str
    description: str
    url: str
    archived: str
    name: str
    placed_by: str
    type: str
    container: str
    difficulty: str
    terrain: str
    country: str
    state: str
    short_description: str
    long_description: str
    hints: str
    logs: List[LogEntryDict]
    travel_bugs: List[TravelBugDict]


class LocRecordDict(TypedDict):
    """Dictionary form of a LocRecord."""

    cache_id: str
    name: str
    latitude: float
    longitude: float
    url: str


class LogEntry(NamedTuple):
    """A visit log attached to a cache."""

    date: str
    type: str
    finder: str
    text: str

    def to_dict(self) -> LogEntryDict:
        """Convert to dictionary format."""
        return LogEntryDict(
            date=self.date, type=self.type, finder=self.finder, text=self.text
        )


class TravelBug(NamedTuple):
    """A trackable item sitting in a cache."""

    reference_code: str
    name: str

    def to_dict(self) -> TravelBugDict:
        """Convert to dictionary format."""
        return TravelBugDict(reference_code=self.reference_code, name=self.name)


# Placeholders for caches without logs or travel bugs
NO_LOGS = LogEntry(date="", type="", finder="", text=NO_LOGS_TEXT)
NO_TRAVEL_BUGS = TravelBug(reference_code="", name=NO_TRAVEL_BUGS_TEXT)


class CacheRecord(NamedTuple):
    """One geocache read from a GPX waypoint."""

    cache_id: str
    latitude: float
    longitude: float
    date_placed: date
    description: str
    url: str
    archived: str
    name: str
    placed_by: str
    type: str
    container: str
    difficulty: str
    terrain: str
    country: str
    state: str
    short_description: str
    long_description: str
    hints: str
    logs: Tuple[LogEntry, ...]
    travel_bugs: Tuple[TravelBug, ...]

    @property
    def has_logs(self) -> bool:
        """False when ``logs`` only holds the NO_LOGS placeholder."""
        return self.logs != (NO_LOGS,)

    @property
    def has_travel_bugs(self) -> bool:
        """False when ``travel_bugs`` only holds the NO_TRAVEL_BUGS placeholder."""
        return self.travel_bugs != (NO_TRAVEL_BUGS,)

    @property
    def is_archived(self) -> bool:
        """True when the archived attribute reads "true" in any case."""
        return self.archived.strip().lower() == "true"

    def to_dict(self) -> CacheRecordDict:
        """Convert to a JSON-ready dictionary.

        The placed date is rendered as ``YYYY-MM-DD`` and nested logs and
        travel bugs become lists of dictionaries.
        """
        data: Dict = self._asdict()
        data["date_placed"] = self.date_placed.isoformat()
        data["logs"] = [log.to_dict() for log in self.logs]
        data["travel_bugs"] = [bug.to_dict() for bug in self.travel_bugs]
        return data


class LocRecord(NamedTuple):
    """One geocache read from a LOC waypoint."""

    cache_id: str
    name: str
    latitude: float
    longitude: float
    url: str

    def to_dict(self) -> LocRecordDict:
        """Convert to dictionary format."""
        return LocRecordDict(**self._asdict())


__all__ = [
    "LogEntry",
    "TravelBug",
    "CacheRecord",
    "LocRecord",
    "NO_LOGS",
    "NO_TRAVEL_BUGS",
    "LogEntryDict",
    "TravelBugDict",
    "CacheRecordDict",
    "LocRecordDict",
]
