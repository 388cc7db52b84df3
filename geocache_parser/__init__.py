"""
Geocache Parser

Reads geocache records from geocaching.com GPX and LOC files.
"""

__version__ = "1.0.0"

from .gpx_extractor import GpxRecordExtractor
from .loc_extractor import LocRecordExtractor
from .cursor import CacheCursor
from .document import load_document
from .formats import detect_format, open_extractor
from .types import (
    CacheRecord,
    LogEntry,
    TravelBug,
    LocRecord,
    NO_LOGS,
    NO_TRAVEL_BUGS,
)
from .exceptions import (
    GeocacheParserError,
    DocumentLoadError,
    UnsupportedFormatError,
    IndexOutOfRangeError,
    MissingFieldError,
    MalformedDateError,
    NumberFormatError,
)

__all__ = [
    # Extractors
    "GpxRecordExtractor",
    "LocRecordExtractor",
    "CacheCursor",
    # Documents
    "load_document",
    "detect_format",
    "open_extractor",
    # Records
    "CacheRecord",
    "LogEntry",
    "TravelBug",
    "LocRecord",
    "NO_LOGS",
    "NO_TRAVEL_BUGS",
    # Exceptions
    "GeocacheParserError",
    "DocumentLoadError",
    "UnsupportedFormatError",
    "IndexOutOfRangeError",
    "MissingFieldError",
    "MalformedDateError",
    "NumberFormatError",
]
