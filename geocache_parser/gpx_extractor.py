"""GPX geocache extraction.

Reads geocaching.com GPX files (single cache downloads and pocket
queries). Each ``<wpt>`` carries the standard GPX fields plus a
``<groundspeak:cache>`` extension holding cache metadata, logs and travel
bugs:

    <wpt lat="45.123" lon="-122.5">
      <time>2010-05-01T14:30:00</time>
      <name>GC1ABCD</name>
      <desc>Example by someone, Traditional Cache (1.5/2)</desc>
      <url>http://www.geocaching.com/seek/cache_details.aspx?guid=...</url>
      <groundspeak:cache archived="False">
        <groundspeak:name>Example</groundspeak:name>
        ...
        <groundspeak:logs>
          <groundspeak:log>
            <groundspeak:date>...</groundspeak:date>
            <groundspeak:type>Found it</groundspeak:type>
            <groundspeak:finder>...</groundspeak:finder>
            <groundspeak:text>...</groundspeak:text>
          </groundspeak:log>
        </groundspeak:logs>
        <groundspeak:travelbugs>
          <groundspeak:travelbug ref="TB1234">
            <groundspeak:name>...</groundspeak:name>
          </groundspeak:travelbug>
        </groundspeak:travelbugs>
      </groundspeak:cache>
    </wpt>

Tags are matched by local name, so both GPX 1.0/1.1 and the Groundspeak
1.0 and 1.0.1 namespace URIs work.

Example:
    >>> from geocache_parser import GpxRecordExtractor
    >>> extractor = GpxRecordExtractor("pocket_query.gpx")
    >>> for record in extractor:
    ...     print(record.cache_id, record.name)
"""

from typing import Optional, Tuple

from .base import WaypointExtractor
from .constants import (
    GPX_WAYPOINT_TAG,
    GPX_TIME_TAG,
    GPX_NAME_TAG,
    GPX_DESC_TAG,
    GPX_URL_TAG,
    GROUNDSPEAK_CACHE_TAG,
    GROUNDSPEAK_CACHE_FIELDS,
    GROUNDSPEAK_LOG_TAG,
    GROUNDSPEAK_LOG_FIELDS,
    GROUNDSPEAK_TRAVELBUG_TAG,
)
from .helpers import (
    child_text,
    parse_decimal,
    parse_placed_date,
    require_attribute,
    require_child,
)
from .types import CacheRecord, LogEntry, TravelBug, NO_LOGS, NO_TRAVEL_BUGS

__all__ = [
    "GpxRecordExtractor",
    "extract_logs",
    "extract_travel_bugs",
]


def _groundspeak(tag: str) -> str:
    return f"groundspeak:{tag}"


def extract_logs(cache, index: Optional[int] = None) -> Tuple[LogEntry, ...]:
    """
    Read every log below a ``<groundspeak:cache>`` element.

    Args:
        cache: The cache extension element
        index: Waypoint index for error messages

    Returns:
        Logs in document order, or ``(NO_LOGS,)`` when there are none

    Raises:
        MissingFieldError: If a log lacks one of its four fields
    """
    logs = tuple(
        LogEntry(
            *(
                child_text(log, tag, _groundspeak(tag), index)
                for tag in GROUNDSPEAK_LOG_FIELDS
            )
        )
        for log in cache.iterfind(f".//{{*}}{GROUNDSPEAK_LOG_TAG}")
    )
    return logs or (NO_LOGS,)


def extract_travel_bugs(cache, index: Optional[int] = None) -> Tuple[TravelBug, ...]:
    """
    Read every travel bug below a ``<groundspeak:cache>`` element.

    Args:
        cache: The cache extension element
        index: Waypoint index for error messages

    Returns:
        Travel bugs in document order, or ``(NO_TRAVEL_BUGS,)`` when there are none

    Raises:
        MissingFieldError: If a travel bug lacks its ref or name
    """
    field = _groundspeak(GROUNDSPEAK_TRAVELBUG_TAG)
    bugs = tuple(
        TravelBug(
            reference_code=require_attribute(bug, "ref", f"{field}@ref", index),
            name=child_text(bug, GPX_NAME_TAG, _groundspeak(GPX_NAME_TAG), index),
        )
        for bug in cache.iterfind(f".//{{*}}{GROUNDSPEAK_TRAVELBUG_TAG}")
    )
    return bugs or (NO_TRAVEL_BUGS,)


class GpxRecordExtractor(WaypointExtractor[CacheRecord]):
    """Extracts CacheRecords from a GPX document by waypoint index."""

    waypoint_tag = GPX_WAYPOINT_TAG
    format_name = "GPX"

    def _build_record(self, waypoint, index: int) -> CacheRecord:
        latitude = parse_decimal(
            require_attribute(waypoint, "lat", "lat", index), "lat", index
        )
        longitude = parse_decimal(
            require_attribute(waypoint, "lon", "lon", index), "lon", index
        )
        date_placed = parse_placed_date(
            child_text(waypoint, GPX_TIME_TAG, GPX_TIME_TAG, index), index
        )

        cache_field = _groundspeak(GROUNDSPEAK_CACHE_TAG)
        cache = require_child(waypoint, GROUNDSPEAK_CACHE_TAG, cache_field, index)
        cache_fields = {
            field: child_text(cache, tag, _groundspeak(tag), index)
            for field, tag in GROUNDSPEAK_CACHE_FIELDS
        }

        return CacheRecord(
            cache_id=child_text(waypoint, GPX_NAME_TAG, GPX_NAME_TAG, index),
            latitude=latitude,
            longitude=longitude,
            date_placed=date_placed,
            description=child_text(waypoint, GPX_DESC_TAG, GPX_DESC_TAG, index),
            url=child_text(waypoint, GPX_URL_TAG, GPX_URL_TAG, index),
            archived=require_attribute(cache, "archived", f"{cache_field}@archived", index),
            logs=extract_logs(cache, index),
            travel_bugs=extract_travel_bugs(cache, index),
            **cache_fields,
        )
