"""Sequential access on top of an extractor.

``CacheCursor`` reproduces the "next cache" style of reading a file: each
call returns the following record until the document is exhausted. It only
tracks a position; records still come from ``extractor.extract``.

Example:
    >>> cursor = CacheCursor(GpxRecordExtractor("pocket_query.gpx"))
    >>> while cursor.remaining:
    ...     record = cursor.next_cache()
"""

from typing import Generic, Iterator, Optional, TypeVar

from .base import WaypointExtractor

__all__ = ["CacheCursor"]

R = TypeVar("R")


class CacheCursor(Generic[R]):
    """Walks the waypoints of an extractor in document order."""

    def __init__(self, extractor: WaypointExtractor[R]) -> None:
        self.extractor = extractor
        self.position = 0

    @property
    def remaining(self) -> int:
        """Number of records not yet returned."""
        return max(self.extractor.waypoint_count - self.position, 0)

    def next_cache(self) -> Optional[R]:
        """
        Return the next record, or None once every waypoint has been read.

        The position only advances when extraction succeeds, so a failing
        waypoint raises again on the next call.
        """
        if not self.remaining:
            return None
        record = self.extractor.extract(self.position)
        self.position += 1
        return record

    def reset(self) -> None:
        """Rewind to the first waypoint."""
        self.position = 0

    def __iter__(self) -> Iterator[R]:
        return self

    def __next__(self) -> R:
        if not self.remaining:
            raise StopIteration
        return self.next_cache()
