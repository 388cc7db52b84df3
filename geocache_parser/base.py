"""Shared waypoint indexing for the GPX and LOC extractors."""

from typing import Generic, Iterator, List, TypeVar

from .decorators import validate_not_none
from .document import DocumentSource, document_root
from .exceptions import IndexOutOfRangeError
from .logger import logger

__all__ = ["WaypointExtractor"]

R = TypeVar("R")


class WaypointExtractor(Generic[R]):
    """
    Random access to the records of one loaded document.

    Subclasses name the waypoint tag and implement ``_build_record``. The
    waypoint list is collected once at construction; ``extract`` builds a
    new record on every call and keeps nothing between calls.
    """

    waypoint_tag: str = ""
    format_name: str = ""

    @validate_not_none("document")
    def __init__(self, document: DocumentSource) -> None:
        self.root = document_root(document)
        self._waypoints: List = self.root.findall(f".//{{*}}{self.waypoint_tag}")
        logger.debug(
            f"Found {len(self._waypoints)} waypoint(s) in {self.format_name} document"
        )

    @property
    def waypoint_count(self) -> int:
        """Number of waypoints in the document."""
        return len(self._waypoints)

    def __len__(self) -> int:
        return self.waypoint_count

    def __iter__(self) -> Iterator[R]:
        for index in range(self.waypoint_count):
            yield self.extract(index)

    def waypoint(self, index: int):
        """
        Waypoint element at ``index``.

        Raises:
            TypeError: If index is not an integer
            IndexOutOfRangeError: If index is outside [0, waypoint_count)
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Waypoint index must be an int, not {type(index).__name__}")
        if not 0 <= index < self.waypoint_count:
            raise IndexOutOfRangeError(index, self.waypoint_count)
        return self._waypoints[index]

    def extract(self, index: int) -> R:
        """Build the record for the waypoint at ``index``."""
        return self._build_record(self.waypoint(index), index)

    def _build_record(self, waypoint, index: int) -> R:
        raise NotImplementedError
