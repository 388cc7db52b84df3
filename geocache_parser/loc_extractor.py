"""LOC geocache extraction.

LOC files are the lightweight export of geocaching.com:

    <loc version="1.0" src="Groundspeak">
      <waypoint>
        <name id="GC123"><![CDATA[Test Cache by Someone]]></name>
        <coord lat="45.0" lon="-122.0"/>
        <type>Geocache</type>
        <link text="Cache Details">http://x</link>
      </waypoint>
    </loc>
"""

from .base import WaypointExtractor
from .constants import LOC_WAYPOINT_TAG, LOC_NAME_TAG, LOC_COORD_TAG, LOC_LINK_TAG
from .helpers import (
    element_text,
    child_text,
    parse_decimal,
    require_attribute,
    require_child,
)
from .types import LocRecord

__all__ = ["LocRecordExtractor"]


class LocRecordExtractor(WaypointExtractor[LocRecord]):
    """Extracts LocRecords from a LOC document by waypoint index."""

    waypoint_tag = LOC_WAYPOINT_TAG
    format_name = "LOC"

    def _build_record(self, waypoint, index: int) -> LocRecord:
        name = require_child(waypoint, LOC_NAME_TAG, LOC_NAME_TAG, index)
        coord = require_child(waypoint, LOC_COORD_TAG, LOC_COORD_TAG, index)

        return LocRecord(
            cache_id=require_attribute(name, "id", f"{LOC_NAME_TAG}@id", index),
            name=element_text(name),
            latitude=parse_decimal(
                require_attribute(coord, "lat", f"{LOC_COORD_TAG}@lat", index),
                "lat",
                index,
            ),
            longitude=parse_decimal(
                require_attribute(coord, "lon", f"{LOC_COORD_TAG}@lon", index),
                "lon",
                index,
            ),
            url=child_text(waypoint, LOC_LINK_TAG, LOC_LINK_TAG, index),
        )
