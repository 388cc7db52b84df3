"""Pytest configuration and shared fixtures for geocache-parser tests."""

import pytest
from lxml import etree


GPX_HEADER = """<?xml version="1.0" encoding="utf-8"?>
<gpx xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
     xmlns:xsd="http://www.w3.org/2001/XMLSchema"
     version="1.0" creator="Groundspeak Pocket Query"
     xmlns="http://www.topografix.com/GPX/1/0"
     xmlns:groundspeak="http://www.groundspeak.com/cache/1/0/1">
  <name>Pocket Query</name>
"""

CACHE_WITH_LOGS = """
  <wpt lat="45.123" lon="-122.5">
    <time>2010-05-01T14:30:00</time>
    <name>GC1ABCD</name>
    <desc>Forest Walk by Jane, Traditional Cache (1.5/2)</desc>
    <url>http://www.geocaching.com/seek/cache_details.aspx?guid=abc</url>
    <sym>Geocache</sym>
    <type>Geocache|Traditional Cache</type>
    <groundspeak:cache id="1" available="True" archived="False">
      <groundspeak:name>Forest Walk</groundspeak:name>
      <groundspeak:placed_by>Jane</groundspeak:placed_by>
      <groundspeak:owner id="7">Jane</groundspeak:owner>
      <groundspeak:type>Traditional Cache</groundspeak:type>
      <groundspeak:container>Small</groundspeak:container>
      <groundspeak:difficulty>1.5</groundspeak:difficulty>
      <groundspeak:terrain>2</groundspeak:terrain>
      <groundspeak:country>United States</groundspeak:country>
      <groundspeak:state>Oregon</groundspeak:state>
      <groundspeak:short_description html="False">A short walk.</groundspeak:short_description>
      <groundspeak:long_description html="True">&lt;p&gt;Follow the trail.&lt;/p&gt;</groundspeak:long_description>
      <groundspeak:encoded_hints>Under the log</groundspeak:encoded_hints>
      <groundspeak:logs>
        <groundspeak:log id="3">
          <groundspeak:date>2010-06-03T00:00:00</groundspeak:date>
          <groundspeak:type>Found it</groundspeak:type>
          <groundspeak:finder id="11">alice</groundspeak:finder>
          <groundspeak:text encoded="False">TFTC</groundspeak:text>
        </groundspeak:log>
        <groundspeak:log id="2">
          <groundspeak:date>2010-05-20T00:00:00</groundspeak:date>
          <groundspeak:type>Didn't find it</groundspeak:type>
          <groundspeak:finder id="12">bob</groundspeak:finder>
          <groundspeak:text encoded="False">No luck today</groundspeak:text>
        </groundspeak:log>
        <groundspeak:log id="1">
          <groundspeak:date>2010-05-02T00:00:00</groundspeak:date>
          <groundspeak:type>Write note</groundspeak:type>
          <groundspeak:finder id="13">carol</groundspeak:finder>
          <groundspeak:text encoded="False">Published</groundspeak:text>
        </groundspeak:log>
      </groundspeak:logs>
      <groundspeak:travelbugs>
        <groundspeak:travelbug id="21" ref="TB1111">
          <groundspeak:name>Rubber Duck</groundspeak:name>
        </groundspeak:travelbug>
        <groundspeak:travelbug id="22" ref="TB2222">
          <groundspeak:name>Globetrotter</groundspeak:name>
        </groundspeak:travelbug>
      </groundspeak:travelbugs>
    </groundspeak:cache>
  </wpt>
"""

CACHE_WITHOUT_LOGS = """
  <wpt lat="-33.8568" lon="151.2153">
    <time>2009-12-24T08:00:00Z</time>
    <name>GC2XYZ</name>
    <desc>Harbour View by Sam, Multi-cache (3/1.5)</desc>
    <url>http://www.geocaching.com/seek/cache_details.aspx?guid=def</url>
    <groundspeak:cache id="2" available="False" archived="True">
      <groundspeak:name>Harbour View</groundspeak:name>
      <groundspeak:placed_by>Sam</groundspeak:placed_by>
      <groundspeak:type>Multi-cache</groundspeak:type>
      <groundspeak:container>Regular</groundspeak:container>
      <groundspeak:difficulty>3</groundspeak:difficulty>
      <groundspeak:terrain>1.5</groundspeak:terrain>
      <groundspeak:country>Australia</groundspeak:country>
      <groundspeak:state>New South Wales</groundspeak:state>
      <groundspeak:short_description html="False"></groundspeak:short_description>
      <groundspeak:long_description html="False">Two stages.</groundspeak:long_description>
      <groundspeak:encoded_hints></groundspeak:encoded_hints>
      <groundspeak:logs />
      <groundspeak:travelbugs />
    </groundspeak:cache>
  </wpt>
"""

GPX_FOOTER = "</gpx>\n"

LOC_DOCUMENT = """<?xml version="1.0" encoding="UTF-8"?>
<loc version="1.0" src="Groundspeak">
  <waypoint>
    <name id="GC123"><![CDATA[Test Cache]]></name>
    <coord lat="45.0" lon="-122.0"/>
    <type>Geocache</type>
    <link text="Cache Details">http://x</link>
  </waypoint>
  <waypoint>
    <name id="GC456">Second Cache</name>
    <coord lat="-12.5" lon="130.75"/>
    <type>Geocache</type>
    <link text="Cache Details">http://www.geocaching.com/seek/cache_details.aspx?wp=GC456</link>
  </waypoint>
</loc>
"""


def build_gpx(*waypoints: str) -> str:
    """Wrap waypoint snippets in a pocket query document."""
    return GPX_HEADER + "".join(waypoints) + GPX_FOOTER


def parse_xml(text: str):
    """Parse an XML string into an lxml element tree."""
    return etree.ElementTree(etree.fromstring(text.encode("utf-8")))


@pytest.fixture
def gpx_text():
    """Pocket query with one cache with logs and one without."""
    return build_gpx(CACHE_WITH_LOGS, CACHE_WITHOUT_LOGS)


@pytest.fixture
def gpx_document(gpx_text):
    """Parsed pocket query."""
    return parse_xml(gpx_text)


@pytest.fixture
def gpx_file(tmp_path, gpx_text):
    """Pocket query written to disk."""
    path = tmp_path / "pocket_query.gpx"
    path.write_text(gpx_text, encoding="utf-8")
    return path


@pytest.fixture
def loc_document():
    """Parsed LOC file with two waypoints."""
    return parse_xml(LOC_DOCUMENT)


@pytest.fixture
def loc_file(tmp_path):
    """LOC file written to disk."""
    path = tmp_path / "geocaching.loc"
    path.write_text(LOC_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def make_gpx():
    """Factory parsing a pocket query built from waypoint snippets."""

    def _make(*waypoints: str):
        return parse_xml(build_gpx(*waypoints))

    return _make


@pytest.fixture
def cache_with_logs():
    """Waypoint snippet with three logs and two travel bugs."""
    return CACHE_WITH_LOGS


@pytest.fixture
def cache_without_logs():
    """Waypoint snippet without logs or travel bugs."""
    return CACHE_WITHOUT_LOGS
