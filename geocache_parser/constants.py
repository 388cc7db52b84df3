"""Constants used throughout the geocache parser.

This module centralizes the fixed XML vocabulary of the two supported
geocaching.com export formats, so the extractors never spell a tag name
inline.

Categories:
- GPX Tags: waypoint and Groundspeak cache extension element names
- LOC Tags: waypoint element names of the LOC format
- Sentinels: placeholder texts used when a cache has no logs or bugs
- Parsing: date/time separator and the decimal number grammar
- Files: accepted input file extensions
"""

import re

# === GPX Tags ===
GPX_ROOT_TAG = "gpx"
GPX_WAYPOINT_TAG = "wpt"
GPX_TIME_TAG = "time"
GPX_NAME_TAG = "name"
GPX_DESC_TAG = "desc"
GPX_URL_TAG = "url"

GROUNDSPEAK_CACHE_TAG = "cache"
GROUNDSPEAK_LOG_TAG = "log"
GROUNDSPEAK_TRAVELBUG_TAG = "travelbug"

# Record field -> child of <groundspeak:cache>
GROUNDSPEAK_CACHE_FIELDS = (
    ("name", "name"),
    ("placed_by", "placed_by"),
    ("type", "type"),
    ("container", "container"),
    ("difficulty", "difficulty"),
    ("terrain", "terrain"),
    ("country", "country"),
    ("state", "state"),
    ("short_description", "short_description"),
    ("long_description", "long_description"),
    ("hints", "encoded_hints"),
)

# Read in this fixed order for every <groundspeak:log>
GROUNDSPEAK_LOG_FIELDS = ("date", "type", "finder", "text")

# === LOC Tags ===
LOC_ROOT_TAG = "loc"
LOC_WAYPOINT_TAG = "waypoint"
LOC_NAME_TAG = "name"
LOC_COORD_TAG = "coord"
LOC_LINK_TAG = "link"

# === Sentinels ===
NO_LOGS_TEXT = "No logs available"
NO_TRAVEL_BUGS_TEXT = "No travel bugs available"

# === Parsing ===
DATE_TIME_SEPARATOR = "T"
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Period is the only decimal separator accepted, whatever the host locale
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# === Files ===
GPX_EXTENSION = ".gpx"
LOC_EXTENSION = ".loc"
SUPPORTED_EXTENSIONS = (GPX_EXTENSION, LOC_EXTENSION)
