"""Command-line interface."""

import json
import sys

from .exceptions import GeocacheParserError
from .formats import open_extractor
from .logger import logger, set_debug_mode
from .validation import validate_input_file


def print_help():
    """Print comprehensive help message."""
    help_text = """
Geocache Parser
===============

Read geocaches from geocaching.com GPX and LOC files.

USAGE:
    geocache-parser <file> [file2 ...] [OPTIONS]

ARGUMENTS:
    <file>               GPX or LOC file(s); the format is detected from
                         the document's root element

OPTIONS:
    --index N            Only print the waypoint at index N (0-based)
    --json               Print records as a JSON array instead of a table
    --debug              Enable debug output
    --help, -h           Show this help message

EXAMPLES:
    # List all caches of a pocket query
    geocache-parser 1234567.gpx

    # Full record of the third cache, including logs and travel bugs
    geocache-parser 1234567.gpx --index 2 --json

    # Combine several downloads
    geocache-parser GC1ABCD.gpx geocaching.loc
"""
    print(help_text)


def format_summary(record) -> str:
    """One table line for a record."""
    return f"{record.cache_id:<10} {record.latitude:>11.6f} {record.longitude:>11.6f}  {record.name}"


def collect_records(path: str, index=None) -> list:
    """
    Read records from one file.

    Args:
        path: GPX or LOC file
        index: Only read this waypoint when given

    Returns:
        List of records
    """
    extractor = open_extractor(path)
    logger.debug(f"{path}: {extractor.waypoint_count} waypoint(s)")
    if index is not None:
        return [extractor.extract(index)]
    return list(extractor)


def main():
    """Main CLI entry point."""
    if len(sys.argv) < 2 or '--help' in sys.argv or '-h' in sys.argv:
        print_help()
        sys.exit(0 if '--help' in sys.argv or '-h' in sys.argv else 1)

    input_files = []
    index = None
    as_json = False

    i = 1
    while i < len(sys.argv):
        arg = sys.argv[i]

        if arg == '--debug':
            set_debug_mode(True)
            i += 1
        elif arg == '--json':
            as_json = True
            i += 1
        elif arg == '--index':
            if i + 1 < len(sys.argv) and sys.argv[i + 1].isascii() and sys.argv[i + 1].isdecimal():
                index = int(sys.argv[i + 1])
                i += 2
            else:
                print("Error: --index requires a non-negative integer")
                sys.exit(1)
        elif arg.startswith('--'):
            logger.error(f"Unknown option: {arg}")
            sys.exit(1)
        else:
            is_valid, error = validate_input_file(arg)
            if is_valid:
                input_files.append(arg)
            else:
                logger.warning(error)
            i += 1

    if not input_files:
        print("Error: No GPX or LOC files specified or found!")
        sys.exit(1)

    records = []
    for path in input_files:
        try:
            records.extend(collect_records(path, index))
        except GeocacheParserError as e:
            logger.error(f"{path}: {e}")
            sys.exit(1)

    if as_json:
        print(json.dumps([record.to_dict() for record in records], indent=2))
    else:
        for record in records:
            print(format_summary(record))
