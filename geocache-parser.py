#!/usr/bin/env python3
"""Read geocaches from GPX and LOC files. See --help."""

from geocache_parser.cli import main

if __name__ == "__main__":
    main()
