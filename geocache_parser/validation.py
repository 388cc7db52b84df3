"""Input validation utilities."""

import os
from pathlib import Path
from typing import Tuple, Optional

from .constants import SUPPORTED_EXTENSIONS

__all__ = [
    "validate_input_file",
]


def validate_input_file(file_path: str) -> Tuple[bool, Optional[str]]:
    """
    Validate a GPX or LOC file exists and is readable.

    Args:
        file_path: Path to the input file

    Returns:
        tuple: (is_valid, error_message)
    """
    path = Path(file_path)

    if not path.exists():
        return False, f"File not found: {file_path}"

    if not path.is_file():
        return False, f"Not a file: {file_path}"

    if not os.access(path, os.R_OK):
        return False, f"File not readable: {file_path}"

    if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        return False, f"File does not have a .gpx or .loc extension: {file_path}"

    if path.stat().st_size == 0:
        return False, f"File is empty: {file_path}"

    return True, None
