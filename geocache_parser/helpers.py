"""Helper functions shared by the GPX and LOC extractors.

Functions Overview:
-------------------

parse_decimal(value, field, index)
    Parse a coordinate attribute with a fixed, locale-independent grammar.

    Example:
        >>> parse_decimal("45.123", "lat")
        45.123

parse_placed_date(value, index)
    Truncate a GPX timestamp at the date/time separator and return the date.

    Example:
        >>> parse_placed_date("2010-05-01T14:30:00")
        datetime.date(2010, 5, 1)

element_text(element)
    Text content of an element and all of its descendants.

find_child / require_child / require_attribute / child_text
    Local-name lookups that raise MissingFieldError instead of returning None.
"""

from datetime import date, datetime
from typing import Optional

from .constants import DATE_PATTERN, DATE_TIME_SEPARATOR, DECIMAL_PATTERN
from .exceptions import MalformedDateError, MissingFieldError, NumberFormatError

__all__ = [
    "parse_decimal",
    "parse_placed_date",
    "local_name",
    "element_text",
    "find_child",
    "require_child",
    "require_attribute",
    "child_text",
]


def parse_decimal(value: str, field: str, index: Optional[int] = None) -> float:
    """
    Parse a decimal number using a period as the decimal separator.

    ``float()`` alone would also accept "nan", "inf" and digit group
    underscores, none of which are coordinates.

    Args:
        value: Raw attribute text
        field: Field name for error messages
        index: Waypoint index for error messages

    Returns:
        Parsed value

    Raises:
        NumberFormatError: If value is not a plain decimal number
    """
    if value is None or not DECIMAL_PATTERN.fullmatch(value.strip()):
        raise NumberFormatError(field, value, index)
    return float(value)


def parse_placed_date(value: str, index: Optional[int] = None) -> date:
    """
    Return the calendar date of a timestamp like "2010-05-01T14:30:00".

    Args:
        value: Timestamp text
        index: Waypoint index for error messages

    Returns:
        Date portion of the timestamp

    Raises:
        MalformedDateError: If there is no separator or the prefix is not a date
    """
    text = value.strip()
    if DATE_TIME_SEPARATOR not in text:
        raise MalformedDateError(value, index)

    prefix = text.split(DATE_TIME_SEPARATOR, 1)[0]
    if not DATE_PATTERN.fullmatch(prefix):
        raise MalformedDateError(value, index)

    try:
        return datetime.strptime(prefix, "%Y-%m-%d").date()
    except ValueError as e:
        raise MalformedDateError(value, index) from e


def local_name(tag) -> str:
    """Strip the ``{namespace}`` prefix from an element tag."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def element_text(element) -> str:
    """Concatenated text of an element and its descendants."""
    return "".join(element.itertext())


def find_child(parent, tag: str):
    """First direct child with the given local name, in any namespace."""
    return parent.find(f"{{*}}{tag}")


def require_child(parent, tag: str, field: str, index: Optional[int] = None):
    """
    Like find_child, but a missing child is an error.

    Args:
        parent: Element to search
        tag: Local name of the child
        field: Field name reported when missing
        index: Waypoint index reported when missing

    Raises:
        MissingFieldError: If no such child exists
    """
    child = find_child(parent, tag)
    if child is None:
        raise MissingFieldError(field, index)
    return child


def require_attribute(element, name: str, field: str, index: Optional[int] = None) -> str:
    """Attribute value, raising MissingFieldError when absent."""
    value = element.get(name)
    if value is None:
        raise MissingFieldError(field, index)
    return value


def child_text(parent, tag: str, field: str, index: Optional[int] = None) -> str:
    """Text content of a required child element."""
    return element_text(require_child(parent, tag, field, index))
