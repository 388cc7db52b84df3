"""Custom exceptions for the geocache parser."""

__all__ = [
    "GeocacheParserError",
    "DocumentLoadError",
    "UnsupportedFormatError",
    "IndexOutOfRangeError",
    "MissingFieldError",
    "MalformedDateError",
    "NumberFormatError",
]


class GeocacheParserError(Exception):
    """Base exception for all geocache parser errors."""

    pass


class DocumentLoadError(GeocacheParserError):
    """Raised when a file cannot be read or is not well-formed XML."""

    def __init__(self, message: str, file_path: str = None):
        self.file_path = file_path
        if file_path:
            message = f"{message} (File: {file_path})"
        super().__init__(message)


class UnsupportedFormatError(GeocacheParserError):
    """Raised when a document is neither GPX nor LOC."""

    def __init__(self, message: str, root_tag: str = None):
        self.root_tag = root_tag
        if root_tag:
            message = f"{message} (Root: {root_tag})"
        super().__init__(message)


class IndexOutOfRangeError(GeocacheParserError):
    """Raised when a waypoint index is outside the document."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(
            f"Waypoint index {index} out of range (document has {count} waypoints)"
        )


class MissingFieldError(GeocacheParserError):
    """Raised when a required element or attribute is absent."""

    def __init__(self, field: str, index: int = None):
        self.field = field
        self.index = index
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with waypoint information."""
        message = f"Missing required field '{self.field}'"
        if self.index is not None:
            return f"{message} (Waypoint: {self.index})"
        return message


class MalformedDateError(GeocacheParserError):
    """Raised when a waypoint time is not a date/time value."""

    def __init__(self, value: str, index: int = None):
        self.value = value
        self.index = index
        message = f"Malformed placed date {value!r}"
        if index is not None:
            message = f"{message} (Waypoint: {index})"
        super().__init__(message)


class NumberFormatError(GeocacheParserError):
    """Raised when a coordinate is not a decimal number."""

    def __init__(self, field: str, value: str, index: int = None):
        self.field = field
        self.value = value
        self.index = index
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with field and waypoint information."""
        parts = [f"Invalid decimal {self.value!r} for '{self.field}'"]
        if self.index is not None:
            parts.append(f"Waypoint: {self.index}")
        return " | ".join(parts)
