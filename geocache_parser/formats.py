"""Format detection and extractor selection."""

from typing import Union

from .constants import GPX_ROOT_TAG, LOC_ROOT_TAG
from .document import DocumentSource, document_root
from .exceptions import UnsupportedFormatError
from .gpx_extractor import GpxRecordExtractor
from .helpers import local_name
from .loc_extractor import LocRecordExtractor

__all__ = [
    "detect_format",
    "open_extractor",
]

EXTRACTORS = {
    GPX_ROOT_TAG: GpxRecordExtractor,
    LOC_ROOT_TAG: LocRecordExtractor,
}


def detect_format(document: DocumentSource) -> str:
    """
    Identify a document as "gpx" or "loc" from its root element.

    Args:
        document: File path, parsed tree or element

    Returns:
        Format name

    Raises:
        UnsupportedFormatError: If the root is neither <gpx> nor <loc>
    """
    root_tag = local_name(document_root(document).tag)
    if root_tag not in EXTRACTORS:
        raise UnsupportedFormatError("Not a GPX or LOC document", root_tag)
    return root_tag


def open_extractor(
    document: DocumentSource,
) -> Union[GpxRecordExtractor, LocRecordExtractor]:
    """
    Build the extractor matching a document's format.

    The file is parsed once and the tree handed to the extractor.

    Example:
        >>> extractor = open_extractor("caches.loc")
        >>> extractor.extract(0).cache_id
        'GC123'
    """
    root = document_root(document)
    return EXTRACTORS[detect_format(root)](root)
