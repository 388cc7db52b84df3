"""Loading GPX and LOC files into lxml element trees.

Extractors accept either a path or an already parsed tree. Paths go
through ``load_document`` so that read and syntax errors always surface
as ``DocumentLoadError`` with the offending file attached.
"""

import os
from typing import Union

from lxml import etree

from .decorators import timed
from .exceptions import DocumentLoadError
from .logger import logger

__all__ = [
    "load_document",
    "document_root",
]

DocumentSource = Union[str, os.PathLike, etree._ElementTree, etree._Element]


def _make_parser() -> etree.XMLParser:
    # Geocaching exports never need DTDs or external entities
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)


@timed
def load_document(path: Union[str, os.PathLike]) -> etree._ElementTree:
    """
    Parse an XML file from disk.

    Encoding (UTF-8 or UTF-16) is detected by lxml from the XML
    declaration and byte order mark.

    Args:
        path: File to parse

    Returns:
        Parsed element tree

    Raises:
        DocumentLoadError: If the file cannot be read or is not well-formed
    """
    file_path = os.fspath(path)
    logger.debug(f"Loading {file_path}")

    try:
        return etree.parse(file_path, _make_parser())
    except OSError as e:
        raise DocumentLoadError(f"Cannot read file: {e}", file_path) from e
    except etree.XMLSyntaxError as e:
        raise DocumentLoadError(f"Malformed XML: {e}", file_path) from e


def document_root(document: DocumentSource) -> etree._Element:
    """
    Root element of a document given as path, tree or element.

    Args:
        document: File path, parsed tree or element

    Returns:
        Root element
    """
    if isinstance(document, (str, os.PathLike)):
        document = load_document(document)
    if isinstance(document, etree._ElementTree):
        return document.getroot()
    return document
