"""
Document Loader
===============

Turns raw input into a parsed lxml tree. Parsing is delegated entirely to
lxml; this module only picks the right entry point for the input type and
makes sure failures are captured instead of raised.
"""

from typing import Any, IO, Optional, Union
import io
import logging

from lxml import etree

from pbcore_core.xml.errors import ErrorReceiver, capture_errors

logger = logging.getLogger(__name__)

Source = Union[str, bytes, IO[Any]]


def make_parser(encoding: Optional[str] = None) -> 'etree.XMLParser':
    """
    Create the parser used for metadata documents.

    Line numbers are kept for error reporting. External entities and
    network access are disabled: a metadata record has no business
    pulling in other files.

    Args:
        encoding: Override the document's declared encoding

    Returns:
        Configured XMLParser
    """
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_blank_text=False,
        huge_tree=False,
    )


def parse_source(source: Source) -> 'etree._ElementTree':
    """
    Parse a stream, bytes or string into an ElementTree.

    Strings are re-encoded as UTF-8 and parsed with the encoding forced,
    so an XML declaration naming another encoding inside an already
    decoded string does not confuse the parser. Streams are read once and
    their content handled as bytes or str accordingly, so text-mode files
    work the same as binary ones.

    Raises:
        etree.XMLSyntaxError: If the input is not well-formed
        TypeError: If source is not a supported input type
    """
    if hasattr(source, "read"):
        source = source.read()
    if isinstance(source, (bytes, bytearray)):
        return etree.parse(io.BytesIO(source), make_parser())
    if isinstance(source, str):
        return etree.parse(io.BytesIO(source.encode("utf-8")), make_parser("utf-8"))
    raise TypeError("source must be a readable stream, bytes or str")


def load_document(source: Source, receiver: ErrorReceiver) -> Optional['etree._ElementTree']:
    """
    Parse ``source``, routing any parse errors to ``receiver``.

    Args:
        source: Readable stream, bytes or str containing one XML document
        receiver: Callable taking ``(message, line)`` for each parse error

    Returns:
        The parsed tree, or None if the input could not be parsed
    """
    tree = None
    with capture_errors(receiver):
        tree = parse_source(source)

    if tree is None:
        logger.debug("Document could not be parsed")
    else:
        logger.debug(f"Parsed document with root <{tree.getroot().tag}>")
    return tree
