"""
XML Utility Functions
=====================

Helpers for walking parsed metadata documents. These functions work with
lxml elements and provide consistent handling of namespaces, text content
and source locations.
"""

from typing import Any, Iterator, List, Optional
import logging

logger = logging.getLogger(__name__)


def local_name(element: Any) -> str:
    """
    Extract local name from element tag, stripping any namespace.

    Args:
        element: XML element

    Returns:
        Local tag name without namespace

    Example:
        >>> elem = etree.Element("{http://purl.org/dc/elements/1.1/}title")
        >>> local_name(elem)
        'title'
    """
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def namespace_of(element: Any) -> str:
    """Return the namespace URI of an element, or "" when unqualified."""
    tag = element.tag
    if not isinstance(tag, str) or not tag.startswith("{"):
        return ""
    return tag[1:].split("}", 1)[0]


def matches(element: Any, name: str, namespace: str) -> bool:
    """
    Check whether an element is ``name`` in ``namespace``.

    Unqualified elements also match so that documents which forgot to
    declare the namespace are still checked.
    """
    if local_name(element) != name:
        return False
    return namespace_of(element) in (namespace, "")


def iter_elements(root: Any, name: str, namespace: str) -> Iterator[Any]:
    """
    Iterate over all elements named ``name`` below (and including) root.

    Selection is by namespace URI, never by prefix, so any prefix binding
    or a default namespace declaration selects the same nodes. Elements
    are yielded in document order.

    Args:
        root: Root element or ElementTree to search
        name: Local element name
        namespace: Namespace URI the element should belong to

    Yields:
        Matching elements
    """
    if hasattr(root, "getroot"):
        root = root.getroot()
    if root is None:
        return
    for elem in root.iter():
        if matches(elem, name, namespace):
            yield elem


def find_descendants(element: Any, name: str, namespace: str) -> List[Any]:
    """
    Find all descendants of element (not the element itself) named ``name``.

    Args:
        element: Element whose subtree is searched
        name: Local element name
        namespace: Namespace URI

    Returns:
        List of matching elements at any depth
    """
    return [
        elem for elem in element.iterdescendants()
        if matches(elem, name, namespace)
    ]


def text_content(element: Any) -> str:
    """
    Get the full text content of an element, untrimmed.

    This is the concatenation of every descendant text node, the same
    value a DOM ``textContent`` would give.
    """
    return ''.join(element.itertext())


def safe_get_text(element: Any, default: str = "") -> str:
    """
    Safely get all text content from an element, trimmed.

    Args:
        element: XML element
        default: Default value if no text

    Returns:
        Concatenated text content
    """
    text = text_content(element)
    return text.strip() if text else default


def source_line(element: Any) -> Optional[int]:
    """Return the 1-based source line of an element, if known."""
    return getattr(element, "sourceline", None)


def normalize_whitespace(text: str) -> str:
    """
    Normalize whitespace in text (collapse multiple spaces, trim).

    Args:
        text: Input text

    Returns:
        Normalized text
    """
    if not text:
        return ""
    return ' '.join(text.split())


def get_element_path(element: Any) -> str:
    """
    Get XPath-like path to an element for debugging.

    Args:
        element: XML element

    Returns:
        Path string like "/pbcoreDescriptionDocument/pbcoreTitle[2]/title[1]"
    """
    parts = []
    current = element

    while current is not None:
        name = local_name(current)
        parent = current.getparent()

        if parent is not None:
            # Count same-named siblings
            index = 1
            for sibling in parent:
                if sibling is current:
                    break
                if local_name(sibling) == name:
                    index += 1
            parts.append(f"{name}[{index}]")
        else:
            parts.append(name)

        current = parent

    return "/" + "/".join(reversed(parts))
