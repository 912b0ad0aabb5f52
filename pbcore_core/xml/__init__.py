"""
XML Processing Utilities
========================

Document loading, error capture and element helpers shared by the
validation framework.
"""

from pbcore_core.xml.utils import (
    local_name,
    namespace_of,
    matches,
    iter_elements,
    find_descendants,
    text_content,
    safe_get_text,
    source_line,
    normalize_whitespace,
    get_element_path,
)

from pbcore_core.xml.errors import (
    ErrorReceiver,
    active_receiver,
    capture_errors,
    report,
    report_log,
)

from pbcore_core.xml.loader import (
    Source,
    make_parser,
    parse_source,
    load_document,
)

__all__ = [
    # Element helpers
    "local_name",
    "namespace_of",
    "matches",
    "iter_elements",
    "find_descendants",
    "text_content",
    "safe_get_text",
    "source_line",
    "normalize_whitespace",
    "get_element_path",
    # Error capture
    "ErrorReceiver",
    "active_receiver",
    "capture_errors",
    "report",
    "report_log",
    # Loading
    "Source",
    "make_parser",
    "parse_source",
    "load_document",
]
