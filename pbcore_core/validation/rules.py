"""
Heuristic Rules
===============

Content checks for things which are not schema errors, exactly, but
which are not really good ideas either. This is subjective, of course;
every finding here is a suggestion.

Each rule selects elements by local name within the dialect namespace
(unqualified elements included), walks them in document order, and
appends one finding per offending element to the sink.
"""

from typing import Any, Iterable, Iterator
import logging
import re

from pbcore_core.validation.base import FindingKind, FindingSink
from pbcore_core.xml.utils import (
    find_descendants,
    get_element_path,
    iter_elements,
    safe_get_text,
    source_line,
    text_content,
)

logger = logging.getLogger(__name__)

LIST_DELIMITERS = re.compile(r'[,|;]')

# "Mike Castleman", "Mike J. Castleman", "J. Castleman". ASCII word characters only.
NAME_PATTERN = re.compile(r'(\w+\.?(\s\w+\.?)?)\s+(\w+)', re.ASCII)

INSTANTIATION = 'pbcoreInstantiation'
FORMAT_DIGITAL = 'formatDigital'
FORMAT_PHYSICAL = 'formatPhysical'


class RuleEngine:
    """
    Runs heuristic checks over one parsed document.

    Example:
        engine = RuleEngine(tree, PBCORE_NAMESPACE, sink)
        engine.check_picklist("creatorRole", ["Producer", "Director"])
        engine.check_names("creator")
        engine.check_only_one_format()
    """

    def __init__(self, tree: Any, namespace: str, sink: FindingSink):
        """
        Initialize the engine.

        Args:
            tree: Parsed lxml ElementTree (or root element)
            namespace: Namespace URI used for element selection
            sink: Where findings are appended
        """
        self.tree = tree
        self.namespace = namespace
        self.sink = sink

    def each_element(self, element: str) -> Iterator[Any]:
        """Yield every ``element`` node in document order."""
        return iter_elements(self.tree, element, self.namespace)

    def _add(self, node: Any, message: str) -> None:
        self.sink.add(
            message,
            line=source_line(node),
            kind=FindingKind.HEURISTIC,
            path=get_element_path(node),
        )

    def check_picklist(self, element: str, picklist: Iterable[str]) -> None:
        """
        Check that ``element`` holds one of the suggested values.

        Comparison is case-insensitive on the trimmed content. Empty
        elements get their own finding. The list check always runs on the
        same element afterwards.
        """
        allowed = {value.strip().lower() for value in picklist}
        for node in self.each_element(element):
            content = safe_get_text(node)
            line = source_line(node)
            if not content:
                self._add(node, f"{element} on line {line} is empty. "
                                f"Perhaps consider leaving that element out instead.")
            elif content.lower() not in allowed:
                self._add(node, f"“{content}” on line {line} is not in the suggested "
                                f"picklist values for {element}.")
        self.check_lists(element)

    def check_lists(self, element: str) -> None:
        """Flag ``element`` content that looks like a delimited list."""
        for node in self.each_element(element):
            content = text_content(node)
            if LIST_DELIMITERS.search(content):
                self._add(node, f"In {element} on line {source_line(node)}, you have entered "
                                f"“{content.strip()}”, which looks like it may be a list. "
                                f"It is preferred instead to repeat the containing element.")

    def check_names(self, element: str) -> None:
        """Look for "Mike Castleman" and suggest "Castleman, Mike" instead."""
        for node in self.each_element(element):
            content = safe_get_text(node)
            match = NAME_PATTERN.fullmatch(content)
            if match:
                first, last = match.group(1), match.group(3)
                self._add(node, f"It looks like the {element} “{content}” on line "
                                f"{source_line(node)} might be a person's name. If it is, "
                                f"then it is preferred to have it like “{last}, {first}”.")

    def check_only_one_format(self) -> None:
        """Ensure no single instantiation has both a formatDigital and a formatPhysical."""
        for node in self.each_element(INSTANTIATION):
            if (find_descendants(node, FORMAT_DIGITAL, self.namespace)
                    and find_descendants(node, FORMAT_PHYSICAL, self.namespace)):
                self._add(node, f"It looks like the instantiation on line {source_line(node)} "
                                f"contains both a formatDigital and a formatPhysical element. "
                                f"This is probably not what you intended.")
