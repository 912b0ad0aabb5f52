"""
Findings
========

The record type for validation messages and the ordered sink a validator
collects them in.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional
import logging

logger = logging.getLogger(__name__)


class FindingKind(str, Enum):
    """Where a finding came from."""
    PARSE = "parse"
    SCHEMA = "schema"
    HEURISTIC = "heuristic"


@dataclass(frozen=True)
class Finding:
    """
    A single validation message.

    Attributes:
        message: Human-readable description
        line: 1-based source line number, when known
        kind: Parse error, schema violation or heuristic suggestion
        path: XPath-like location of the offending element (heuristics only)
    """
    message: str
    line: Optional[int] = None
    kind: FindingKind = FindingKind.SCHEMA
    path: Optional[str] = None

    def __str__(self) -> str:
        return self.message


@dataclass
class FindingSink:
    """
    Append-only, ordered collection of findings.

    Findings keep their discovery order and are never deduplicated. A sink
    is only ever emptied by creating a new one.
    """
    findings: List[Finding] = field(default_factory=list)

    def add(self, message: str,
            line: Optional[int] = None,
            kind: FindingKind = FindingKind.SCHEMA,
            path: Optional[str] = None) -> Finding:
        """
        Record a finding.

        Args:
            message: Human-readable description
            line: Source line number (optional)
            kind: Finding kind
            path: Element path (optional)

        Returns:
            The recorded Finding
        """
        finding = Finding(message=message, line=line, kind=kind, path=path)
        self.findings.append(finding)
        logger.debug(f"{kind.value} finding (line {line}): {message}")
        return finding

    def receiver(self, kind: FindingKind):
        """Return a ``(message, line)`` callback that records ``kind`` findings."""
        def receive(message: str, line: Optional[int]) -> None:
            self.add(message, line=line, kind=kind)
        return receive

    def snapshot(self) -> List[Finding]:
        """Return a copy of all findings in discovery order."""
        return list(self.findings)

    def of_kind(self, kind: FindingKind) -> List[Finding]:
        """Return a copy of the findings of one kind, in discovery order."""
        return [f for f in self.findings if f.kind == kind]

    def counts_by_kind(self) -> Dict[str, int]:
        """Get finding counts by kind."""
        by_kind: Dict[str, int] = {}
        for finding in self.findings:
            by_kind[finding.kind.value] = by_kind.get(finding.kind.value, 0) + 1
        return by_kind

    def __len__(self) -> int:
        return len(self.findings)

    def __iter__(self) -> Iterator[Finding]:
        return iter(self.snapshot())

    def __bool__(self) -> bool:
        return bool(self.findings)
