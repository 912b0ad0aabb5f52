"""
Validation Framework
====================

Schema and heuristic validation of Dublin Core / PBCore metadata.

Components:
- Finding / FindingSink: Validation messages and their ordered collection
- SchemaRegistry: Compiled XSDs per dialect
- RuleEngine: Heuristic content checks
- Validator: One document, one verdict
"""

from pbcore_core.validation.base import (
    Finding,
    FindingKind,
    FindingSink,
)

from pbcore_core.validation.schema import (
    DC_NAMESPACE,
    PBCORE_NAMESPACE,
    DIALECTS,
    DEFAULT_DIALECT,
    Dialect,
    SchemaRegistry,
    SchemaLoadError,
    UnknownDialectError,
    get_registry,
    reset_registry,
)

from pbcore_core.validation.picklists import (
    RuleSet,
    best_practice_rules,
)

from pbcore_core.validation.rules import RuleEngine

from pbcore_core.validation.validator import Validator, configure

__all__ = [
    # Findings
    "Finding",
    "FindingKind",
    "FindingSink",
    # Schemas
    "DC_NAMESPACE",
    "PBCORE_NAMESPACE",
    "DIALECTS",
    "DEFAULT_DIALECT",
    "Dialect",
    "SchemaRegistry",
    "SchemaLoadError",
    "UnknownDialectError",
    "get_registry",
    "reset_registry",
    # Rules
    "RuleSet",
    "best_practice_rules",
    "RuleEngine",
    # Validator
    "Validator",
    "configure",
]
