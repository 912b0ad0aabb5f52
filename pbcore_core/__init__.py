"""
PBCore Core Library
===================

Validation of Dublin Core and PBCore metadata documents:

- XML loading with captured parse errors
- Per-dialect XML Schema validation with cached compiled schemas
- Heuristic best-practice checks (picklists, lists, names, formats)
- Configuration management

Architecture
------------

    pbcore_core/
    ├── xml/           - Loading, error capture and element helpers
    ├── validation/    - Findings, schema registry, rules, Validator
    ├── config/        - Configuration management
    └── data/          - Bundled XSD files, one per dialect

Usage
-----

    from pbcore_core import Validator

    validator = Validator(xml_string, "1.3")
    validator.check_best_practices()
    if not validator.is_valid():
        for finding in validator.errors():
            print(finding)

Supported dialects: "DC" (Dublin Core, the default), "Simple"
(Simple DC), "1.2.1" (PBCore 1.2.1) and "1.3" (PBCore 1.3).
"""

__version__ = "1.0.0"

from pbcore_core.validation import (
    Finding,
    FindingKind,
    FindingSink,
    Dialect,
    SchemaRegistry,
    SchemaLoadError,
    UnknownDialectError,
    RuleEngine,
    Validator,
    configure,
    get_registry,
    reset_registry,
)

from pbcore_core.config import (
    ValidatorConfig,
    load_config,
    configure_logging,
)

__all__ = [
    # Version
    "__version__",
    # Validation
    "Finding",
    "FindingKind",
    "FindingSink",
    "Dialect",
    "SchemaRegistry",
    "SchemaLoadError",
    "UnknownDialectError",
    "RuleEngine",
    "Validator",
    "configure",
    "get_registry",
    "reset_registry",
    # Configuration
    "ValidatorConfig",
    "load_config",
    "configure_logging",
]
