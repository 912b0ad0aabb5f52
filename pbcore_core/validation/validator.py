"""
Metadata Validator
==================

Validates one Dublin Core or PBCore document: schema validation against
the dialect's bundled XSD plus optional heuristic checks, collected into a
single ordered list of findings.

Example:
    validator = Validator(open("record.xml", "rb"), "1.3")
    validator.check_best_practices()
    if not validator.is_valid():
        for finding in validator.errors():
            print(finding.line, finding)
"""

from typing import Any, Iterable, List, Optional
import logging

from pbcore_core.config.settings import ValidatorConfig, configure_logging
from pbcore_core.validation.base import Finding, FindingKind, FindingSink
from pbcore_core.validation.picklists import best_practice_rules, picklist_for
from pbcore_core.validation.rules import RuleEngine
from pbcore_core.validation.schema import (
    DEFAULT_DIALECT,
    Dialect,
    SchemaRegistry,
    get_registry,
    reset_registry,
)
from pbcore_core.xml.errors import capture_errors, report_log
from pbcore_core.xml.loader import Source, load_document

logger = logging.getLogger(__name__)


class Validator:
    """
    Validator for a single metadata document.

    The document is parsed on construction. Schema validation runs lazily,
    at most once, the first time ``is_valid()`` or ``errors()`` is called.
    Heuristic checks may be run at any point and add to the same findings.

    An instance is meant for one caller at a time.
    """

    def __init__(self,
                 source: Source,
                 dialect: Optional[str] = None,
                 registry: Optional[SchemaRegistry] = None,
                 config: Optional[ValidatorConfig] = None):
        """
        Parse ``source`` for validation.

        Args:
            source: Readable stream, bytes or str containing the document
            dialect: Dialect key (default: config's default dialect, else "DC")
            registry: Schema registry (default: the shared registry)
            config: Validator configuration

        Raises:
            UnknownDialectError: If the dialect is not declared in the registry
        """
        self._config = config
        self._registry = registry if registry is not None else get_registry()
        if dialect is None:
            dialect = config.default_dialect if config else DEFAULT_DIALECT
        self._dialect = self._registry.dialect(dialect)

        self._sink = FindingSink()
        self._schema_checked = False
        self._best_practices_checked = False

        self._document = load_document(source, self._sink.receiver(FindingKind.PARSE))
        self._rules = (RuleEngine(self._document, self._dialect.namespace, self._sink)
                       if self._document is not None else None)

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    @property
    def version(self) -> str:
        """Human-readable dialect label, e.g. "PBCore 1.3"."""
        return self._dialect.version

    @property
    def document(self) -> Optional[Any]:
        """The parsed lxml ElementTree, or None if parsing failed."""
        return self._document

    @property
    def schema_checked(self) -> bool:
        return self._schema_checked

    def checkschema(self) -> None:
        """Validate the document against the dialect's schema, once."""
        if self._schema_checked or self._document is None:
            return

        # Resolve first: a schema that fails to load leaves the check pending.
        schema = self._registry.schema(self._dialect.key)
        self._schema_checked = True
        with capture_errors(self._sink.receiver(FindingKind.SCHEMA)):
            if not schema.validate(self._document):
                count = report_log(schema.error_log)
                logger.debug(f"{count} schema violation(s) against {self.version}")

    def is_valid(self) -> bool:
        """Return True iff the document is perfectly okay."""
        self.checkschema()
        return not self._sink

    def is_valid_xml(self) -> bool:
        """Return True iff the document is at least well-formed XML."""
        return self._document is not None

    def errors(self) -> List[Finding]:
        """Return every finding so far, in discovery order."""
        self.checkschema()
        return self._sink.snapshot()

    def findings_of(self, kind: FindingKind) -> List[Finding]:
        """Return the findings of one kind, in discovery order."""
        self.checkschema()
        return self._sink.of_kind(kind)

    # Heuristic checks

    def check_picklist(self, element: str, picklist: Optional[Iterable[str]] = None) -> None:
        """
        Check ``element`` against a suggested picklist.

        Args:
            element: Local element name
            picklist: Suggested values (default: the dialect's built-in list)

        Raises:
            ValueError: If no picklist is given and none is known for ``element``
        """
        if picklist is None:
            overrides = self._config.rules.picklists if self._config else None
            picklist = picklist_for(element, self._dialect, overrides)
            if not picklist:
                raise ValueError(f"No suggested picklist for {element} in {self.version}")
        if self._rules is None:
            return
        self._rules.check_picklist(element, picklist)

    def check_lists(self, element: str) -> None:
        if self._rules is not None:
            self._rules.check_lists(element)

    def check_names(self, element: str) -> None:
        if self._rules is not None:
            self._rules.check_names(element)

    def check_only_one_format(self) -> None:
        if self._rules is not None:
            self._rules.check_only_one_format()

    def check_best_practices(self) -> None:
        """
        Run the dialect's built-in heuristic rule set, once.

        Picklists, name and list elements come from the configuration's
        rule settings where given, otherwise from the dialect defaults.
        """
        if self._best_practices_checked or self._rules is None:
            return

        self._best_practices_checked = True
        rules = best_practice_rules(self._dialect, self._config.rules if self._config else None)

        for element, picklist in rules.picklists.items():
            self._rules.check_picklist(element, picklist)
        for element in rules.list_elements:
            self._rules.check_lists(element)
        for element in rules.name_elements:
            self._rules.check_names(element)
        if rules.check_formats:
            self._rules.check_only_one_format()

        heuristic = len(self._sink.of_kind(FindingKind.HEURISTIC))
        logger.debug(f"Best-practice checks for {self.version}: {heuristic} suggestion(s)")


def configure(config: ValidatorConfig) -> SchemaRegistry:
    """
    Apply a configuration at startup.

    Sets up logging at ``config.log_level``, builds the schema registry
    from ``config.schema`` (compiling every dialect if ``preload`` is set)
    and installs it as the shared default registry.

    Args:
        config: Validator configuration

    Returns:
        The installed SchemaRegistry
    """
    configure_logging(config.log_level)
    registry = SchemaRegistry.from_config(config.schema)
    reset_registry(registry)
    logger.info(f"Validator configured (default dialect {config.default_dialect}, "
                f"schemas in {registry.schema_dir})")
    return registry
