"""
Schema Registry
===============

Maps dialect keys to compiled XML Schemas. Each schema is compiled on
first use and then kept for the lifetime of the registry; compiled
``XMLSchema`` objects are never modified afterwards.

Example:
    registry = SchemaRegistry()
    registry.load_all()          # fail at startup, not mid-request
    schema = registry.schema("1.3")
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional
import logging
import threading

from lxml import etree

logger = logging.getLogger(__name__)

DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
PBCORE_NAMESPACE = "http://www.pbcore.org/PBCore/PBCoreNamespace.html"

DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parent.parent / "data"


class UnknownDialectError(ValueError):
    """Raised when a dialect key is not declared in the registry."""


class SchemaLoadError(Exception):
    """Raised when a bundled XSD exists but cannot be compiled."""


@dataclass(frozen=True)
class Dialect:
    """One supported metadata schema variant."""

    key: str            # Lookup key, e.g. "1.3"
    version: str        # Human-readable label, e.g. "PBCore 1.3"
    xsd: str            # Schema file name inside the schema directory
    namespace: str      # Namespace URI used for element selection

    @property
    def is_pbcore(self) -> bool:
        return self.namespace == PBCORE_NAMESPACE


# The bundled PBCore XSDs are condensed stand-ins for the published schemas:
# document structure and element names only. Point a registry's schema_dir
# at the official PBCore files to validate against those instead.
DIALECTS: Dict[str, Dialect] = {
    "DC": Dialect("DC", "DublinCore", "dc.xsd", DC_NAMESPACE),
    "Simple": Dialect("Simple", "Simple DC", "simple_dc.xsd", DC_NAMESPACE),
    "1.2.1": Dialect("1.2.1", "PBCore 1.2.1", "PBCoreXSD_Ver_1-2-1.xsd", PBCORE_NAMESPACE),
    "1.3": Dialect("1.3", "PBCore 1.3", "PBCoreXSD-v1.3.xsd", PBCORE_NAMESPACE),
}

DEFAULT_DIALECT = "DC"


class SchemaRegistry:
    """
    Compiled-schema cache keyed by dialect.

    The registry is an ordinary object: build one at startup and hand it
    to every Validator, or use ``get_registry()`` for the shared default.
    Lookups of already compiled schemas take no lock; compiling a missing
    schema is serialized so each dialect is compiled exactly once.
    """

    def __init__(self,
                 schema_dir: Optional[Path] = None,
                 dialects: Optional[Mapping[str, Dialect]] = None):
        """
        Initialize the registry.

        Args:
            schema_dir: Directory holding the XSD files (default: bundled data)
            dialects: Dialect table (default: DIALECTS)
        """
        self._schema_dir = Path(schema_dir) if schema_dir else DEFAULT_SCHEMA_DIR
        self._dialects: Dict[str, Dialect] = dict(dialects if dialects is not None else DIALECTS)
        self._schemas: Dict[str, etree.XMLSchema] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config) -> 'SchemaRegistry':
        """
        Create a registry from a SchemaConfig.

        Eagerly compiles every dialect when ``config.preload`` is set.
        """
        registry = cls(schema_dir=Path(config.schema_dir) if config.schema_dir else None)
        if config.preload:
            registry.load_all()
        return registry

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def keys(self) -> List[str]:
        """Return the declared dialect keys."""
        return list(self._dialects)

    def dialect(self, key: str) -> Dialect:
        """
        Look up a dialect.

        Raises:
            UnknownDialectError: If ``key`` is not declared
        """
        try:
            return self._dialects[key]
        except KeyError:
            known = ", ".join(sorted(self._dialects))
            raise UnknownDialectError(
                f"Unknown dialect {key!r} (known dialects: {known})"
            ) from None

    def schema_path(self, key: str) -> Path:
        """Return the path of the XSD file for a dialect."""
        return self._schema_dir / self.dialect(key).xsd

    def is_loaded(self, key: str) -> bool:
        """Check whether a dialect's schema has been compiled yet."""
        return key in self._schemas

    def schema(self, key: str) -> 'etree.XMLSchema':
        """
        Get the compiled schema for a dialect, compiling it on first use.

        Args:
            key: Dialect key

        Returns:
            Compiled XMLSchema (the same object on every call)

        Raises:
            UnknownDialectError: If ``key`` is not declared
            FileNotFoundError: If the XSD file is missing
            SchemaLoadError: If the XSD cannot be compiled
        """
        schema = self._schemas.get(key)
        if schema is not None:
            return schema

        with self._lock:
            schema = self._schemas.get(key)
            if schema is None:
                schema = self._compile(key)
                self._schemas[key] = schema
        return schema

    def load_all(self) -> None:
        """Compile every declared dialect now."""
        for key in self._dialects:
            self.schema(key)

    def _compile(self, key: str) -> 'etree.XMLSchema':
        dialect = self.dialect(key)
        xsd_path = self.schema_path(key)
        if not xsd_path.exists():
            raise FileNotFoundError(f"Schema file not found for {dialect.version}: {xsd_path}")

        logger.info(f"Loading {dialect.version} schema: {xsd_path}")
        try:
            xsd_doc = etree.parse(str(xsd_path))
            schema = etree.XMLSchema(xsd_doc)
        except (etree.XMLSyntaxError, etree.XMLSchemaParseError) as e:
            raise SchemaLoadError(f"Could not compile {xsd_path}: {e}") from e
        logger.info(f"{dialect.version} schema loaded successfully")
        return schema


_default_registry: Optional[SchemaRegistry] = None
_default_registry_lock = threading.Lock()


def get_registry() -> SchemaRegistry:
    """Get or create the shared default registry."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = SchemaRegistry()
        return _default_registry


def reset_registry(registry: Optional[SchemaRegistry] = None) -> None:
    """Replace the shared default registry (useful for testing)."""
    global _default_registry
    with _default_registry_lock:
        _default_registry = registry
