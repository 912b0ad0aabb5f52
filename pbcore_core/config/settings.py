"""
Configuration Settings
======================

Configuration dataclasses for the metadata validator.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, List, Dict, Any, Union
import json
import logging

import yaml

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class SchemaConfig:
    """Schema-related configuration."""

    schema_dir: str = ""  # Empty means use the bundled schemas
    preload: bool = False  # Compile every dialect at startup


@dataclass
class RuleConfig:
    """
    Best-practice rule configuration.

    ``picklists`` replace the built-in suggested values for the elements
    they name. ``None`` for the element lists means the dialect defaults.
    """

    picklists: Dict[str, List[str]] = field(default_factory=dict)
    name_elements: Optional[List[str]] = None
    list_elements: Optional[List[str]] = None
    check_formats: bool = True


@dataclass
class ValidatorConfig:
    """
    Complete validator configuration.

    Example:
        config = ValidatorConfig()
        config.default_dialect = "1.3"
        config.rules.picklists["creatorRole"] = ["Producer", "Director"]
        save_config(config, Path("validator.yaml"))
    """

    schema: SchemaConfig = field(default_factory=SchemaConfig)
    rules: RuleConfig = field(default_factory=RuleConfig)

    # General settings
    default_dialect: str = "DC"
    log_level: str = "INFO"

    # Custom extensions
    custom: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'schema': asdict(self.schema),
            'rules': asdict(self.rules),
            'default_dialect': self.default_dialect,
            'log_level': self.log_level,
            'custom': self.custom,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ValidatorConfig':
        """Create from dictionary."""
        config = cls()

        if 'schema' in data:
            config.schema = SchemaConfig(**data['schema'])
        if 'rules' in data:
            config.rules = RuleConfig(**data['rules'])

        if 'default_dialect' in data:
            config.default_dialect = data['default_dialect']
        if 'log_level' in data:
            config.log_level = data['log_level']
        if 'custom' in data:
            config.custom = data['custom']

        return config


def load_config(config_path: Path) -> ValidatorConfig:
    """
    Load configuration from file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config_path: Path to config file

    Returns:
        ValidatorConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f) or {}
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.info(f"Loaded configuration from {config_path}")
    return ValidatorConfig.from_dict(data)


def save_config(config: ValidatorConfig, config_path: Path) -> None:
    """
    Save configuration to file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config: ValidatorConfig to save
        config_path: Path to save config file

    Raises:
        ValueError: If file format is not supported
    """
    config_path = Path(config_path)
    suffix = config_path.suffix.lower()
    if suffix not in ['.yaml', '.yml', '.json']:
        raise ValueError(f"Unsupported config format: {suffix}")

    data = config.to_dict()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        if suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Saved configuration to {config_path}")


def get_default_config() -> ValidatorConfig:
    """Get default configuration."""
    return ValidatorConfig()


def configure_logging(level: Union[str, int] = "INFO") -> None:
    """Set up root logging in the format used across the package."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
