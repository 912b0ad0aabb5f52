"""
Configuration Management
========================

Configuration utilities for the metadata validator.
"""

from pbcore_core.config.settings import (
    ValidatorConfig,
    SchemaConfig,
    RuleConfig,
    load_config,
    save_config,
    get_default_config,
    configure_logging,
)

__all__ = [
    "ValidatorConfig",
    "SchemaConfig",
    "RuleConfig",
    "load_config",
    "save_config",
    "get_default_config",
    "configure_logging",
]
