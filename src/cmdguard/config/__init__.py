"""Configuration loading, schema, and defaults."""

from cmdguard.config.loader import ConfigError, load_config
from cmdguard.config.schema import AuditConfig, GuardConfig, RulesConfig

__all__ = [
    "AuditConfig",
    "ConfigError",
    "GuardConfig",
    "RulesConfig",
    "load_config",
]
