"""Load configuration from .cmdguard.toml."""

from __future__ import annotations

import dataclasses
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from cmdguard.config.defaults import CONFIG_FILENAME
from cmdguard.config.schema import AuditConfig, GuardConfig, RulesConfig


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except Exception as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: GuardConfig) -> None:
    for name in ("enable", "disable"):
        value = getattr(cfg.rules, name)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"rules.{name} must be a list of rule ids")
    if not isinstance(cfg.audit.path, str) or not cfg.audit.path:
        raise ConfigError("audit.path must be a non-empty string")


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> GuardConfig:
    """Load, validate, and return a GuardConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        return GuardConfig()

    raw = _parse_toml(config_path)
    cfg = GuardConfig(
        version=str(raw.get("version", "1.0")),
        rules=_build_section(raw, RulesConfig, "rules"),
        audit=_build_section(raw, AuditConfig, "audit"),
    )
    _validate(cfg)
    return cfg
