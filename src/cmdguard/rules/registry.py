"""Rule registry — loads built-in and custom rules, applies config filters."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

import yaml

from cmdguard.config.defaults import CUSTOM_RULES_DIR
from cmdguard.config.loader import ConfigError
from cmdguard.config.schema import GuardConfig
from cmdguard.rules.models import CATEGORIES, Rule


class RuleRegistry:
    """Ordered store for all command rules.

    Insertion order is evaluation order. Enabling and disabling is tracked
    here so the registered Rule objects are never mutated.
    """

    def __init__(self) -> None:
        self._rules: Dict[str, Rule] = {}
        self._disabled: Set[str] = set()

    # ---- registration ----

    def register(self, rule: Rule) -> None:
        self._rules[rule.id] = rule

    def register_many(self, rules: list[Rule]) -> None:
        for r in rules:
            self.register(r)

    # ---- queries ----

    @property
    def all_rules(self) -> List[Rule]:
        return list(self._rules.values())

    def get(self, rule_id: str) -> Optional[Rule]:
        return self._rules.get(rule_id)

    def is_enabled(self, rule: Rule) -> bool:
        return rule.enabled and rule.id not in self._disabled

    def enabled_rules(self) -> List[Rule]:
        return [r for r in self._rules.values() if self.is_enabled(r)]

    def by_category(self, category: str) -> List[Rule]:
        return [r for r in self._rules.values() if r.category == category]

    # ---- config filtering ----

    def apply_config(self, config: GuardConfig) -> None:
        """Enable / disable rules based on config.rules."""
        enable_list = config.rules.enable
        disable_list = config.rules.disable

        for rule_id in self._rules:
            # If an explicit enable-list exists, only those are enabled
            if enable_list and rule_id not in enable_list:
                self._disabled.add(rule_id)
            # Disable list always takes precedence
            if rule_id in disable_list:
                self._disabled.add(rule_id)

    # ---- custom rule loading ----

    def load_custom_rules(self, directory: Path) -> int:
        """Load YAML rule files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_rules(path)
        return count

    def _load_yaml_rules(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Failed to read rules from {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            self.register(_rule_from_entry(entry, path))
            count += 1
        return count


def _rule_from_entry(entry: Any, path: Path) -> Rule:
    if not isinstance(entry, dict) or "id" not in entry or "pattern" not in entry:
        raise ConfigError(f"{path}: every rule needs at least 'id' and 'pattern'")
    category = entry.get("category", "filesystem")
    if category not in CATEGORIES:
        raise ConfigError(f"{path}: unknown category {category!r} for {entry['id']}")
    try:
        return Rule(
            id=str(entry["id"]),
            name=entry.get("name", entry["id"]),
            description=entry.get("description", ""),
            category=category,
            pattern=str(entry["pattern"]),
            enabled=bool(entry.get("enabled", True)),
        )
    except re.error as exc:
        raise ConfigError(f"{path}: invalid pattern for {entry['id']}: {exc}") from exc


def build_registry(config: GuardConfig, root: Path) -> RuleRegistry:
    """Create a fully populated, config-filtered rule registry."""
    from cmdguard.rules.builtin import ALL_BUILTIN_RULES

    registry = RuleRegistry()
    registry.register_many(ALL_BUILTIN_RULES)

    # Custom rules from .cmdguard-rules/
    registry.load_custom_rules(root / CUSTOM_RULES_DIR)

    # Apply enable/disable from config
    registry.apply_config(config)

    return registry
