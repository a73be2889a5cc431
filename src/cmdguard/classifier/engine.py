"""Classifier — first matching rule denies, no match allows."""

from __future__ import annotations

from typing import Iterable, Optional

from cmdguard.classifier.models import Verdict
from cmdguard.rules.models import Rule
from cmdguard.rules.registry import RuleRegistry

_DEFAULT_REGISTRY: Optional[RuleRegistry] = None


def default_registry() -> RuleRegistry:
    """Built-in rules only, no config or custom rules. Built once per process."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        from cmdguard.rules.builtin import ALL_BUILTIN_RULES

        registry = RuleRegistry()
        registry.register_many(ALL_BUILTIN_RULES)
        _DEFAULT_REGISTRY = registry
    return _DEFAULT_REGISTRY


def find_match(command: str, rules: Iterable[Rule]) -> Optional[Rule]:
    """Return the first rule whose pattern occurs in *command*, else None."""
    for rule in rules:
        if rule.matches(command):
            return rule
    return None


def classify(command: str, registry: Optional[RuleRegistry] = None) -> Verdict:
    """Classify *command* against the enabled rules of *registry*."""
    if registry is None:
        registry = default_registry()
    rules = registry.enabled_rules()
    rule = find_match(command, rules)
    if rule is None:
        return Verdict.allow(command)
    return Verdict.deny(command, rule)
