"""Rule engine — models, registry, built-in rules."""

from cmdguard.rules.models import Rule
from cmdguard.rules.registry import RuleRegistry, build_registry

__all__ = ["Rule", "RuleRegistry", "build_registry"]
