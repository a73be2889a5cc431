"""Classifier — verdict model and rule evaluation."""

from cmdguard.classifier.engine import classify, default_registry, find_match
from cmdguard.classifier.models import Verdict

__all__ = ["Verdict", "classify", "default_registry", "find_match"]
