"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

DEFAULT_AUDIT_PATH = "/tmp/prevent-destructive-git.log"


@dataclass
class RulesConfig:
    enable: List[str] = field(default_factory=list)  # empty = all enabled
    disable: List[str] = field(default_factory=list)


@dataclass
class AuditConfig:
    enabled: bool = True
    path: str = DEFAULT_AUDIT_PATH


@dataclass
class GuardConfig:
    version: str = "1.0"
    rules: RulesConfig = field(default_factory=RulesConfig)
    audit: AuditConfig = field(default_factory=AuditConfig)
