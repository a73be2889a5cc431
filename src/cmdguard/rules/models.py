"""Rule data model — pattern stored as string, compiled at load time."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal, Optional

Category = Literal["git", "github-cli", "filesystem"]

CATEGORIES: tuple[str, ...] = ("git", "github-cli", "filesystem")


@dataclass(frozen=True)
class Rule:
    """A single destructive-command rule.

    ``pattern`` is stored as a raw string so the rule remains serialisable.
    The compiled regex is built once in ``__post_init__``; an invalid
    pattern raises ``re.error`` at load time rather than mid-classification.

    ``category`` groups rules for display only and never affects matching.
    """

    id: str
    name: str
    description: str
    category: Category
    pattern: str
    enabled: bool = True

    # --- cached compiled object (not serialised) ---
    _compiled_pattern: Optional[re.Pattern[str]] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # ASCII: \b matches JavaScript word boundaries; \s no longer covers
        # NBSP or U+2028, which shells do not split on anyway
        object.__setattr__(self, "_compiled_pattern", re.compile(self.pattern, re.ASCII))

    @property
    def compiled_pattern(self) -> re.Pattern[str]:
        assert self._compiled_pattern is not None
        return self._compiled_pattern

    def matches(self, command: str) -> bool:
        """True if the pattern occurs anywhere in *command*."""
        return self.compiled_pattern.search(command) is not None
