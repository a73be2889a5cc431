"""Hook request model."""

from __future__ import annotations

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class CommandRequest:
    """The command text proposed for execution."""

    command: str = ""

    @classmethod
    def from_json(cls, raw: str) -> "CommandRequest":
        """Parse a hook payload.

        An empty payload counts as ``{}``. A document that is not an object,
        or whose ``command`` is missing or not a string, gives ``""``.
        Invalid JSON raises ``json.JSONDecodeError``.
        """
        data = json.loads(raw or "{}")
        command = data.get("command") if isinstance(data, dict) else None
        return cls(command=command if isinstance(command, str) else "")
