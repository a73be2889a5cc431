"""Verdict data model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from cmdguard.rules.models import Rule

Permission = Literal["allow", "deny"]


@dataclass(frozen=True)
class Verdict:
    """Allow/deny decision for one command.

    ``rule`` names the first rule that matched and is only set on deny.
    The host always keeps running, so ``continue_`` is fixed to True.
    """

    permission: Permission
    command: str = ""
    rule: Optional[Rule] = None
    user_message: Optional[str] = None
    agent_message: Optional[str] = None

    @property
    def continue_(self) -> bool:
        return True

    @property
    def denied(self) -> bool:
        return self.permission == "deny"

    @classmethod
    def allow(cls, command: str = "") -> "Verdict":
        return cls(permission="allow", command=command)

    @classmethod
    def deny(cls, command: str, rule: Rule) -> "Verdict":
        return cls(
            permission="deny",
            command=command,
            rule=rule,
            user_message=f"Destructive operation blocked: {command}",
            agent_message=(
                f"The command '{command}' was blocked because it performs a destructive "
                "operation that could permanently delete or overwrite data. "
                "If you need to run this command, please execute it manually in your terminal."
            ),
        )
