"""Best-effort append-only audit log."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from cmdguard.classifier.models import Verdict
from cmdguard.config.schema import DEFAULT_AUDIT_PATH, AuditConfig


def _timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC with milliseconds and a ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_line(message: str, now: Optional[datetime] = None) -> str:
    return f"[{_timestamp(now)}] {message}\n"


class AuditLog:
    """Appends one line per decision. Write failures are swallowed."""

    def __init__(self, path: Union[str, Path] = DEFAULT_AUDIT_PATH, *, enabled: bool = True) -> None:
        self.path = Path(path)
        self.enabled = enabled

    @classmethod
    def from_config(cls, config: AuditConfig) -> "AuditLog":
        return cls(config.path, enabled=config.enabled)

    def write(self, message: str) -> None:
        if not self.enabled:
            return
        try:
            with open(self.path, "a", encoding="utf-8", errors="backslashreplace") as f:
                f.write(format_line(message))
        except (OSError, ValueError):
            pass  # never let the audit trail affect the verdict

    def allowed(self, command: str) -> None:
        self.write(f"ALLOWED: '{command}'")

    def blocked(self, command: str) -> None:
        self.write(f"BLOCKED: '{command}'")

    def error(self, exc: Union[BaseException, str], *, action: str = "allowing") -> None:
        message = str(exc)
        if not message and isinstance(exc, BaseException):
            message = type(exc).__name__
        self.write(f"ERROR ({action}): {message}")

    def record(self, verdict: Verdict) -> None:
        if verdict.denied:
            self.blocked(verdict.command)
        else:
            self.allowed(verdict.command)
