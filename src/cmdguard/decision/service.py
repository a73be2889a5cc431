"""Decision service — one request in, one verdict out.

Configuration is loaded before the payload is touched, so every audit line
goes to the configured sink. A broken config or custom rule file is logged
as an ``ERROR`` line and the built-in rules decide instead.

Fail-open policy: reading, decoding, parsing and classifying the request run
inside a single boundary. Any failure there yields an Allow verdict and an
``ERROR`` audit line, so the host's action loop is never stalled.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Optional, Union

from cmdguard.classifier.engine import classify, default_registry
from cmdguard.classifier.models import Verdict
from cmdguard.decision.audit import AuditLog
from cmdguard.decision.models import CommandRequest
from cmdguard.rules.registry import RuleRegistry, build_registry

Payload = Union[str, bytes, IO[str], IO[bytes]]


def _read(payload: Payload) -> str:
    """Drain a stream to end-of-input and decode bytes as UTF-8."""
    if hasattr(payload, "read"):
        payload = payload.read()  # type: ignore[union-attr]
    if isinstance(payload, bytes):
        return payload.decode("utf-8")
    return payload  # type: ignore[return-value]


class DecisionService:
    """Handle one hook request.

    With no *registry* injected, config and custom rules are loaded from
    *root* (default: the working directory) on first use, and the audit
    sink follows the ``[audit]`` section unless *audit* was injected.
    """

    def __init__(
        self,
        registry: Optional[RuleRegistry] = None,
        audit: Optional[AuditLog] = None,
        *,
        root: Optional[Path] = None,
    ) -> None:
        self._registry = registry
        self._audit = audit
        self._root = root

    @property
    def audit(self) -> AuditLog:
        if self._audit is None:
            self._audit = AuditLog()
        return self._audit

    def _load_registry(self) -> RuleRegistry:
        """Configured registry, or the built-in one if config cannot be loaded."""
        if self._registry is None:
            from cmdguard.config.loader import load_config

            try:
                root = self._root or Path.cwd()
                cfg = load_config(root)
                if self._audit is None:
                    self._audit = AuditLog.from_config(cfg.audit)
                self._registry = build_registry(cfg, root)
            except Exception as exc:
                self.audit.error(exc, action="using built-in rules")
                self._registry = default_registry()
        return self._registry

    def handle(self, payload: Payload) -> Verdict:
        """Classify the command carried by *payload*. Never raises."""
        registry = self._load_registry()
        try:
            request = CommandRequest.from_json(_read(payload))
            verdict = classify(request.command, registry)
        except Exception as exc:
            self.audit.error(exc)
            return Verdict.allow()

        self.audit.record(verdict)
        return verdict
