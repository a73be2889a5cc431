"""Shared test fixtures — audit sinks, services, temp workspaces."""

from __future__ import annotations

from pathlib import Path

import pytest

from cmdguard.classifier.engine import default_registry
from cmdguard.decision.audit import AuditLog
from cmdguard.decision.service import DecisionService


@pytest.fixture
def audit_path(tmp_path: Path) -> Path:
    return tmp_path / "audit.log"


@pytest.fixture
def audit(audit_path: Path) -> AuditLog:
    return AuditLog(audit_path)


@pytest.fixture
def broken_audit(tmp_path: Path) -> AuditLog:
    """An audit sink whose target is a directory, so every append fails."""
    target = tmp_path / "not-a-file"
    target.mkdir()
    return AuditLog(target)


@pytest.fixture
def service(audit: AuditLog) -> DecisionService:
    return DecisionService(default_registry(), audit)


@pytest.fixture
def workspace(tmp_path: Path, audit_path: Path, monkeypatch) -> Path:
    """A working directory whose .cmdguard.toml points the audit log into tmp."""
    ws = tmp_path / "ws"
    ws.mkdir()
    (ws / ".cmdguard.toml").write_text(
        f'[audit]\npath = "{audit_path.as_posix()}"\n', encoding="utf-8"
    )
    monkeypatch.chdir(ws)
    return ws


@pytest.fixture
def audit_lines(audit_path: Path):
    """Callable returning the audit log lines written so far."""

    def _read() -> list[str]:
        if not audit_path.exists():
            return []
        return audit_path.read_text(encoding="utf-8").splitlines()

    return _read
