"""Decision service, request model, and audit sink."""

from cmdguard.decision.audit import AuditLog
from cmdguard.decision.models import CommandRequest
from cmdguard.decision.service import DecisionService

__all__ = ["AuditLog", "CommandRequest", "DecisionService"]
