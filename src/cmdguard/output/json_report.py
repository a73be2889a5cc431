"""JSON reporter for the hook protocol."""

from __future__ import annotations

import json
from typing import Any, Dict

from cmdguard.classifier.models import Verdict


def to_dict(verdict: Verdict) -> Dict[str, Any]:
    """Convert a Verdict to the hook response document."""
    data: Dict[str, Any] = {
        "continue": verdict.continue_,
        "permission": verdict.permission,
    }
    if verdict.denied:
        data["user_message"] = verdict.user_message
        data["agent_message"] = verdict.agent_message
    return data


def render(verdict: Verdict) -> str:
    """Return the response as a single compact JSON line (no newline)."""
    return json.dumps(to_dict(verdict), separators=(",", ":"))
