"""Cursor hook installer — cmdguard install / uninstall.

Cursor reads ``.cursor/hooks.json`` from the project (or the home
directory for user-wide hooks) and runs every ``beforeShellExecution``
command with the proposed shell command as JSON on stdin.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Tuple

HOOK_EVENT = "beforeShellExecution"
HOOK_COMMAND = "cmdguard hook"


def hooks_file(base: Path) -> Path:
    return base / ".cursor" / "hooks.json"


def _load(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {"version": 1, "hooks": {}}
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not isinstance(data.get("hooks", {}), dict):
        raise ValueError("unexpected layout")
    data.setdefault("hooks", {})
    return data


def _is_ours(entry: Any) -> bool:
    return isinstance(entry, dict) and entry.get("command") == HOOK_COMMAND


def install_hook(base: Path) -> Tuple[bool, str]:
    """Register cmdguard as a beforeShellExecution hook.

    Returns (success, message).
    """
    path = hooks_file(base)
    try:
        data = _load(path)
    except ValueError as exc:
        return False, f"Cannot update {path}: not a valid hooks file ({exc})."

    entries = data["hooks"].setdefault(HOOK_EVENT, [])
    if not isinstance(entries, list):
        return False, f"Cannot update {path}: '{HOOK_EVENT}' is not a list."
    if any(_is_ours(e) for e in entries):
        return True, "cmdguard hook is already installed."

    entries.append({"command": HOOK_COMMAND})
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return True, f"Installed cmdguard hook in {path}"


def uninstall_hook(base: Path) -> Tuple[bool, str]:
    """Remove the cmdguard entry, leaving other hooks in place.

    Returns (success, message).
    """
    path = hooks_file(base)
    if not path.exists():
        return True, "No hooks.json found — nothing to remove."
    try:
        data = _load(path)
    except ValueError as exc:
        return False, f"Cannot update {path}: not a valid hooks file ({exc})."

    entries = data["hooks"].get(HOOK_EVENT)
    if not isinstance(entries, list) or not any(_is_ours(e) for e in entries):
        return True, "cmdguard hook is not installed."

    remaining = [e for e in entries if not _is_ours(e)]
    if remaining:
        data["hooks"][HOOK_EVENT] = remaining
    else:
        del data["hooks"][HOOK_EVENT]
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return True, f"Removed cmdguard hook from {path}"
