"""Tests for the hook JSON reporter and the terminal reporter."""

import io
import json

from rich.console import Console

from cmdguard.classifier.engine import classify, default_registry
from cmdguard.classifier.models import Verdict
from cmdguard.config.schema import GuardConfig, RulesConfig
from cmdguard.output import json_report, terminal
from cmdguard.rules.builtin import ALL_BUILTIN_RULES
from cmdguard.rules.registry import RuleRegistry


def _console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


class TestJsonReport:
    def test_allow_document(self):
        data = json.loads(json_report.render(Verdict.allow("git status")))
        assert data == {"continue": True, "permission": "allow"}

    def test_deny_document(self):
        data = json.loads(json_report.render(classify("git push origin --force")))
        assert data["continue"] is True
        assert data["permission"] == "deny"
        assert data["user_message"] == "Destructive operation blocked: git push origin --force"
        assert data["agent_message"].startswith("The command 'git push origin --force' was blocked")
        assert set(data) == {"continue", "permission", "user_message", "agent_message"}

    def test_single_line(self):
        text = json_report.render(classify("rm -rf /\nrm -rf ~"))
        assert "\n" not in text

    def test_non_ascii_escaped(self):
        text = json_report.render(classify("rm -rf /tmp/ünï"))
        assert text.isascii()
        assert "ünï" in json.loads(text)["user_message"]


class TestTerminal:
    def test_render_blocked(self):
        console = _console()
        terminal.render_verdict(classify("git reset --hard HEAD"), console)
        out = console.file.getvalue()
        assert "BLOCKED" in out
        assert "GIT_RESET_HARD" in out
        assert "git reset --hard HEAD" in out

    def test_render_allowed(self):
        console = _console()
        terminal.render_verdict(classify("git status"), console)
        assert "ALLOWED" in console.file.getvalue()

    def test_command_markup_not_interpreted(self):
        console = _console()
        terminal.render_verdict(classify("rm -rf [bold]x[/bold]"), console)
        assert "[bold]x[/bold]" in console.file.getvalue()

    def test_render_rules_table(self):
        console = _console()
        terminal.render_rules(default_registry(), console=console)
        out = console.file.getvalue()
        assert "RM_RECURSIVE" in out
        assert f"{len(ALL_BUILTIN_RULES)}/{len(ALL_BUILTIN_RULES)}" in out

    def test_render_rules_category_and_disabled(self):
        registry = RuleRegistry()
        registry.register_many(ALL_BUILTIN_RULES)
        cfg = GuardConfig()
        cfg.rules = RulesConfig(disable=["SHRED"])
        registry.apply_config(cfg)

        console = _console()
        terminal.render_rules(registry, category="filesystem", console=console)
        out = console.file.getvalue()
        assert "SHRED" in out
        assert "GIT_RM" not in out
        assert "Enabled: 8/9" in out
