"""Rich terminal reporter — verdicts and rule tables."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from cmdguard.classifier.models import Verdict
from cmdguard.rules.registry import RuleRegistry

_CATEGORY_STYLE = {
    "git": "bold white on dark_orange",
    "github-cli": "bold white on purple",
    "filesystem": "bold white on red",
}


def _category_pill(category: str) -> Text:
    return Text(f" {category} ", style=_CATEGORY_STYLE.get(category, ""))


def render_verdict(verdict: Verdict, console: Optional[Console] = None) -> None:
    """Print a single verdict."""
    console = console or Console(stderr=True)
    console.print()
    if not verdict.denied:
        console.print("[bold green]✅ ALLOWED[/bold green]")
        console.print(Text(verdict.command, style="dim"))
        return

    rule = verdict.rule
    console.print("[bold red]❌ BLOCKED[/bold red]")
    console.print(Text(verdict.command, style="bold"))
    if rule is not None:
        line = Text("Rule: ", style="dim")
        line.append(rule.id, style="cyan")
        line.append("  ")
        line.append_text(_category_pill(rule.category))
        console.print(line)
        if rule.description:
            console.print(Text(rule.description, style="dim"))


def render_rules(
    registry: RuleRegistry,
    *,
    category: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Print the rule table in evaluation order."""
    console = console or Console(stderr=True)
    rules = registry.by_category(category) if category else registry.all_rules

    table = Table(
        title="cmdguard rules",
        show_lines=False,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Rule", style="cyan", min_width=20, no_wrap=True)
    table.add_column("Category", justify="center")
    table.add_column("Enabled", justify="center")
    table.add_column("Description")

    enabled_count = 0
    for index, rule in enumerate(rules, 1):
        enabled = registry.is_enabled(rule)
        enabled_count += enabled
        table.add_row(
            str(index),
            rule.id,
            _category_pill(rule.category),
            "[green]yes[/green]" if enabled else "[red]no[/red]",
            rule.description,
        )

    console.print(table)
    console.print(f"[dim]Enabled:[/dim] {enabled_count}/{len(rules)}")
