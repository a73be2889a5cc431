"""cmdguard CLI — Typer application with hook, check, rules, init, and install commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cmdguard import __version__

app = typer.Typer(
    name="cmdguard",
    help="Block destructive shell commands before an agent runs them.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _load_registry(config: Optional[str]):
    """Build the configured registry for the developer commands, exit 2 on failure."""
    from cmdguard.config.loader import ConfigError, load_config
    from cmdguard.rules.registry import build_registry

    root = Path.cwd()
    try:
        cfg = load_config(root, config)
        return build_registry(cfg, root)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── hook ──────────────────────────────────────────────────────────────────────


@app.command()
def hook() -> None:
    """Read one hook request from stdin and print the verdict as JSON."""
    from cmdguard.decision.service import DecisionService
    from cmdguard.output import json_report

    stream = getattr(sys.stdin, "buffer", sys.stdin)
    verdict = DecisionService().handle(stream)
    typer.echo(json_report.render(verdict))


# ── check ─────────────────────────────────────────────────────────────────────


@app.command()
def check(
    command: str = typer.Argument(..., help="Command text to classify"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .cmdguard.toml"),
) -> None:
    """Classify a command without running it. Exit 1 if it would be blocked."""
    from cmdguard.classifier.engine import classify
    from cmdguard.output import terminal

    registry = _load_registry(config)
    verdict = classify(command, registry)
    terminal.render_verdict(verdict, console)

    if verdict.denied:
        raise typer.Exit(code=1)


# ── rules ─────────────────────────────────────────────────────────────────────


@app.command()
def rules(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .cmdguard.toml"),
    category: Optional[str] = typer.Option(
        None, "--category", help="Only show one category: git | github-cli | filesystem"
    ),
) -> None:
    """List rules in evaluation order."""
    from cmdguard.output import terminal
    from cmdguard.rules.models import CATEGORIES

    if category and category not in CATEGORIES:
        console.print(f"[bold red]Invalid category:[/bold red] {category}")
        raise typer.Exit(code=2)

    registry = _load_registry(config)
    terminal.render_rules(registry, category=category, console=console)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .cmdguard.toml in the current directory."""
    from cmdguard.config.defaults import CONFIG_FILENAME, DEFAULT_TOML

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── install ───────────────────────────────────────────────────────────────────


@app.command()
def install(
    user: bool = typer.Option(False, "--user", help="Install in ~/.cursor instead of the project"),
) -> None:
    """Register cmdguard as a Cursor beforeShellExecution hook."""
    from cmdguard.hooks.installer import install_hook

    success, msg = install_hook(Path.home() if user else Path.cwd())
    if success:
        console.print(f"[green]✓[/green] {msg}")
    else:
        console.print(f"[red]✗[/red] {msg}")
        raise typer.Exit(code=1)


# ── uninstall ─────────────────────────────────────────────────────────────────


@app.command()
def uninstall(
    user: bool = typer.Option(False, "--user", help="Remove from ~/.cursor instead of the project"),
) -> None:
    """Remove the cmdguard Cursor hook."""
    from cmdguard.hooks.installer import uninstall_hook

    success, msg = uninstall_hook(Path.home() if user else Path.cwd())
    if success:
        console.print(f"[green]✓[/green] {msg}")
    else:
        console.print(f"[red]✗[/red] {msg}")
        raise typer.Exit(code=1)


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"cmdguard {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """cmdguard — Block destructive shell commands before an agent runs them."""
