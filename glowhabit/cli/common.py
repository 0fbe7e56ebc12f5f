"""Shared helpers for GlowHabit CLI commands."""

from datetime import date, datetime
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from glowhabit.config import get_db_path, load_config
from glowhabit.state import AppState

console = Console()

TREND_ARROWS = {"up": "[green]↑[/green]", "down": "[red]↓[/red]", "stable": "[dim]→[/dim]"}

date_option = click.option(
    "--date", "day",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Day to use as YYYY-MM-DD (default: today).",
)


def resolve_day(value: Optional[datetime]) -> date:
    return value.date() if value else date.today()


def get_config() -> dict:
    """Config for the current invocation, loaded once per run."""
    ctx = click.get_current_context(silent=True)
    root = ctx.find_root() if ctx else None
    if root is not None and isinstance(root.obj, dict):
        if "config" not in root.obj:
            root.obj["config"] = load_config()
        return root.obj["config"]
    return load_config()


def open_state() -> AppState:
    """Open the application state from the configured database."""
    config = get_config()
    return AppState.open(get_db_path(config), config=config)


def print_error(message: str, error: Exception) -> None:
    console.print(Panel(
        f"[red]{message}:[/red]\n\n{str(error)}",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))


def progress_bar(value: int, width: int = 20) -> str:
    """Text bar for a 0-100 percentage."""
    filled = round(width * max(0, min(100, value)) / 100)
    return "█" * filled + "░" * (width - filled)
