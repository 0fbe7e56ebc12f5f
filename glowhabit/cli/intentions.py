"""Monthly intention commands for GlowHabit CLI."""

from datetime import datetime
from typing import Optional

import click
from rich.panel import Panel

from glowhabit.cli.common import console, date_option, open_state, print_error, resolve_day


@click.group()
def intention() -> None:
    """Set a guiding intention for each month.

    \b
    Examples:
      glowhabit intention set "Slow down and notice more"
      glowhabit intention show
    """
    pass


@intention.command("set")
@click.argument("text")
@click.option("--note", default=None, help="Personal note for the month.")
@click.option("--month", default=None, help="Month as YYYY-MM (default: the month of --date).")
@date_option
def set_intention(text: str, note: Optional[str], month: Optional[str], day: Optional[datetime]) -> None:
    """Set the intention for a month."""
    from glowhabit.analytics.periods import month_key

    key = month or month_key(resolve_day(day))
    try:
        with open_state() as state:
            saved = state.intentions.set_intention(key, text, personal_note=note)
        console.print(f"[green]✓ Intention set for {saved.month}[/green]")
    except Exception as e:
        print_error("Failed to set intention", e)
        raise SystemExit(1)


@intention.command("show")
@date_option
def show_intention(day: Optional[datetime]) -> None:
    """Show this month's intention and recent past ones."""
    on = resolve_day(day)
    try:
        with open_state() as state:
            current = state.intentions.current(on)
            past = state.intentions.past(on)

        if current:
            body = f"[italic]{current.intention}[/italic]"
            if current.personal_note:
                body += f"\n\n[dim]{current.personal_note}[/dim]"
            console.print(Panel(body, title=f"[bold]Intention · {current.month}[/bold]", border_style="magenta"))
        else:
            console.print("[dim]No intention for this month yet.[/dim]")

        if past:
            console.print("\n[bold]Past intentions[/bold]")
            for item in past:
                console.print(f"  [dim]{item.month}[/dim]  {item.intention}")
    except Exception as e:
        print_error("Failed to show intentions", e)
        raise SystemExit(1)
