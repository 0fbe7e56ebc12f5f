"""Budget check-in commands for GlowHabit CLI."""

from datetime import datetime
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from glowhabit.cli.common import console, date_option, open_state, print_error, progress_bar, resolve_day


@click.group()
def budget() -> None:
    """Track daily budget discipline.

    A good day stays within budget and has its expenses tracked.

    \b
    Examples:
      glowhabit budget log --within --tracked --amount 42.5
      glowhabit budget toggle tracked
      glowhabit budget stats
    """
    pass


@budget.command("log")
@click.option("--within/--over", "within", default=True, help="Stayed within budget (default) or went over.")
@click.option("--tracked/--untracked", default=True, help="Expenses were recorded.")
@click.option("--amount", type=float, default=None, help="Amount spent.")
@click.option("--notes", default=None, help="Notes for the day.")
@date_option
def log_budget(
    within: bool,
    tracked: bool,
    amount: Optional[float],
    notes: Optional[str],
    day: Optional[datetime],
) -> None:
    """Record the budget check-in for a day."""
    on = resolve_day(day)
    try:
        with open_state() as state:
            entry = state.budget.upsert(
                on,
                stayed_within_budget=within,
                tracked_expenses=tracked,
                amount=amount,
                notes=notes,
            )
        mark = "[green]✓ good day[/green]" if entry.is_good_day else "[yellow]logged[/yellow]"
        console.print(f"{mark} [dim]{on.isoformat()}[/dim]")
    except Exception as e:
        print_error("Failed to log budget", e)
        raise SystemExit(1)


@budget.command("toggle")
@click.argument("flag", type=click.Choice(["within", "tracked"]))
@date_option
def toggle_budget(flag: str, day: Optional[datetime]) -> None:
    """Flip the 'within' or 'tracked' flag for a day."""
    field = "stayed_within_budget" if flag == "within" else "tracked_expenses"
    on = resolve_day(day)
    try:
        with open_state() as state:
            entry = state.budget.toggle(on, field)
        value = getattr(entry, field)
        console.print(f"[green]✓[/green] {flag} = {'yes' if value else 'no'} [dim]{on.isoformat()}[/dim]")
    except Exception as e:
        print_error("Failed to toggle budget flag", e)
        raise SystemExit(1)


@budget.command("stats")
@date_option
def budget_stats_cmd(day: Optional[datetime]) -> None:
    """Show budget streaks and the monthly score."""
    from glowhabit.analytics.budget import budget_stats

    on = resolve_day(day)
    try:
        with open_state() as state:
            stats = budget_stats(state.budget.all(), on)

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Metric", style="dim")
        table.add_column("Value", style="bold")
        table.add_row("Current streak", f"🔥 {stats.consistency_streak} days")
        table.add_row("Longest streak", f"{stats.longest_streak} days")
        table.add_row("Monthly score", f"{progress_bar(stats.monthly_score)} {stats.monthly_score}%")
        table.add_row("Consistency", f"{stats.consistency_rate}%")
        table.add_row("Days under budget", str(stats.days_under_budget))
        table.add_row("Days over budget", str(stats.days_over_budget))
        table.add_row("Tracked days", str(stats.total_tracked_days))

        console.print(Panel(table, title="[bold]Budget Discipline[/bold]", border_style="cyan"))
    except Exception as e:
        print_error("Failed to compute budget stats", e)
        raise SystemExit(1)
