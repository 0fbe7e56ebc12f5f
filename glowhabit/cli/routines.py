"""Routine and skincare commands for GlowHabit CLI."""

from datetime import datetime
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from glowhabit.cli.common import console, date_option, get_config, open_state, print_error, resolve_day

ROUTINE_TYPES = click.Choice(["morning", "night"])


@click.group()
def routine() -> None:
    """Morning and night routines.

    \b
    Examples:
      glowhabit routine init morning
      glowhabit routine complete morning --duration 25
      glowhabit routine stats
    """
    pass


@routine.command("init")
@click.argument("kind", type=ROUTINE_TYPES)
def init_routine(kind: str) -> None:
    """Create a routine from the built-in template."""
    try:
        with open_state() as state:
            existing = state.routines.morning_routine() if kind == "morning" else state.routines.night_routine()
            if existing:
                console.print(f"[yellow]A {kind} routine already exists ({existing.id})[/yellow]")
                return
            created = state.routines.create_from_template(kind)

        table = Table(title=created.name, show_header=False)
        table.add_column("#", style="dim", width=4)
        table.add_column("Step")
        for step in created.habits:
            table.add_row(str(step.order + 1), step.name)
        console.print(table)
    except Exception as e:
        print_error("Failed to create routine", e)
        raise SystemExit(1)


@routine.command("complete")
@click.argument("kind", type=ROUTINE_TYPES)
@click.option("--duration", type=int, default=None, help="Minutes taken.")
@date_option
def complete_routine(kind: str, duration: Optional[int], day: Optional[datetime]) -> None:
    """Mark the morning or night routine done for a day."""
    on = resolve_day(day)
    try:
        with open_state() as state:
            target = state.routines.morning_routine() if kind == "morning" else state.routines.night_routine()
            if target is None:
                raise KeyError(f"No {kind} routine. Create one with 'glowhabit routine init {kind}'")
            state.routines.complete(target.id, on, duration=duration)
        console.print(f"[green]✓ {target.name} complete[/green] [dim]{on.isoformat()}[/dim]")
    except Exception as e:
        print_error("Failed to complete routine", e)
        raise SystemExit(1)


@routine.command("stats")
@date_option
def routine_stats_cmd(day: Optional[datetime]) -> None:
    """Show consistency and streaks for each routine."""
    from glowhabit.analytics.routines import routine_stats

    on = resolve_day(day)
    window = get_config()["analytics"]["window_days"]
    try:
        with open_state() as state:
            routines = state.routines.routines()
            completions = state.routines.completions()

        if not routines:
            console.print("[dim]No routines yet. Create one with 'glowhabit routine init'.[/dim]")
            return

        table = Table(title="Routines", show_header=True, header_style="bold cyan")
        table.add_column("Routine", style="bold")
        table.add_column("Consistency", justify="right")
        table.add_column("Current", justify="right")
        table.add_column("Longest", justify="right")
        table.add_column("Avg. time", justify="right")
        table.add_column("Total", justify="right")
        for item in routines:
            stats = routine_stats(completions, item.id, on, window_days=window)
            table.add_row(
                item.name,
                f"{stats.consistency_rate}%",
                str(stats.current_streak),
                str(stats.longest_streak),
                f"{stats.average_completion_time} min" if stats.average_completion_time else "-",
                str(stats.total_completions),
            )
        console.print(table)
    except Exception as e:
        print_error("Failed to compute routine stats", e)
        raise SystemExit(1)


@click.group()
def skincare() -> None:
    """Morning and night skincare routines.

    Alternate-day steps only apply on Monday, Wednesday, Friday and Sunday.

    \b
    Examples:
      glowhabit skincare init night
      glowhabit skincare complete night
      glowhabit skincare stats
    """
    pass


@skincare.command("init")
@click.argument("kind", type=ROUTINE_TYPES)
def init_skincare(kind: str) -> None:
    """Create a skincare routine from the built-in template."""
    try:
        with open_state() as state:
            if state.skincare.routine_for(kind):
                console.print(f"[yellow]A {kind} skincare routine already exists[/yellow]")
                return
            created = state.skincare.create_from_template(kind)

        table = Table(title=f"{kind.title()} Skincare", show_header=False)
        table.add_column("#", style="dim", width=4)
        table.add_column("Step")
        table.add_column("Notes", style="dim")
        for step in created.steps:
            notes = []
            if step.is_optional:
                notes.append("optional")
            if step.is_alternate_day:
                notes.append("alternate days")
            table.add_row(str(step.order + 1), step.name, ", ".join(notes))
        console.print(table)
    except Exception as e:
        print_error("Failed to create skincare routine", e)
        raise SystemExit(1)


@skincare.command("complete")
@click.argument("kind", type=ROUTINE_TYPES)
@date_option
def complete_skincare(kind: str, day: Optional[datetime]) -> None:
    """Mark the skincare routine done for a day."""
    on = resolve_day(day)
    try:
        with open_state() as state:
            target = state.skincare.routine_for(kind)
            if target is None:
                raise KeyError(f"No {kind} skincare routine. Create one with 'glowhabit skincare init {kind}'")
            completion = state.skincare.complete(target.id, on)
        console.print(
            f"[green]✓ {kind.title()} skincare complete[/green] "
            f"[dim]{len(completion.completed_steps)} steps · {on.isoformat()}[/dim]"
        )
    except Exception as e:
        print_error("Failed to complete skincare routine", e)
        raise SystemExit(1)


@skincare.command("stats")
@date_option
def skincare_stats_cmd(day: Optional[datetime]) -> None:
    """Show skincare consistency and most used products."""
    from glowhabit.analytics.routines import skincare_stats

    on = resolve_day(day)
    window = get_config()["analytics"]["window_days"]
    try:
        with open_state() as state:
            stats = skincare_stats(state.skincare.completions(), state.skincare.routines(), on, window_days=window)

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Metric", style="dim")
        table.add_column("Value", style="bold")
        table.add_row("Morning consistency", f"{stats.morning_consistency}%")
        table.add_row("Night consistency", f"{stats.night_consistency}%")
        table.add_row("Current streak", f"{stats.current_streak} days")
        table.add_row("Longest streak", f"{stats.longest_streak} days")
        table.add_row("Completions", str(stats.total_completions))
        if stats.most_used_products:
            table.add_row("Top products", ", ".join(f"{p.name} ({p.count})" for p in stats.most_used_products))
        console.print(Panel(table, title="[bold]Skincare[/bold]", border_style="cyan"))
    except Exception as e:
        print_error("Failed to compute skincare stats", e)
        raise SystemExit(1)
