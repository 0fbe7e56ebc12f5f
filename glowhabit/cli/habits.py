"""Habit and goal commands for GlowHabit CLI.

Habits are referenced by their position in ``glowhabit habit list`` or by ID.
"""

from datetime import datetime
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from glowhabit.cli.common import console, date_option, get_config, open_state, print_error, progress_bar, resolve_day

CATEGORIES = ["health", "career", "mind", "relationships", "custom"]


def _find_habit(state, ref: str):
    habits = state.habits.habits()
    if ref.isdigit() and 1 <= int(ref) <= len(habits):
        return habits[int(ref) - 1]
    habit = state.habits.get(ref)
    if habit is None:
        raise KeyError(f"No habit matches '{ref}'")
    return habit


@click.group()
def habit() -> None:
    """Track daily habits.

    \b
    Examples:
      glowhabit habit list                   # Today's checklist
      glowhabit habit add "Read 10 pages" -c mind
      glowhabit habit check 2                # Check off habit #2
      glowhabit habit stats                  # Streaks and rates
    """
    pass


@habit.command("add")
@click.argument("name")
@click.option(
    "--category", "-c",
    type=click.Choice(CATEGORIES),
    default="custom",
    help="Habit category (default: custom).",
)
@click.option("--icon", default="Sparkles", help="Icon name.")
def add_habit(name: str, category: str, icon: str) -> None:
    """Add a new habit."""
    try:
        with open_state() as state:
            created = state.habits.add_habit(name, category=category, icon=icon)
        console.print(f"[green]✓ Added habit '{created.name}'[/green] [dim]({created.id})[/dim]")
    except Exception as e:
        print_error("Failed to add habit", e)
        raise SystemExit(1)


@habit.command("remove")
@click.argument("ref")
def remove_habit(ref: str) -> None:
    """Remove a habit and its check-ins."""
    try:
        with open_state() as state:
            target = _find_habit(state, ref)
            state.habits.remove_habit(target.id)
        console.print(f"[green]✓ Removed habit '{target.name}'[/green]")
    except Exception as e:
        print_error("Failed to remove habit", e)
        raise SystemExit(1)


@habit.command("check")
@click.argument("ref")
@date_option
def check_habit(ref: str, day: Optional[datetime]) -> None:
    """Check off a habit for the day."""
    on = resolve_day(day)
    try:
        with open_state() as state:
            target = _find_habit(state, ref)
            state.habits.check(target.id, on)
        console.print(f"[green]✓ {target.name}[/green] [dim]{on.isoformat()}[/dim]")
    except Exception as e:
        print_error("Failed to check habit", e)
        raise SystemExit(1)


@habit.command("uncheck")
@click.argument("ref")
@date_option
def uncheck_habit(ref: str, day: Optional[datetime]) -> None:
    """Remove a habit check-in for the day."""
    on = resolve_day(day)
    try:
        with open_state() as state:
            target = _find_habit(state, ref)
            removed = state.habits.uncheck(target.id, on)
        if removed:
            console.print(f"[green]✓ Unchecked {target.name}[/green] [dim]{on.isoformat()}[/dim]")
        else:
            console.print(f"[yellow]{target.name} was not checked on {on.isoformat()}[/yellow]")
    except Exception as e:
        print_error("Failed to uncheck habit", e)
        raise SystemExit(1)


@habit.command("list")
@date_option
def list_habits(day: Optional[datetime]) -> None:
    """Show the habit checklist for the day."""
    from glowhabit.analytics.habits import daily_progress

    on = resolve_day(day)
    try:
        with open_state() as state:
            habits = state.habits.habits()
            progress = daily_progress(habits, state.habits.completions(), on)

            if not habits:
                console.print("[dim]No habits yet. Add one with 'glowhabit habit add'.[/dim]")
                return

            table = Table(title=f"Habits for {on.isoformat()}", show_header=True, header_style="bold cyan")
            table.add_column("#", style="dim", width=4)
            table.add_column("Done", justify="center", width=6)
            table.add_column("Habit", style="bold")
            table.add_column("Category", style="dim")
            table.add_column("ID", style="dim")

            for i, item in enumerate(habits, 1):
                done = "[green]✓[/green]" if state.habits.is_checked(item.id, on) else "[dim]·[/dim]"
                table.add_row(str(i), done, item.name, item.category, item.id)

        console.print(table)
        console.print(
            f"\n{progress_bar(progress.percentage)} "
            f"[bold]{progress.completed_count}/{progress.total_count}[/bold] ({progress.percentage}%)"
        )
    except Exception as e:
        print_error("Failed to list habits", e)
        raise SystemExit(1)


@habit.command("stats")
@date_option
def habit_stats_cmd(day: Optional[datetime]) -> None:
    """Show streaks and completion rates per habit."""
    from glowhabit.analytics.habits import best_habit, habit_stats, weakest_habit

    on = resolve_day(day)
    window = get_config()["analytics"]["window_days"]
    try:
        with open_state() as state:
            habits = state.habits.habits()
            completions = state.habits.completions()

            table = Table(title="Habit Stats", show_header=True, header_style="bold cyan")
            table.add_column("Habit", style="bold")
            table.add_column("Current", justify="right")
            table.add_column("Longest", justify="right")
            table.add_column(f"{window}-day rate", justify="right")
            table.add_column("Total", justify="right")

            for item in habits:
                stats = habit_stats(state.habits.completion_dates(item.id), on, window_days=window)
                table.add_row(
                    item.name,
                    f"🔥 {stats.current_streak}" if stats.current_streak else "0",
                    str(stats.longest_streak),
                    f"{stats.completion_rate}%",
                    str(stats.total_completions),
                )

            best = best_habit(habits, completions, on)
            weakest = weakest_habit(habits, completions, on)

        console.print(table)
        if best and weakest and best.id != weakest.id:
            console.print(f"\n[green]Strongest:[/green] {best.name}   [yellow]Needs care:[/yellow] {weakest.name}")
    except Exception as e:
        print_error("Failed to compute habit stats", e)
        raise SystemExit(1)


@click.group()
def goal() -> None:
    """Track goals and their progress.

    \b
    Examples:
      glowhabit goal add "Run a half marathon" --area health
      glowhabit goal progress <ID> 40
      glowhabit goal list
    """
    pass


@goal.command("add")
@click.argument("title")
@click.option("--description", "-d", default="", help="Goal description.")
@click.option(
    "--area",
    type=click.Choice(["health", "career", "mind", "relationships"]),
    default=None,
    help="Life area the goal belongs to.",
)
@click.option(
    "--target",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Target date as YYYY-MM-DD.",
)
def add_goal(title: str, description: str, area: Optional[str], target: Optional[datetime]) -> None:
    """Create a goal."""
    try:
        with open_state() as state:
            created = state.goals.add(
                title,
                description=description,
                life_area=area,
                target_date=target.date() if target else None,
            )
        console.print(f"[green]✓ Added goal '{created.title}'[/green] [dim]({created.id})[/dim]")
    except Exception as e:
        print_error("Failed to add goal", e)
        raise SystemExit(1)


@goal.command("progress")
@click.argument("goal_id")
@click.argument("progress", type=int)
def goal_progress(goal_id: str, progress: int) -> None:
    """Set a goal's progress percentage."""
    try:
        with open_state() as state:
            updated = state.goals.update_progress(goal_id, progress)
        status = "[green]completed[/green]" if updated.is_completed else f"{updated.progress}%"
        console.print(f"[green]✓[/green] {updated.title}: {status}")
    except Exception as e:
        print_error("Failed to update goal", e)
        raise SystemExit(1)


@goal.command("toggle")
@click.argument("goal_id")
def toggle_goal(goal_id: str) -> None:
    """Mark a goal complete or reopen it."""
    try:
        with open_state() as state:
            updated = state.goals.toggle_complete(goal_id)
        label = "completed" if updated.is_completed else "reopened"
        console.print(f"[green]✓ Goal '{updated.title}' {label}[/green]")
    except Exception as e:
        print_error("Failed to toggle goal", e)
        raise SystemExit(1)


@goal.command("list")
def list_goals() -> None:
    """Show all goals."""
    from glowhabit.analytics.balance import goal_life_area

    try:
        with open_state() as state:
            goals = state.goals.all()

        if not goals:
            console.print(Panel(
                "[dim]No goals yet. Add one with 'glowhabit goal add'.[/dim]",
                title="[bold]Goals[/bold]",
                border_style="dim",
            ))
            return

        table = Table(title="Goals", show_header=True, header_style="bold cyan")
        table.add_column("Goal", style="bold")
        table.add_column("Area", style="dim")
        table.add_column("Progress")
        table.add_column("Target", style="dim")
        table.add_column("ID", style="dim")

        for item in goals:
            bar = "[green]✓ done[/green]" if item.is_completed else f"{progress_bar(item.progress, 10)} {item.progress}%"
            table.add_row(
                item.title,
                goal_life_area(item) or "-",
                bar,
                item.target_date.isoformat() if item.target_date else "-",
                item.id,
            )
        console.print(table)
    except Exception as e:
        print_error("Failed to list goals", e)
        raise SystemExit(1)
