"""Project and deep-work commands for GlowHabit CLI."""

from datetime import datetime
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from glowhabit.cli.common import (
    TREND_ARROWS,
    console,
    date_option,
    open_state,
    print_error,
    progress_bar,
    resolve_day,
)
from glowhabit.models.project import DEEP_WORK_DURATIONS


def _find_project(state, ref: str):
    projects = state.projects.projects()
    if ref.isdigit() and 1 <= int(ref) <= len(projects):
        return projects[int(ref) - 1]
    project = state.projects.get(ref)
    if project is None:
        raise KeyError(f"No project matches '{ref}'")
    return project


@click.group()
def project() -> None:
    """Projects and deep-work sessions.

    \b
    Examples:
      glowhabit project add "Thesis" --target 8
      glowhabit project log 1 50           # 50-minute focus block
      glowhabit project stats
    """
    pass


@project.command("add")
@click.argument("name")
@click.option("--description", "-d", default="", help="Short description.")
@click.option("--target", type=float, default=10.0, show_default=True, help="Weekly target in hours.")
@click.option("--deadline", type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help="Deadline as YYYY-MM-DD.")
def add_project(name: str, description: str, target: float, deadline: Optional[datetime]) -> None:
    """Add a project."""
    try:
        with open_state() as state:
            created = state.projects.add_project(
                name,
                description=description,
                weekly_target=target,
                deadline=deadline.date() if deadline else None,
            )
        console.print(f"[green]✓ Added project[/green] [bold]{created.name}[/bold] [dim]({created.id})[/dim]")
    except Exception as e:
        print_error("Failed to add project", e)
        raise SystemExit(1)


@project.command("remove")
@click.argument("ref")
def remove_project(ref: str) -> None:
    """Remove a project and its sessions by number or ID."""
    try:
        with open_state() as state:
            target = _find_project(state, ref)
            state.projects.remove_project(target.id)
        console.print(f"[yellow]Removed project[/yellow] [bold]{target.name}[/bold]")
    except Exception as e:
        print_error("Failed to remove project", e)
        raise SystemExit(1)


@project.command("log")
@click.argument("ref")
@click.argument("minutes", type=click.IntRange(min=1))
@click.option("--notes", default=None, help="What you worked on.")
@date_option
def log_session(ref: str, minutes: int, notes: Optional[str], day: Optional[datetime]) -> None:
    """Log a deep-work session of MINUTES on a project."""
    on = resolve_day(day)
    try:
        with open_state() as state:
            target = _find_project(state, ref)
            session = state.projects.add_session(
                target.id, minutes, notes=notes, now=datetime.combine(on, datetime.now().time())
            )
        label = DEEP_WORK_DURATIONS.get(minutes)
        suffix = f" · {label}" if label else ""
        console.print(
            f"[green]✓ Logged {session.duration} min[/green] on [bold]{target.name}[/bold]{suffix} "
            f"[dim]{on.isoformat()}[/dim]"
        )
    except Exception as e:
        print_error("Failed to log session", e)
        raise SystemExit(1)


@project.command("stats")
@date_option
def project_stats_cmd(day: Optional[datetime]) -> None:
    """Show weekly execution per project and overall deep-work stats."""
    from glowhabit.analytics.projects import deep_work_stats, project_stats

    on = resolve_day(day)
    try:
        with open_state() as state:
            projects = state.projects.projects()
            sessions = state.projects.sessions()

        if not projects:
            console.print("[dim]No projects yet. Add one with 'glowhabit project add'.[/dim]")
            return

        table = Table(title="Projects", show_header=True, header_style="bold cyan")
        table.add_column("#", style="dim", width=4)
        table.add_column("Project", style="bold")
        table.add_column("This week")
        table.add_column("Total", justify="right")
        table.add_column("Streak", justify="right")
        for index, item in enumerate(projects, start=1):
            stats = project_stats(item, sessions, on)
            table.add_row(
                str(index),
                item.name if item.is_active else f"[dim]{item.name}[/dim]",
                f"{progress_bar(stats.weekly_execution_score, 10)} "
                f"{stats.weekly_hours:.1f}/{item.weekly_target:g}h",
                f"{stats.total_hours:.1f}h",
                f"{stats.consistency_streak}d",
            )
        console.print(table)

        overall = deep_work_stats(sessions, on)
        console.print(Panel(
            f"Total focus: [bold]{overall.total_hours:.1f}h[/bold]\n"
            f"Focus streak: [bold]{overall.focus_streak}[/bold] days\n"
            f"Sessions this week: [bold]{overall.sessions_this_week}[/bold] "
            f"{TREND_ARROWS[overall.weekly_trend]}\n"
            f"Best time: [bold]{overall.best_time_of_day}[/bold]",
            title="[bold]Deep Work[/bold]",
            border_style="blue",
        ))
    except Exception as e:
        print_error("Failed to compute project stats", e)
        raise SystemExit(1)
