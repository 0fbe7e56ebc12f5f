"""Overview commands for GlowHabit CLI: life balance, achievements, glow moments, quote."""

from datetime import datetime
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from glowhabit.cli.common import (
    TREND_ARROWS,
    console,
    date_option,
    get_config,
    open_state,
    print_error,
    progress_bar,
    resolve_day,
)

TIER_STYLES = {"bronze": "yellow", "silver": "white", "gold": "bold yellow", "platinum": "bold cyan"}


@click.command()
@date_option
def balance(day: Optional[datetime]) -> None:
    """Show the life balance across health, career, mind and relationships."""
    from glowhabit.analytics.balance import build_area_inputs, compose_life_balance
    from glowhabit.models.balance import LIFE_AREA_LABELS

    on = resolve_day(day)
    analytics = get_config()["analytics"]
    try:
        with open_state() as state:
            inputs = build_area_inputs(
                state.habits.habits(),
                state.habits.completions(),
                state.goals.all(),
                on,
                window_days=analytics["window_days"],
                trend_days=analytics["trend_days"],
            )
        data = compose_life_balance(inputs)

        table = Table(title=f"Life Balance · {data.overall_score}%", show_header=True, header_style="bold cyan")
        table.add_column("Area", style="bold")
        table.add_column("Score")
        table.add_column("Habits", justify="right")
        table.add_column("Completion", justify="right")
        table.add_column("Goals", justify="right")
        table.add_column("Trend", justify="center")
        for score in data.area_scores:
            table.add_row(
                LIFE_AREA_LABELS[score.area],
                f"{progress_bar(score.score, 10)} {score.score}%",
                str(score.habit_count),
                f"{score.completion_rate}%",
                f"{score.goal_progress}%",
                TREND_ARROWS[score.trend],
            )
        console.print(table)
        console.print(f"[dim]Stability {data.stability_score}% across {data.areas_counted} areas[/dim]")

        if data.insights:
            console.print(Panel(
                "\n".join(f"• {insight}" for insight in data.insights),
                title="[bold]Insights[/bold]",
                border_style="green",
            ))
    except Exception as e:
        print_error("Failed to compute life balance", e)
        raise SystemExit(1)


@click.command()
@click.option("--all", "show_all", is_flag=True, help="Include locked achievements.")
@date_option
def achievements(show_all: bool, day: Optional[datetime]) -> None:
    """Show unlocked achievements and progress toward the rest."""
    from glowhabit.analytics.achievements import evaluate_achievements, total_points

    on = resolve_day(day)
    try:
        with open_state() as state:
            results = evaluate_achievements(
                on,
                habits=state.habits.habits(),
                completions=state.habits.completions(),
                journal_entries=state.journal.entries(),
                goals=state.goals.all(),
                routines=state.routines.routines(),
                routine_completions=state.routines.completions(),
            )

        unlocked = [a for a in results if a.unlocked]
        table = Table(
            title=f"Achievements · {len(unlocked)}/{len(results)} · {total_points(results)} pts",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("", width=2)
        table.add_column("Achievement", style="bold")
        table.add_column("Tier")
        table.add_column("Progress")
        for item in results:
            if not show_all and not item.unlocked:
                continue
            style = TIER_STYLES[item.tier]
            table.add_row(
                "[green]✓[/green]" if item.unlocked else "[dim]·[/dim]",
                f"{item.name}\n[dim]{item.description}[/dim]",
                f"[{style}]{item.tier}[/{style}]",
                f"{progress_bar(item.progress, 10)} {item.current}/{item.requirement}",
            )
        console.print(table)
    except Exception as e:
        print_error("Failed to evaluate achievements", e)
        raise SystemExit(1)


@click.command()
@date_option
def quote(day: Optional[datetime]) -> None:
    """Show the quote of the day."""
    from glowhabit.analytics.daily import daily_quote

    console.print(Panel(f"[italic]{daily_quote(resolve_day(day))}[/italic]", border_style="magenta"))


MOMENT_TIER_STYLES = {
    "spark": "yellow",
    "glow": "bold yellow",
    "radiance": "bold magenta",
    "brilliance": "bold cyan",
}


@click.command()
@date_option
def moments(day: Optional[datetime]) -> None:
    """Show glow moments, newly reached milestones and unlocked quotes."""
    from glowhabit.analytics.daily import daily_affirmation
    from glowhabit.analytics.moments import (
        evaluate_glow_moments,
        unlockable_rewards,
        unlocked_quotes,
    )

    on = resolve_day(day)
    try:
        with open_state() as state:
            results = evaluate_glow_moments(
                on,
                habits=state.habits.habits(),
                completions=state.habits.completions(),
                journal_entries=state.journal.entries(),
            )
            fresh = state.moments.record_unlocks(results)

        for moment in fresh:
            console.print(Panel(
                f"[bold]{moment.title}[/bold] · {moment.description}\n\n[italic]{moment.affirmation}[/italic]",
                title="[bold magenta]✨ New Glow Moment[/bold magenta]",
                border_style="magenta",
            ))

        unlocked = [m for m in results if m.unlocked]
        table = Table(
            title=f"Glow Moments · {len(unlocked)}/{len(results)}",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("", width=2)
        table.add_column("Moment", style="bold")
        table.add_column("Tier")
        table.add_column("Progress")
        for item in results:
            style = MOMENT_TIER_STYLES[item.tier]
            table.add_row(
                "[green]✓[/green]" if item.unlocked else "[dim]·[/dim]",
                f"{item.title}\n[dim]{item.description}[/dim]",
                f"[{style}]{item.tier}[/{style}]",
                f"{min(item.current, item.requirement)}/{item.requirement}",
            )
        console.print(table)

        quotes = unlocked_quotes(unlockable_rewards(results))
        if quotes:
            console.print(Panel(
                "\n\n".join(f"[italic]{q.quote}[/italic]\n[dim]- {q.author}[/dim]" for q in quotes),
                title="[bold]Unlocked Quotes[/bold]",
                border_style="green",
            ))
        console.print(f"[dim]{daily_affirmation(on)}[/dim]")
    except Exception as e:
        print_error("Failed to evaluate glow moments", e)
        raise SystemExit(1)
