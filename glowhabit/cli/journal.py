"""Journal and sentiment commands for GlowHabit CLI."""

from datetime import datetime
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from glowhabit.cli.common import console, date_option, open_state, print_error, resolve_day

MOODS = ["great", "good", "okay", "low", "rough"]

LABEL_STYLES = {
    "very-positive": "bold green",
    "positive": "green",
    "neutral": "white",
    "negative": "yellow",
    "very-negative": "bold red",
}


def _sentiment_line(sentiment) -> str:
    style = LABEL_STYLES[sentiment.label]
    emotions = ", ".join(sentiment.emotions) if sentiment.emotions else "none"
    return (
        f"[{style}]{sentiment.label}[/{style}] ({sentiment.score:+d}) "
        f"[dim]confidence {sentiment.confidence} · emotions: {emotions}[/dim]"
    )


@click.group()
def journal() -> None:
    """Write journal entries and review mood insights.

    \b
    Examples:
      glowhabit journal write "Grateful for a calm morning walk"
      glowhabit journal mood good
      glowhabit journal show
      glowhabit journal insights
    """
    pass


@journal.command("write")
@click.argument("content")
@click.option("--mood", type=click.Choice(MOODS), default=None, help="Set the mood manually.")
@date_option
def write_entry(content: str, mood: Optional[str], day: Optional[datetime]) -> None:
    """Write or replace the journal entry for a day.

    Today's habit check-ins are attached as a summary.
    """
    from glowhabit.models.journal import HabitsSummary

    on = resolve_day(day)
    try:
        with open_state() as state:
            habits = state.habits.habits()
            done = [h.name for h in habits if state.habits.is_checked(h.id, on)]
            entry = state.journal.save_entry(
                on,
                content,
                mood=mood,
                habits_summary=HabitsSummary(completed=len(done), total=len(habits), habits=done),
            )

        console.print(f"[green]✓ Saved entry for {on.isoformat()}[/green] [dim]({entry.word_count} words)[/dim]")
        if entry.sentiment:
            console.print(_sentiment_line(entry.sentiment))
        if entry.mood:
            console.print(f"Mood: {entry.mood}{' (manual)' if entry.manual_mood else ''}")
    except Exception as e:
        print_error("Failed to save journal entry", e)
        raise SystemExit(1)


@journal.command("mood")
@click.argument("mood", type=click.Choice(MOODS))
@date_option
def set_mood(mood: str, day: Optional[datetime]) -> None:
    """Set the mood of an existing entry."""
    on = resolve_day(day)
    try:
        with open_state() as state:
            state.journal.update_mood(on, mood)
        console.print(f"[green]✓ Mood set to {mood}[/green] [dim]{on.isoformat()}[/dim]")
    except Exception as e:
        print_error("Failed to set mood", e)
        raise SystemExit(1)


@journal.command("show")
@date_option
def show_entry(day: Optional[datetime]) -> None:
    """Show the entry for a day, or the daily prompt if there is none."""
    from glowhabit.analytics.daily import daily_prompt
    from glowhabit.models.journal import MOOD_EMOJI

    on = resolve_day(day)
    try:
        with open_state() as state:
            entry = state.journal.get(on)

        if entry is None:
            console.print(Panel(
                f"[italic]{daily_prompt(on)}[/italic]",
                title=f"[bold]Journal · {on.isoformat()}[/bold]",
                border_style="dim",
            ))
            return

        body = entry.content
        if entry.sentiment:
            body += f"\n\n{_sentiment_line(entry.sentiment)}"
        mood = f" {MOOD_EMOJI[entry.mood]}" if entry.mood else ""
        console.print(Panel(body, title=f"[bold]Journal · {on.isoformat()}{mood}[/bold]", border_style="cyan"))
    except Exception as e:
        print_error("Failed to show journal entry", e)
        raise SystemExit(1)


@journal.command("stats")
@date_option
def journal_stats_cmd(day: Optional[datetime]) -> None:
    """Show journaling streaks and totals."""
    from glowhabit.analytics.journal import journal_stats

    on = resolve_day(day)
    try:
        with open_state() as state:
            stats = journal_stats(state.journal.entries(), on)

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Metric", style="dim")
        table.add_column("Value", style="bold")
        table.add_row("Current streak", f"🔥 {stats.current_streak} days")
        table.add_row("Longest streak", f"{stats.longest_streak} days")
        table.add_row("Total entries", str(stats.total_entries))
        table.add_row("This month", str(stats.this_month_entries))
        table.add_row("Avg. words", str(stats.avg_words_per_entry))
        console.print(Panel(table, title="[bold]Journal[/bold]", border_style="cyan"))
    except Exception as e:
        print_error("Failed to compute journal stats", e)
        raise SystemExit(1)


@journal.command("insights")
@click.option("--days", default=30, show_default=True, help="Days of entries to include.")
@date_option
def journal_insights(days: int, day: Optional[datetime]) -> None:
    """Show mood analytics and the habit-mood correlation."""
    from glowhabit.analytics.journal import habit_mood_correlation, mood_analytics

    on = resolve_day(day)
    try:
        with open_state() as state:
            entries = state.journal.entries()
            analytics = mood_analytics(entries, on, days=days)
            correlation = habit_mood_correlation(entries)

        if not analytics.mood_by_day:
            console.print("[dim]No analyzed entries yet. Write a few journal entries first.[/dim]")
            return

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Metric", style="dim")
        table.add_column("Value", style="bold")
        table.add_row("Average sentiment", f"{analytics.average_score:+d}")
        table.add_row("Positive days", f"{analytics.positive_ratio}%")
        table.add_row("Emotional stability", f"{analytics.emotional_stability}%")
        if analytics.dominant_emotions:
            table.add_row(
                "Dominant emotions",
                ", ".join(f"{e.emotion} ({e.count})" for e in analytics.dominant_emotions),
            )
        console.print(Panel(table, title=f"[bold]Mood · last {days} days[/bold]", border_style="cyan"))

        if correlation and correlation.insights:
            console.print("\n[bold]Habits & mood[/bold]")
            for insight in correlation.insights:
                console.print(f"  • {insight}")
    except Exception as e:
        print_error("Failed to compute mood insights", e)
        raise SystemExit(1)


@click.command()
@click.argument("text")
def analyze(text: str) -> None:
    """Classify the sentiment of TEXT without saving anything."""
    from glowhabit.analytics.sentiment import analyze as analyze_text

    try:
        console.print(_sentiment_line(analyze_text(text)))
    except Exception as e:
        print_error("Failed to analyze text", e)
        raise SystemExit(1)
