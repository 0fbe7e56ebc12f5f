"""Main CLI entry point for GlowHabit.

This module provides the main click group and lazy loading
of command modules to keep startup fast.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when they are actually invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        cmd = getattr(module, cmd_name, None)
        if not isinstance(cmd, click.Command):
            # Fall back to a command registered under the same name
            cmd = next(
                (
                    attr for attr in vars(module).values()
                    if isinstance(attr, click.Command) and attr.name == cmd_name
                ),
                None,
            )
        if cmd is None:
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    # Habits and goals
    "habit": "glowhabit.cli.habits",
    "goal": "glowhabit.cli.habits",
    # Budget
    "budget": "glowhabit.cli.budget",
    # Journal
    "journal": "glowhabit.cli.journal",
    "analyze": "glowhabit.cli.journal",
    # Routines
    "routine": "glowhabit.cli.routines",
    "skincare": "glowhabit.cli.routines",
    # Intentions
    "intention": "glowhabit.cli.intentions",
    # Overview
    "balance": "glowhabit.cli.overview",
    "achievements": "glowhabit.cli.overview",
    "moments": "glowhabit.cli.overview",
    "quote": "glowhabit.cli.overview",
    # Projects
    "project": "glowhabit.cli.projects",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=verbose)],
        force=True,
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="glowhabit")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """GlowHabit - calm habit, journal and routine tracking from the terminal.

    Track daily habits, budget check-ins, journal entries and routines,
    then review streaks, mood trends and your life balance.

    \b
    Quick Start:
      glowhabit habit list            # Today's habits
      glowhabit habit check <ID>      # Check a habit off
      glowhabit journal write "..."   # Write today's entry
      glowhabit balance               # Life balance overview
      glowhabit project stats         # Projects and deep work
    """
    _setup_logging(verbose)
    # Ensure context object exists for passing data between commands
    ctx.ensure_object(dict)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
