"""CLI commands for GlowHabit.

This package provides the command-line interface for tracking habits,
budget check-ins, journal entries, routines and intentions, and for
viewing the derived statistics.
"""

from glowhabit.cli.main import cli, main

__all__ = ["cli", "main"]
