"""Persistence layer for GlowHabit."""

from glowhabit.db.store import DataStore

__all__ = ["DataStore"]
