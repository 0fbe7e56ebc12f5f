"""GlowHabit - habit, routine and journal tracking with analytics."""

__version__ = "0.1.0"
