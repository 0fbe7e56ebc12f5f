"""Tests for configuration loading and application state.

**Feature: glowhabit-storage**
"""

import logging
import tempfile
from datetime import date
from pathlib import Path

import pytest

from glowhabit.config import DEFAULT_CONFIG, get_config_path, get_db_path, load_config
from glowhabit.state import AppState


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class TestLoadConfig:
    """
    **Feature: glowhabit-storage, Property 30: Config Merges Over Defaults**
    """

    def test_missing_file_yields_defaults(self, temp_dir: Path):
        assert load_config(temp_dir / "missing.toml") == DEFAULT_CONFIG

    def test_partial_file_merged(self, temp_dir: Path):
        path = temp_dir / "config.toml"
        path.write_text("[analytics]\nwindow_days = 14\n")

        config = load_config(path)

        assert config["analytics"] == {"window_days": 14, "trend_days": 7}
        assert config["journal"]["sentiment_analysis_enabled"] is True

    def test_invalid_toml_yields_defaults(self, temp_dir: Path, caplog):
        path = temp_dir / "config.toml"
        path.write_text("[analytics\nwindow_days = = 3")

        with caplog.at_level(logging.WARNING):
            config = load_config(path)

        assert config == DEFAULT_CONFIG
        assert "unreadable config" in caplog.text

    def test_defaults_not_mutated(self, temp_dir: Path):
        load_config(temp_dir / "missing.toml")["analytics"]["window_days"] = 1
        assert DEFAULT_CONFIG["analytics"]["window_days"] == 30

    def test_env_override(self, temp_dir: Path, monkeypatch):
        path = temp_dir / "custom.toml"
        monkeypatch.setenv("GLOWHABIT_CONFIG", str(path))

        assert get_config_path() == path

    def test_db_path_expands_user(self):
        config = {"storage": {"db_path": "~/glowhabit.db"}}
        assert get_db_path(config) == Path.home() / "glowhabit.db"


class TestAppState:
    """
    **Feature: glowhabit-storage, Property 31: State Persists Across Sessions**
    """

    def test_first_run_seeds_default_habits(self, temp_dir: Path):
        state = AppState.open(temp_dir / "glowhabit.db")

        assert len(state.habits.habits()) == 8
        assert len(state.goals) == 0

    def test_save_and_reopen(self, temp_dir: Path):
        db_path = temp_dir / "glowhabit.db"
        with AppState.open(db_path) as state:
            first = state.habits.habits()[0]
            state.habits.check(first.id, date(2024, 1, 4))
            state.budget.upsert(date(2024, 1, 4), stayed_within_budget=True, tracked_expenses=True)
            state.intentions.set_intention("2024-01", "Be kind")

        reopened = AppState.open(db_path)

        assert len(reopened.habits.habits()) == 8
        assert reopened.habits.is_checked(first.id, date(2024, 1, 4))
        assert reopened.budget.get(date(2024, 1, 4)).is_good_day
        assert reopened.intentions.get("2024-01").intention == "Be kind"

    def test_emptied_habits_are_not_reseeded(self, temp_dir: Path):
        db_path = temp_dir / "glowhabit.db"
        with AppState.open(db_path) as state:
            for habit in state.habits.habits():
                state.habits.remove_habit(habit.id)

        assert AppState.open(db_path).habits.habits() == []

    def test_failed_block_does_not_save(self, temp_dir: Path):
        db_path = temp_dir / "glowhabit.db"
        with pytest.raises(RuntimeError):
            with AppState.open(db_path) as state:
                state.goals.add("Never saved")
                raise RuntimeError("boom")

        assert len(AppState.open(db_path).goals) == 0

    def test_closed_state_rejects_save(self, temp_dir: Path):
        state = AppState.open(temp_dir / "glowhabit.db")
        state.close()

        with pytest.raises(RuntimeError):
            state.save()

    def test_config_sets_initial_journal_settings(self, temp_dir: Path):
        config = {"journal": {"sentiment_analysis_enabled": False}}

        state = AppState.open(temp_dir / "glowhabit.db", config=config)

        assert state.journal.settings.sentiment_analysis_enabled is False

    def test_corrupt_bucket_recovers(self, temp_dir: Path):
        db_path = temp_dir / "glowhabit.db"
        AppState.open(db_path).save()
        AppState.open(db_path).data_store.set_item("glowhabit-journal", "{oops")

        state = AppState.open(db_path)

        assert state.journal.entries() == []
