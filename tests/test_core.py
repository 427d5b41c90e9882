"""Tests for Result, settings and the CLI."""

import json

import pytest

from workout_builder.__main__ import main
from workout_builder.config import Settings, get_settings
from workout_builder.core.result import Result


class TestResult:
    """Tests for the Result type."""

    def test_ok(self):
        """Test a successful result exposes its value."""
        result = Result.ok([1, 2])
        assert result.is_ok
        assert not result.is_err
        assert result.error is None
        assert result.unwrap() == [1, 2]

    def test_err(self):
        """Test an error result raises on unwrap."""
        result = Result.err("boom")
        assert result.is_err
        with pytest.raises(ValueError, match="boom"):
            result.unwrap()

    def test_map(self):
        """Test map transforms values and passes errors through."""
        assert Result.ok(2).map(lambda v: v * 3).unwrap() == 6
        assert Result.err("boom").map(lambda v: v * 3).error == "boom"


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Test selection tuning defaults."""
        settings = Settings(_env_file=None, database_url="sqlite://")
        assert settings.minimum_threshold == 20
        assert settings.pool_multiplier == 4
        assert settings.minimum_pool_size == 30
        assert settings.primary_ratio == 0.7
        assert settings.excluded_value == "STRETCHING"
        assert settings.is_sqlite

    def test_env_override(self, monkeypatch):
        """Test settings are read from environment variables."""
        monkeypatch.setenv("PRIMARY_RATIO", "0.5")
        monkeypatch.setenv("MINIMUM_THRESHOLD", "5")
        get_settings.cache_clear()
        settings = get_settings()
        assert settings.primary_ratio == 0.5
        assert settings.minimum_threshold == 5

    def test_invalid_ratio(self):
        """Test a primary ratio above 1 is rejected."""
        with pytest.raises(ValueError):
            Settings(_env_file=None, primary_ratio=1.5)


class TestCli:
    """Tests for the workout-builder CLI."""

    @pytest.fixture
    def db_url(self, tmp_path, monkeypatch):
        """Point the CLI at a temporary SQLite file."""
        url = f"sqlite:///{tmp_path / 'cli.db'}"
        monkeypatch.setenv("DATABASE_URL", url)
        get_settings.cache_clear()
        return url

    def test_seed(self, db_url, capsys):
        """Test seed creates the database."""
        assert main(["seed"]) == 0
        assert db_url in capsys.readouterr().out

    def test_select(self, db_url, capsys):
        """Test select prints the selection as JSON."""
        code = main(["select", "-m", "chest", "-e", "dumbbell", "-n", "3", "--seed", "1"])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data[0]["muscle"] == "CHEST"
        assert {ex["name"] for ex in data[0]["exercises"]} == {
            "Dumbbell Bench Press",
            "Dumbbell Fly",
        }

    def test_select_is_reproducible(self, db_url, capsys):
        """Test the same seed gives the same selection."""
        argv = ["select", "-m", "chest", "-m", "back", "-e", "barbell", "-e", "bench", "--seed", "3"]
        main(argv)
        first = capsys.readouterr().out
        main(argv)
        assert capsys.readouterr().out == first

    def test_select_dedupes_muscles(self, db_url, capsys):
        """Test repeated muscles produce a single group."""
        code = main(["select", "-m", "chest", "-m", "chest", "-e", "dumbbell"])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert [group["muscle"] for group in data] == ["CHEST"]

    @pytest.mark.parametrize(
        "argv",
        [
            ["select", "-m", "chst", "-e", "dumbbell"],
            ["select", "-m", "dumbbell", "-e", "chest"],
            ["select", "-m", "chest", "-e", "dumbbell", "-n", "-5"],
            ["select", "-m", "chest", "-e", "dumbbell", "-n", "0"],
            ["select", "-m", "chest", "-e", "dumbbell", "-n", "50"],
        ],
    )
    def test_select_rejects_invalid_request(self, db_url, capsys, argv):
        """Test unknown values, swapped categories and out-of-range limits fail."""
        assert main(argv) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid selection request" in captured.err

    def test_no_command(self, capsys):
        """Test running without a command prints help and fails."""
        assert main([]) == 1


class TestSessionModule:
    """Tests for the module-level engine and session helpers."""

    def test_init_db_with_default_engine(self, monkeypatch):
        """Test init_db creates and seeds the configured database."""
        from workout_builder.db import session as session_module
        from workout_builder.db.repositories import ExerciseRepository
        from workout_builder.db.seed_data import EXERCISES

        monkeypatch.setattr(session_module, "_engine", None)
        monkeypatch.setattr(session_module, "_session_factory", None)

        session_module.init_db()
        with session_module.get_session() as session:
            assert ExerciseRepository(session).count() == len(EXERCISES)

        session_module.drop_tables()
        session_module.get_engine().dispose()

    def test_get_session_rolls_back_on_error(self, monkeypatch):
        """Test get_session re-raises errors from the block."""
        from workout_builder.db import session as session_module

        monkeypatch.setattr(session_module, "_engine", None)
        monkeypatch.setattr(session_module, "_session_factory", None)

        with pytest.raises(RuntimeError):
            with session_module.get_session():
                raise RuntimeError("boom")
