# tests/unit/core/test_config.py
"""Tests for settings models and multi-source loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from proptree.core.config import LoggingSettings, ProptreeSettings, RunnerSettings, load_settings
from proptree.core.limits import DEFAULT_CASES, DEFAULT_MAX_SHRINK_STEPS, MAX_STRATEGY_ATTEMPTS


class TestRunnerSettings:
    def test_defaults(self) -> None:
        settings = RunnerSettings()

        assert settings.cases == DEFAULT_CASES
        assert settings.recursion_limit is None
        assert settings.rejection_limit == MAX_STRATEGY_ATTEMPTS
        assert settings.max_shrink_steps == DEFAULT_MAX_SHRINK_STEPS
        assert settings.seed is None

    @pytest.mark.parametrize("field", ["cases", "recursion_limit", "rejection_limit", "max_shrink_steps"])
    def test_non_positive_values_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            RunnerSettings(**{field: 0})

    def test_frozen(self) -> None:
        settings = RunnerSettings()

        with pytest.raises(ValidationError):
            settings.cases = 5  # type: ignore[misc]

    def test_merged_ignores_none(self) -> None:
        settings = RunnerSettings(cases=50, seed=3)

        merged = settings.merged(cases=None, seed=None, recursion_limit=4)

        assert merged.cases == 50
        assert merged.seed == 3
        assert merged.recursion_limit == 4

    def test_merged_without_overrides_returns_self(self) -> None:
        settings = RunnerSettings()

        assert settings.merged(cases=None) is settings

    def test_merged_revalidates(self) -> None:
        with pytest.raises(ValidationError):
            RunnerSettings().merged(cases=-1)


class TestLoggingSettings:
    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(level="LOUD")  # type: ignore[arg-type]


@pytest.mark.usefixtures("clean_env")
class TestLoadSettings:
    def test_defaults_without_sources(self) -> None:
        assert load_settings() == ProptreeSettings()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")

    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "proptree.yaml"
        path.write_text("runner:\n  cases: 250\n  seed: 17\nlogging:\n  level: DEBUG\n")

        settings = load_settings(path)

        assert settings.runner.cases == 250
        assert settings.runner.seed == 17
        assert settings.logging.level == "DEBUG"

    def test_environment_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "proptree.yaml"
        path.write_text("runner:\n  cases: 250\n")
        monkeypatch.setenv("PROPTREE_RUNNER__CASES", "12")

        settings = load_settings(path)

        assert settings.runner.cases == 12

    def test_environment_only(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROPTREE_RUNNER__REJECTION_LIMIT", "9")

        assert load_settings().runner.rejection_limit == 9
