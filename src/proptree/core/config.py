# src/proptree/core/config.py
"""
Configuration schema and loading for proptree runs.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

from proptree.core.limits import DEFAULT_CASES, DEFAULT_MAX_SHRINK_STEPS, MAX_STRATEGY_ATTEMPTS


class RunnerSettings(BaseModel):
    """How many cases to run and which ceilings guard each one.

    Example YAML:
        runner:
          cases: 500
          recursion_limit: 16
          rejection_limit: 128
          seed: 1234
    """

    model_config = {"frozen": True}

    cases: int = Field(
        default=DEFAULT_CASES,
        gt=0,
        description="Number of generated cases per property",
    )
    recursion_limit: int | None = Field(
        default=None,
        gt=0,
        description="Maximum recursive strategy depth (None = unbounded)",
    )
    rejection_limit: int = Field(
        default=MAX_STRATEGY_ATTEMPTS,
        gt=0,
        description="Draw attempts per parameter before the case aborts",
    )
    max_shrink_steps: int = Field(
        default=DEFAULT_MAX_SHRINK_STEPS,
        gt=0,
        description="Property evaluations the shrink loop may spend per failure",
    )
    seed: int | None = Field(
        default=None,
        description="Master seed; a fresh one is drawn (and reported) when absent",
    )

    def merged(self, **overrides: Any) -> "RunnerSettings":
        """Return a copy with every non-None override applied.

        Validation runs again on the merged values.
        """
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return RunnerSettings(**{**self.model_dump(), **updates})


class LoggingSettings(BaseModel):
    """Logging output configuration."""

    model_config = {"frozen": True}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Root log level",
    )
    json_output: bool = Field(
        default=False,
        description="Emit JSON lines instead of console output",
    )


class ProptreeSettings(BaseModel):
    """Top-level settings."""

    model_config = {"frozen": True}

    runner: RunnerSettings = Field(default_factory=RunnerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_settings(config_path: Path | None = None) -> ProptreeSettings:
    """Load settings from an optional YAML file with environment overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (PROPTREE_*) - highest priority
    2. Config file (if given)
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: PROPTREE_RUNNER__CASES=500 for nested keys.

    Args:
        config_path: Path to YAML configuration file, or None for env-only

    Returns:
        Validated ProptreeSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config_path is given but doesn't exist
    """
    from dynaconf import Dynaconf

    settings_files: list[str] = []
    if config_path is not None:
        # Dynaconf silently accepts missing files
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        settings_files.append(str(config_path))

    dynaconf_settings = Dynaconf(
        envvar_prefix="PROPTREE",
        settings_files=settings_files,
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; Pydantic wants lowercase
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): _lower_keys(v) for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}
    known = set(ProptreeSettings.model_fields)
    return ProptreeSettings(**{k: v for k, v in raw_config.items() if k in known})


def _lower_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    return value
