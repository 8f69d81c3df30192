"""Configuration management.

Loads from TOML config files + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings

from .enums import LogFormat
from .errors import ConfigError


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class AnalyticsConfig(BaseModel):
    """Explicit context handed to every analytics call."""

    initial_capital: float = Field(default=10_000.0, gt=0)
    # Currency value of one percent-unit of realized return
    notional_per_unit: float = Field(default=100.0, gt=0)
    risk_levels: list[float] = Field(
        default_factory=lambda: [0.5, 1.0, 2.0, 3.0, 5.0]
    )
    first_hour: int = Field(default=6, ge=0, le=23)
    last_hour: int = Field(default=22, ge=0, le=23)
    projection_months: int = Field(default=12, ge=1, le=120)

    @model_validator(mode="after")
    def _check_ranges(self) -> "AnalyticsConfig":
        if self.first_hour > self.last_hour:
            raise ValueError("first_hour must not be after last_hour")
        if any(r <= 0 for r in self.risk_levels):
            raise ValueError("risk_levels must be positive percentages")
        return self


class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level application settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "JOURNAL_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top. Nested sections
            are merged key by key rather than replaced.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        import tomli

        with open(path, "rb") as f:
            try:
                data = tomli.load(f)
            except tomli.TOMLDecodeError as exc:
                raise ConfigError(f"Malformed config file {path}: {exc}") from exc

    if overrides:
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
