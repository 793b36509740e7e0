"""Application configuration."""

import os
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from intake_metrics.domain.intake import PerformanceWeights

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    timezone: str = "UTC"
    saturation_window_days: int = Field(default=28, ge=1)
    dose_time_window_days: int = Field(default=30, ge=1)
    habits_window_days: int = Field(default=30, ge=1)
    performance_mode: Literal["arithmetic", "geometric"] = "arithmetic"
    performance_weights: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_performance_weights(raw: str | None) -> PerformanceWeights | None:
    """Parse composite weights such as ``creatine:0.7,hydration:0.3``."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if not cleaned:
        return None
    values: dict[str, float] = {}
    for chunk in cleaned.split(","):
        name, _, value = chunk.partition(":")
        name = name.strip().lower()
        if name not in {"creatine", "hydration"}:
            continue
        try:
            values[name] = float(value)
        except ValueError:
            continue
    if not values:
        return None
    return PerformanceWeights(
        creatine=values.get("creatine", 0.0),
        hydration=values.get("hydration", 0.0),
    )
