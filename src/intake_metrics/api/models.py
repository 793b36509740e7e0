"""Pydantic models for metrics request payloads."""

from dataclasses import replace
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field

from intake_metrics.domain.intake import (
    IntakeLog,
    PerformanceOptions,
    PerformanceWeights,
    UserProfile,
)


class IntakeLogPayload(BaseModel):
    """One creatine or water log."""

    consumed_at: datetime
    amount: float = Field(ge=0, allow_inf_nan=False)

    def to_domain(self) -> IntakeLog:
        return IntakeLog(consumed_at=self.consumed_at, amount=self.amount)


class UserProfilePayload(BaseModel):
    """Body measurements for the hydration requirement."""

    height_inches: float = Field(gt=0)
    weight_lb: float = Field(gt=0)
    sex: Literal["male", "female"]

    def to_domain(self) -> UserProfile:
        return UserProfile(
            height_inches=self.height_inches,
            weight_lb=self.weight_lb,
            sex=self.sex,
        )


class PerformanceWeightsPayload(BaseModel):
    """Composite weights; normalized by the engine."""

    creatine: float = 0.5
    hydration: float = 0.5


class SummaryRequest(BaseModel):
    """Input for adherence, streak and dose-time metrics."""

    creatine_logs: list[IntakeLogPayload] = Field(default_factory=list)
    water_logs: list[IntakeLogPayload] = Field(default_factory=list)
    water_goal: float
    period_days: int | None = Field(default=None, ge=1)
    window_days: int | None = Field(default=None, ge=1)
    reference_date: date | None = None
    timezone: str | None = None


class SaturationRequest(BaseModel):
    """Input for the saturation and composite series."""

    creatine_logs: list[IntakeLogPayload] = Field(default_factory=list)
    water_logs: list[IntakeLogPayload] = Field(default_factory=list)
    profile: UserProfilePayload
    days: int | None = Field(default=None, ge=1)
    end_date: date | None = None
    water_unit: Literal["oz", "ml"] = "oz"
    mode: Literal["arithmetic", "geometric"] | None = None
    weights: PerformanceWeightsPayload | None = None
    clamp: bool | None = None
    timezone: str | None = None

    def performance_options(self, base: PerformanceOptions) -> PerformanceOptions:
        """Overlay the fields sent in the request on the configured options."""
        options = base
        if self.mode is not None:
            options = replace(options, mode=self.mode)
        if self.weights is not None:
            options = replace(
                options,
                weights=PerformanceWeights(
                    creatine=self.weights.creatine,
                    hydration=self.weights.hydration,
                ),
            )
        if self.clamp is not None:
            options = replace(options, clamp=self.clamp)
        return options


class ProjectionRequest(BaseModel):
    """Input for the days-till-target projections."""

    creatine_saturation: float = Field(ge=0, le=1)
    hydration_saturation: float = Field(ge=0, le=1)
    planned_daily_dose: float = Field(default=5.0, ge=0)
    planned_daily_water: float = Field(ge=0)
    profile: UserProfilePayload
    water_unit: Literal["oz", "ml"] = "oz"


class HabitsRequest(BaseModel):
    """Input for the time-of-day hydration buckets."""

    water_logs: list[IntakeLogPayload] = Field(default_factory=list)
    target_date: date | None = None
    window_days: int | None = Field(default=None, ge=1)
    timezone: str | None = None
