"""Domain models for intake logs and engine results."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal

Sex = Literal["male", "female"]
CombineMode = Literal["arithmetic", "geometric"]


@dataclass(frozen=True)
class IntakeLog:
    """A single creatine or water log."""

    consumed_at: str | datetime
    amount: float


@dataclass(frozen=True)
class DayAmount:
    """Total amount for one calendar day."""

    day: date
    amount: float


@dataclass(frozen=True)
class UserProfile:
    """Body measurements used for the hydration requirement."""

    height_inches: float
    weight_lb: float
    sex: Sex


@dataclass(frozen=True)
class AverageDoseTimeResult:
    """Average time of day for creatine doses."""

    minutes_since_midnight: int
    hhmm: str
    days_counted: int


@dataclass(frozen=True)
class TotalIntakeResult:
    """Summed amount and number of distinct logged days."""

    total: float
    days: int


@dataclass(frozen=True)
class HydrationBuckets:
    """Water intake split into fixed time-of-day ranges."""

    labels: tuple[str, ...]
    values: tuple[float, ...]


@dataclass(frozen=True)
class PerformanceWeights:
    """Relative weights of creatine and hydration in the composite."""

    creatine: float = 0.5
    hydration: float = 0.5


@dataclass(frozen=True)
class PerformanceOptions:
    """How to combine the two saturation series."""

    mode: CombineMode = "arithmetic"
    weights: PerformanceWeights = field(default_factory=PerformanceWeights)
    clamp: bool = True


@dataclass(frozen=True)
class MetricsSummary:
    """All consumption metrics computed at once."""

    average_dose_time: AverageDoseTimeResult
    average_dose_time_window: AverageDoseTimeResult
    creatine_adherence: float
    hydration_adherence: float
    total_creatine: TotalIntakeResult
    total_water: TotalIntakeResult
    creatine_streak: int
    hydration_streak: int


@dataclass(frozen=True)
class SaturationReport:
    """Day-aligned saturation and composite series."""

    days: tuple[date, ...]
    creatine: tuple[float, ...]
    hydration: tuple[float, ...]
    performance: tuple[float, ...]


@dataclass(frozen=True)
class ProjectionResult:
    """Days needed to reach target saturation at a planned daily intake."""

    days_till_saturated: int
    days_till_optimal_hydration: int


@dataclass(frozen=True)
class HabitsReport:
    """Hydration buckets for one day next to the rolling average."""

    day: HydrationBuckets
    average: HydrationBuckets
