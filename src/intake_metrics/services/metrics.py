"""Metrics service combining the engine with configured defaults."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from zoneinfo import ZoneInfo

from intake_metrics.domain.intake import (
    HabitsReport,
    IntakeLog,
    MetricsSummary,
    PerformanceOptions,
    ProjectionResult,
    SaturationReport,
    UserProfile,
)
from intake_metrics.services.consumption import all_metrics
from intake_metrics.services.creatine import creatine_saturation, days_till_saturated
from intake_metrics.services.dates import today
from intake_metrics.services.habits import (
    average_hydration_buckets,
    hydration_buckets_for_date,
)
from intake_metrics.services.hydration import (
    days_till_optimal_hydration,
    hydration_saturation,
)
from intake_metrics.services.performance import performance_metric
from intake_metrics.services.series import dense_daily_series
from intake_metrics.services.units import convert_water


@dataclass
class MetricsService:
    """Service for computing intake metrics in a user's timezone."""

    timezone_name: str = "UTC"
    saturation_window_days: int = 28
    dose_time_window_days: int = 30
    habits_window_days: int = 30
    performance_options: PerformanceOptions = field(default_factory=PerformanceOptions)

    def resolve_timezone(self, timezone_name: str | None = None) -> ZoneInfo:
        """Return the requested timezone, or the configured default."""
        return ZoneInfo(timezone_name or self.timezone_name)

    def summary(  # noqa: PLR0913
        self,
        creatine_logs: Sequence[IntakeLog],
        water_logs: Sequence[IntakeLog],
        water_goal: float,
        period_days: int | None = None,
        window_days: int | None = None,
        reference_date: date | None = None,
        timezone_name: str | None = None,
    ) -> MetricsSummary:
        """Return adherence, streak, totals and dose-time metrics."""
        tz = self.resolve_timezone(timezone_name)
        return all_metrics(
            creatine_logs,
            water_logs,
            water_goal,
            period_days=period_days,
            reference_date=reference_date or today(tz),
            window_days=window_days or self.dose_time_window_days,
            tz=tz,
        )

    def saturation(  # noqa: PLR0913
        self,
        creatine_logs: Sequence[IntakeLog],
        water_logs: Sequence[IntakeLog],
        profile: UserProfile,
        days: int | None = None,
        end: date | None = None,
        water_unit: str = "oz",
        options: PerformanceOptions | None = None,
        timezone_name: str | None = None,
    ) -> SaturationReport:
        """Return day-aligned creatine, hydration and composite series."""
        tz = self.resolve_timezone(timezone_name)
        last_day = end or today(tz)
        window = days or self.saturation_window_days
        creatine_days = dense_daily_series(creatine_logs, last_day, window, tz)
        water_days = dense_daily_series(
            _water_in_ounces(water_logs, water_unit), last_day, window, tz
        )
        creatine = creatine_saturation(creatine_days)
        hydration = hydration_saturation(water_days, profile)
        performance = performance_metric(
            creatine, hydration, options or self.performance_options
        )
        return SaturationReport(
            days=tuple(entry.day for entry in creatine_days),
            creatine=tuple(creatine),
            hydration=tuple(hydration),
            performance=tuple(performance),
        )

    def projection(
        self,
        creatine_saturation_now: float,
        hydration_saturation_now: float,
        planned_daily_dose: float,
        planned_daily_water: float,
        profile: UserProfile,
        water_unit: str = "oz",
    ) -> ProjectionResult:
        """Return days needed to reach target creatine and hydration levels."""
        planned_oz = convert_water(planned_daily_water, water_unit, "oz")
        return ProjectionResult(
            days_till_saturated=days_till_saturated(
                creatine_saturation_now, planned_daily_dose
            ),
            days_till_optimal_hydration=days_till_optimal_hydration(
                hydration_saturation_now, planned_oz, profile
            ),
        )

    def habits(
        self,
        water_logs: Sequence[IntakeLog],
        target: date | None = None,
        window_days: int | None = None,
        timezone_name: str | None = None,
    ) -> HabitsReport:
        """Return one day's hydration buckets and the rolling average."""
        tz = self.resolve_timezone(timezone_name)
        last_day = today(tz)
        return HabitsReport(
            day=hydration_buckets_for_date(water_logs, target or last_day, tz),
            average=average_hydration_buckets(
                water_logs, window_days or self.habits_window_days, last_day, tz
            ),
        )


def _water_in_ounces(
    logs: Sequence[IntakeLog], water_unit: str
) -> list[IntakeLog]:
    if water_unit == "oz":
        return list(logs)
    return [
        IntakeLog(
            consumed_at=log.consumed_at,
            amount=convert_water(log.amount, water_unit, "oz"),
        )
        for log in logs
    ]
