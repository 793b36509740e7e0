"""Consumption metrics computed from raw creatine and water logs.

Logs may be sparse and may contain several entries per day. Every function
groups logs by local calendar day in ``tz`` (UTC when omitted) and measures
periods against ``reference_date`` (today in ``tz`` when omitted).

Average dose time picks one representative dose per day: the earliest dose
on the first logged day, then on each later day the dose closest to the mean
of the times chosen so far. Equidistant candidates resolve to the first one
in input order.
"""

import math
from collections.abc import Callable, Sequence
from datetime import date, timedelta, tzinfo

from intake_metrics.domain.intake import (
    AverageDoseTimeResult,
    IntakeLog,
    MetricsSummary,
    TotalIntakeResult,
)
from intake_metrics.services.dates import (
    day_key,
    format_hhmm,
    iter_days,
    minutes_since_midnight,
    today,
    window_start,
)
from intake_metrics.services.numeric import safe_amount
from intake_metrics.services.series import daily_totals

DEFAULT_WINDOW_DAYS = 30

_NO_DOSE_TIME = AverageDoseTimeResult(
    minutes_since_midnight=-1, hhmm="--:--", days_counted=0
)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _times_by_day(
    logs: Sequence[IntakeLog], tz: tzinfo | None
) -> dict[date, list[int]]:
    grouped: dict[date, list[int]] = {}
    for log in logs:
        key = day_key(log.consumed_at, tz)
        grouped.setdefault(key, []).append(minutes_since_midnight(log.consumed_at, tz))
    return grouped


def average_dose_time(
    logs: Sequence[IntakeLog], tz: tzinfo | None = None
) -> AverageDoseTimeResult:
    """Return the average time of day of one representative dose per day."""
    if not logs:
        return _NO_DOSE_TIME

    grouped = _times_by_day(logs, tz)
    chosen: list[int] = []
    running_total = 0
    for day in sorted(grouped):
        times = grouped[day]
        if not chosen:
            pick = min(times)
        else:
            mean = running_total / len(chosen)
            pick = min(times, key=lambda minute: abs(minute - mean))
        chosen.append(pick)
        running_total += pick

    average = _round_half_up(running_total / len(chosen))
    return AverageDoseTimeResult(
        minutes_since_midnight=average,
        hhmm=format_hhmm(average),
        days_counted=len(chosen),
    )


def average_dose_time_window(
    logs: Sequence[IntakeLog],
    window_days: int = DEFAULT_WINDOW_DAYS,
    reference_date: date | None = None,
    tz: tzinfo | None = None,
) -> AverageDoseTimeResult:
    """Average dose time over the trailing ``window_days`` ending at the reference."""
    end = reference_date or today(tz)
    start = window_start(end, window_days)
    in_window = [log for log in logs if start <= day_key(log.consumed_at, tz) <= end]
    return average_dose_time(in_window, tz)


def _period_start(
    logs: Sequence[IntakeLog],
    period_days: int | None,
    end: date,
    tz: tzinfo | None,
) -> date:
    if period_days:
        return window_start(end, period_days)
    return min(day_key(log.consumed_at, tz) for log in logs)


def _span_days(start: date, end: date) -> int:
    return (end - start).days + 1


def creatine_adherence_rate(
    logs: Sequence[IntakeLog],
    period_days: int | None = None,
    reference_date: date | None = None,
    tz: tzinfo | None = None,
) -> float:
    """Fraction of days in the period with at least one creatine log."""
    if not logs:
        return 0.0
    end = reference_date or today(tz)
    start = _period_start(logs, period_days, end, tz)
    span = _span_days(start, end)
    if span <= 0:
        return 0.0
    logged_days = {day_key(log.consumed_at, tz) for log in logs}
    in_period = [day for day in logged_days if start <= day <= end]
    return len(in_period) / span


def hydration_adherence_rate(
    logs: Sequence[IntakeLog],
    water_goal: float,
    period_days: int | None = None,
    reference_date: date | None = None,
    tz: tzinfo | None = None,
) -> float:
    """Fraction of days in the period whose water total met the goal."""
    if not logs or water_goal <= 0:
        return 0.0
    end = reference_date or today(tz)
    start = _period_start(logs, period_days, end, tz)
    span = _span_days(start, end)
    if span <= 0:
        return 0.0
    totals = daily_totals(logs, tz)
    met = sum(1 for day in iter_days(start, end) if totals.get(day, 0.0) >= water_goal)
    return met / span


def _streak(qualifies: Callable[[date], bool], end: date) -> int:
    streak = 0
    day = end
    while qualifies(day):
        streak += 1
        day -= timedelta(days=1)
    return streak


def creatine_streak(
    logs: Sequence[IntakeLog],
    reference_date: date | None = None,
    tz: tzinfo | None = None,
) -> int:
    """Count consecutive days with a creatine log ending at the reference."""
    if not logs:
        return 0
    logged_days = {day_key(log.consumed_at, tz) for log in logs}
    return _streak(logged_days.__contains__, reference_date or today(tz))


def hydration_streak(
    logs: Sequence[IntakeLog],
    water_goal: float,
    reference_date: date | None = None,
    tz: tzinfo | None = None,
) -> int:
    """Count consecutive days meeting the water goal ending at the reference."""
    if not logs or water_goal <= 0:
        return 0
    totals = daily_totals(logs, tz)
    return _streak(
        lambda day: totals.get(day, 0.0) >= water_goal,
        reference_date or today(tz),
    )


def total_intake(
    logs: Sequence[IntakeLog], tz: tzinfo | None = None
) -> TotalIntakeResult:
    """Return the summed amount and the number of distinct logged days."""
    total = sum(safe_amount(log.amount) for log in logs)
    days = {day_key(log.consumed_at, tz) for log in logs}
    return TotalIntakeResult(total=total, days=len(days))


def is_goal_met(
    logs: Sequence[IntakeLog],
    goal: float,
    day: date | None = None,
    tz: tzinfo | None = None,
) -> bool:
    """Return whether the day's total reached the goal."""
    if goal <= 0:
        return False
    target = day or today(tz)
    return daily_totals(logs, tz).get(target, 0.0) >= goal


def all_metrics(  # noqa: PLR0913
    creatine_logs: Sequence[IntakeLog],
    water_logs: Sequence[IntakeLog],
    water_goal: float,
    period_days: int | None = None,
    reference_date: date | None = None,
    window_days: int = DEFAULT_WINDOW_DAYS,
    tz: tzinfo | None = None,
) -> MetricsSummary:
    """Compute every consumption metric for one reference date."""
    reference = reference_date or today(tz)
    return MetricsSummary(
        average_dose_time=average_dose_time(creatine_logs, tz),
        average_dose_time_window=average_dose_time_window(
            creatine_logs, window_days, reference, tz
        ),
        creatine_adherence=creatine_adherence_rate(
            creatine_logs, period_days, reference, tz
        ),
        hydration_adherence=hydration_adherence_rate(
            water_logs, water_goal, period_days, reference, tz
        ),
        total_creatine=total_intake(creatine_logs, tz),
        total_water=total_intake(water_logs, tz),
        creatine_streak=creatine_streak(creatine_logs, reference, tz),
        hydration_streak=hydration_streak(water_logs, water_goal, reference, tz),
    )
