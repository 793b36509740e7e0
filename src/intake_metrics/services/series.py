"""Builders that turn sparse logs into daily series for the saturation models."""

from collections.abc import Iterable
from datetime import date, tzinfo

from intake_metrics.domain.intake import DayAmount, IntakeLog
from intake_metrics.services.dates import day_key, iter_days, window_start
from intake_metrics.services.numeric import safe_amount


def daily_totals(
    logs: Iterable[IntakeLog], tz: tzinfo | None = None
) -> dict[date, float]:
    """Sum log amounts per local calendar day."""
    totals: dict[date, float] = {}
    for log in logs:
        key = day_key(log.consumed_at, tz)
        totals[key] = totals.get(key, 0.0) + safe_amount(log.amount)
    return totals


def sparse_daily_series(
    logs: Iterable[IntakeLog], tz: tzinfo | None = None
) -> list[DayAmount]:
    """Return one entry per logged day, oldest first."""
    totals = daily_totals(logs, tz)
    return [DayAmount(day=day, amount=totals[day]) for day in sorted(totals)]


def dense_daily_series(
    logs: Iterable[IntakeLog],
    end: date,
    days: int,
    tz: tzinfo | None = None,
) -> list[DayAmount]:
    """Return a contiguous ``days``-long window ending at ``end``, zero-filled."""
    if days <= 0:
        return []
    totals = daily_totals(logs, tz)
    return [
        DayAmount(day=day, amount=totals.get(day, 0.0))
        for day in iter_days(window_start(end, days), end)
    ]
