"""Hydration habits split into six fixed time-of-day ranges."""

from collections.abc import Sequence
from datetime import date, tzinfo

from intake_metrics.domain.intake import HydrationBuckets, IntakeLog
from intake_metrics.services.dates import (
    BUCKET_LABELS,
    bucket_index,
    day_key,
    iter_days,
    today,
    window_start,
)
from intake_metrics.services.numeric import safe_amount

DEFAULT_WINDOW_DAYS = 30


def _empty_buckets() -> list[float]:
    return [0.0] * len(BUCKET_LABELS)


def hydration_buckets_for_date(
    logs: Sequence[IntakeLog],
    target: date | None = None,
    tz: tzinfo | None = None,
) -> HydrationBuckets:
    """Sum one day's water logs into the time-of-day buckets."""
    day = target or today(tz)
    values = _empty_buckets()
    for log in logs:
        if day_key(log.consumed_at, tz) != day:
            continue
        values[bucket_index(log.consumed_at, tz)] += safe_amount(log.amount)
    return HydrationBuckets(labels=BUCKET_LABELS, values=tuple(values))


def average_hydration_buckets(
    logs: Sequence[IntakeLog],
    window_days: int = DEFAULT_WINDOW_DAYS,
    end: date | None = None,
    tz: tzinfo | None = None,
) -> HydrationBuckets:
    """Average intake per bucket over the trailing window, counting empty days."""
    if window_days <= 0:
        return HydrationBuckets(labels=BUCKET_LABELS, values=tuple(_empty_buckets()))
    last_day = end or today(tz)
    per_day = {
        day: _empty_buckets()
        for day in iter_days(window_start(last_day, window_days), last_day)
    }
    for log in logs:
        buckets = per_day.get(day_key(log.consumed_at, tz))
        if buckets is None:
            continue
        buckets[bucket_index(log.consumed_at, tz)] += safe_amount(log.amount)

    sums = _empty_buckets()
    for buckets in per_day.values():
        for index, value in enumerate(buckets):
            sums[index] += value
    return HydrationBuckets(
        labels=BUCKET_LABELS,
        values=tuple(total / window_days for total in sums),
    )
