"""Date and time-of-day helpers shared by the metrics engine."""

from collections.abc import Iterator
from datetime import UTC, date, datetime, timedelta, tzinfo

MINUTES_PER_HOUR = 60

# Upper bound (exclusive hour) of each time-of-day bucket.
BUCKET_HOUR_LIMITS = (9, 12, 15, 18, 21, 24)
BUCKET_LABELS = ("12a-9a", "9a-12p", "12p-3p", "3p-6p", "6p-9p", "9p-12a")


def parse_timestamp(value: str | date | datetime) -> datetime:
    """Parse an ISO-8601 string, date or datetime into a datetime."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def to_local(value: str | date | datetime, tz: tzinfo | None = None) -> datetime:
    """Return the wall-clock datetime for a timestamp.

    Aware timestamps are converted into ``tz`` (UTC when omitted). Naive
    timestamps are already wall-clock and are returned as-is.
    """
    parsed = parse_timestamp(value)
    if parsed.tzinfo is None:
        return parsed
    return parsed.astimezone(tz or UTC)


def day_key(value: str | date | datetime, tz: tzinfo | None = None) -> date:
    """Return the local calendar day of a timestamp."""
    return to_local(value, tz).date()


def day_key_iso(value: str | date | datetime, tz: tzinfo | None = None) -> str:
    """Return the local calendar day as ``YYYY-MM-DD``."""
    return day_key(value, tz).isoformat()


def minutes_since_midnight(
    value: str | date | datetime, tz: tzinfo | None = None
) -> int:
    """Return the local time of day in whole minutes."""
    local = to_local(value, tz)
    return local.hour * MINUTES_PER_HOUR + local.minute


def format_hhmm(minutes: int) -> str:
    """Format minutes since midnight as ``HH:MM``; negative means unknown."""
    if minutes < 0:
        return "--:--"
    hours, mins = divmod(minutes, MINUTES_PER_HOUR)
    return f"{hours:02d}:{mins:02d}"


def today(tz: tzinfo | None = None) -> date:
    """Return the current calendar date in ``tz``."""
    return datetime.now(tz=tz or UTC).date()


def window_start(reference: date, days: int) -> date:
    """Return the first day of a ``days``-long window ending at ``reference``."""
    return reference - timedelta(days=days - 1)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield each calendar day from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def bucket_index(value: str | date | datetime, tz: tzinfo | None = None) -> int:
    """Return the time-of-day bucket a timestamp falls into."""
    hour = to_local(value, tz).hour
    for index, limit in enumerate(BUCKET_HOUR_LIMITS):
        if hour < limit:
            return index
    return len(BUCKET_HOUR_LIMITS) - 1
