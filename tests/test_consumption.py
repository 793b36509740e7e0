"""Tests for consumption metrics."""

from datetime import date
from zoneinfo import ZoneInfo

import pytest

from intake_metrics.domain.intake import IntakeLog, TotalIntakeResult
from intake_metrics.services.consumption import (
    all_metrics,
    average_dose_time,
    average_dose_time_window,
    creatine_adherence_rate,
    creatine_streak,
    hydration_adherence_rate,
    hydration_streak,
    is_goal_met,
    total_intake,
)


def _log(timestamp: str, amount: float = 5) -> IntakeLog:
    return IntakeLog(consumed_at=timestamp, amount=amount)


def test_average_dose_time_prefers_consistent_doses() -> None:
    logs = [
        _log("2024-03-01T08:00:00"),
        _log("2024-03-01T20:00:00"),
        _log("2024-03-02T21:00:00"),
        _log("2024-03-02T09:00:00"),
    ]

    result = average_dose_time(logs)

    assert result.minutes_since_midnight == 510
    assert result.hhmm == "08:30"
    assert result.days_counted == 2


def test_average_dose_time_ties_resolve_to_first_log() -> None:
    first_day = _log("2024-03-01T08:00:00")
    early = _log("2024-03-02T07:30:00")
    late = _log("2024-03-02T08:30:00")

    assert average_dose_time([first_day, early, late]).hhmm == "07:45"
    assert average_dose_time([first_day, late, early]).hhmm == "08:15"


def test_average_dose_time_rounds_half_minutes_up() -> None:
    logs = [_log("2024-03-01T08:00:00"), _log("2024-03-02T08:01:00")]

    assert average_dose_time(logs).minutes_since_midnight == 481


def test_average_dose_time_without_logs() -> None:
    result = average_dose_time([])

    assert result.minutes_since_midnight == -1
    assert result.hhmm == "--:--"
    assert result.days_counted == 0


def test_average_dose_time_uses_local_wall_clock() -> None:
    logs = [_log("2024-03-02T02:00:00Z")]

    utc_result = average_dose_time(logs)
    local_result = average_dose_time(logs, tz=ZoneInfo("America/New_York"))

    assert utc_result.hhmm == "02:00"
    assert local_result.hhmm == "21:00"


def test_average_dose_time_window_filters_old_logs() -> None:
    logs = [_log("2024-03-01T08:00:00"), _log("2024-03-20T10:00:00")]

    result = average_dose_time_window(logs, 10, reference_date=date(2024, 3, 20))

    assert result.hhmm == "10:00"
    assert result.days_counted == 1


def test_average_dose_time_window_without_logs_in_range() -> None:
    logs = [_log("2024-01-01T08:00:00")]

    result = average_dose_time_window(logs, 7, reference_date=date(2024, 3, 20))

    assert result.hhmm == "--:--"


def test_creatine_adherence_over_full_history() -> None:
    logs = [
        _log("2024-03-01T08:00:00"),
        _log("2024-03-02T08:00:00"),
        _log("2024-03-02T18:00:00"),
        _log("2024-03-04T08:00:00"),
    ]

    rate = creatine_adherence_rate(logs, reference_date=date(2024, 3, 4))

    assert rate == pytest.approx(0.75)


def test_creatine_adherence_over_trailing_period() -> None:
    logs = [
        _log("2024-03-01T08:00:00"),
        _log("2024-03-02T08:00:00"),
        _log("2024-03-04T08:00:00"),
    ]

    rate = creatine_adherence_rate(logs, period_days=2, reference_date=date(2024, 3, 4))

    assert rate == pytest.approx(0.5)


def test_creatine_adherence_is_zero_without_logs_or_span() -> None:
    assert creatine_adherence_rate([], reference_date=date(2024, 3, 4)) == 0
    future = [_log("2024-03-10T08:00:00")]
    assert creatine_adherence_rate(future, reference_date=date(2024, 3, 4)) == 0


def test_hydration_adherence(water_logs: list[IntakeLog]) -> None:
    reference = date(2024, 3, 3)

    full = hydration_adherence_rate(water_logs, 64, reference_date=reference)
    week = hydration_adherence_rate(
        water_logs, 64, period_days=7, reference_date=reference
    )

    assert full == pytest.approx(2 / 3)
    assert week == pytest.approx(2 / 7)


def test_hydration_adherence_requires_positive_goal(
    water_logs: list[IntakeLog],
) -> None:
    assert hydration_adherence_rate(water_logs, 0, reference_date=date(2024, 3, 3)) == 0
    assert hydration_adherence_rate([], 64, reference_date=date(2024, 3, 3)) == 0


def test_creatine_streak_counts_back_from_reference() -> None:
    logs = [
        _log("2024-02-28T08:00:00"),
        _log("2024-03-02T08:00:00"),
        _log("2024-03-03T08:00:00"),
        _log("2024-03-04T08:00:00"),
    ]

    assert creatine_streak(logs, reference_date=date(2024, 3, 4)) == 3
    assert creatine_streak(logs, reference_date=date(2024, 3, 5)) == 0
    assert creatine_streak([], reference_date=date(2024, 3, 4)) == 0


def test_hydration_streak(water_logs: list[IntakeLog]) -> None:
    assert hydration_streak(water_logs, 64, reference_date=date(2024, 3, 3)) == 1
    assert hydration_streak(water_logs, 50, reference_date=date(2024, 3, 3)) == 3
    assert hydration_streak(water_logs, 0, reference_date=date(2024, 3, 3)) == 0


def test_total_intake(water_logs: list[IntakeLog]) -> None:
    assert total_intake(water_logs) == TotalIntakeResult(total=184, days=3)
    assert total_intake([]) == TotalIntakeResult(total=0, days=0)


def test_is_goal_met(water_logs: list[IntakeLog]) -> None:
    assert is_goal_met(water_logs, 70, day=date(2024, 3, 1))
    assert not is_goal_met(water_logs, 64, day=date(2024, 3, 2))
    assert not is_goal_met(water_logs, 0, day=date(2024, 3, 1))


def test_all_metrics_bundles_every_metric(water_logs: list[IntakeLog]) -> None:
    creatine_logs = [
        _log("2024-03-01T08:00:00"),
        _log("2024-03-02T09:00:00"),
        _log("2024-03-03T08:30:00"),
    ]

    summary = all_metrics(
        creatine_logs, water_logs, 64, reference_date=date(2024, 3, 3)
    )

    assert summary.average_dose_time.hhmm == "08:30"
    assert summary.average_dose_time_window.days_counted == 3
    assert summary.creatine_adherence == pytest.approx(1.0)
    assert summary.hydration_adherence == pytest.approx(2 / 3)
    assert summary.total_creatine == TotalIntakeResult(total=15, days=3)
    assert summary.total_water == TotalIntakeResult(total=184, days=3)
    assert summary.creatine_streak == 3
    assert summary.hydration_streak == 1
    assert summary == all_metrics(
        creatine_logs, water_logs, 64, reference_date=date(2024, 3, 3)
    )
