"""Hydration saturation model parameterized by the user's body profile."""

import math
from collections.abc import Sequence
from datetime import date
from itertools import accumulate

from intake_metrics.domain.intake import DayAmount, UserProfile
from intake_metrics.services.numeric import safe01, safe_amount

OZ_PER_LB = 0.6
OZ_PER_INCH_OVER_BASE = 0.4
BASE_HEIGHT_INCHES = 60
MALE_ADJUSTMENT_OZ = 10
MAX_INTAKE_RATIO = 1.5
DAILY_RETENTION = 0.75
OPTIMAL_HYDRATION = 0.95
PROJECTION_MAX_DAYS = 14


def daily_water_requirement(profile: UserProfile) -> float:
    """Return the personalized daily water requirement in ounces."""
    base = profile.weight_lb * OZ_PER_LB
    height_adjustment = max(0, profile.height_inches - BASE_HEIGHT_INCHES)
    sex_adjustment = MALE_ADJUSTMENT_OZ if profile.sex == "male" else 0
    return base + height_adjustment * OZ_PER_INCH_OVER_BASE + sex_adjustment


def _ratio(amount: float, requirement: float, cap: float) -> float:
    if not math.isfinite(requirement) or requirement <= 0:
        return 0.0
    return min(cap, safe_amount(amount) / requirement)


def hydration_saturation(
    entries: Sequence[DayAmount], profile: UserProfile
) -> list[float]:
    """Fold daily water intake into saturation fractions.

    Entries must be ordered by day but may skip days; each elapsed day decays
    the carried saturation by 25% before the next intake is applied.
    """
    if not entries:
        return []
    requirement = daily_water_requirement(profile)

    def step(state: tuple[float, date], entry: DayAmount) -> tuple[float, date]:
        previous, previous_day = state
        gap_days = max(0, (entry.day - previous_day).days)
        decayed = previous * DAILY_RETENTION**gap_days
        ratio = _ratio(entry.amount, requirement, MAX_INTAKE_RATIO)
        return min(1.0, decayed + ratio * (1 - decayed)), entry.day

    first = entries[0]
    initial = (
        min(1.0, _ratio(first.amount, requirement, MAX_INTAKE_RATIO)),
        first.day,
    )
    states = accumulate(entries[1:], step, initial=initial)
    return [saturation for saturation, _ in states]


def days_till_optimal_hydration(
    current_saturation: float, planned_daily_intake: float, profile: UserProfile
) -> int:
    """Project how many days of a fixed daily intake reach 95% saturation."""
    ratio = _ratio(planned_daily_intake, daily_water_requirement(profile), 1.0)
    saturation = safe01(current_saturation)
    days = 0
    while saturation < OPTIMAL_HYDRATION and days < PROJECTION_MAX_DAYS:
        days += 1
        saturation *= DAILY_RETENTION
        saturation = min(1.0, saturation + ratio * (1 - saturation))
    return min(days, PROJECTION_MAX_DAYS)
