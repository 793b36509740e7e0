"""Creatine saturation model.

Saturation approaches 1.0 asymptotically while doses are taken, faster on
loading days (15 g or more), and decays by 3% on each day without a dose.
The input must be a contiguous daily series; missing days are not decayed.
"""

from collections.abc import Sequence
from itertools import accumulate

from intake_metrics.domain.intake import DayAmount
from intake_metrics.services.numeric import safe01, safe_amount

LOADING_DOSE_G = 15.0
LOADING_RATE = 0.25
MAINTENANCE_RATE = 0.15
LOADING_DOSE_CAP_G = 20.0
MAINTENANCE_DOSE_CAP_G = 5.0
DAILY_RETENTION = 0.97
FIRST_DAY_CAP = 0.3
FIRST_DAY_PER_GRAM = 0.06

PROJECTION_TARGET = 0.90
PROJECTION_DAILY_DECAY = 0.005
PROJECTION_MAX_DAYS = 30


def is_loading_dose(dose: float) -> bool:
    """Return whether a daily dose counts as a loading-phase dose."""
    return dose >= LOADING_DOSE_G


def _absorb(previous: float, dose: float) -> float:
    if is_loading_dose(dose):
        rate = LOADING_RATE
        effective = min(dose, LOADING_DOSE_CAP_G) / LOADING_DOSE_CAP_G
    else:
        rate = MAINTENANCE_RATE
        effective = min(dose, MAINTENANCE_DOSE_CAP_G) / MAINTENANCE_DOSE_CAP_G
    return min(previous + rate * effective * (1 - previous), 1.0)


def _first_day(dose: float) -> float:
    if dose > 0:
        return min(FIRST_DAY_CAP, dose * FIRST_DAY_PER_GRAM)
    return 0.0


def _next_day(previous: float, dose: float) -> float:
    if dose > 0:
        return _absorb(previous, dose)
    return previous * DAILY_RETENTION


def creatine_saturation(entries: Sequence[DayAmount]) -> list[float]:
    """Fold a dense daily dose series into saturation fractions."""
    if not entries:
        return []
    doses = [safe_amount(entry.amount) for entry in entries]
    return list(accumulate(doses[1:], _next_day, initial=_first_day(doses[0])))


def days_till_saturated(
    current_saturation: float, planned_daily_dose: float = 5.0
) -> int:
    """Project how many days of a fixed daily dose reach 90% saturation."""
    dose = safe_amount(planned_daily_dose)
    saturation = safe01(current_saturation)
    days = 0
    while saturation < PROJECTION_TARGET and days < PROJECTION_MAX_DAYS:
        days += 1
        saturation *= 1 - PROJECTION_DAILY_DECAY
        if dose > 0:
            saturation = _absorb(saturation, dose)
    return min(days, PROJECTION_MAX_DAYS)
