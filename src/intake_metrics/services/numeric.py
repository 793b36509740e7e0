"""Normalization helpers for untrusted numeric input."""

import math


def safe_amount(value: float | None) -> float:
    """Return a usable non-negative amount.

    Missing or non-finite values count as zero. Negative amounts are clamped to
    zero so that a bad log can never drain a saturation series.
    """
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def safe01(value: float) -> float:
    """Clamp a fraction to [0, 1], treating non-finite values as zero."""
    if not math.isfinite(value):
        return 0.0
    if value < 0:
        return 0.0
    if value > 1:
        return 1.0
    return value
