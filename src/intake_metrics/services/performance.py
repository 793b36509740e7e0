"""Composite performance score from creatine and hydration saturation."""

import math
from collections.abc import Sequence

from intake_metrics.domain.intake import PerformanceOptions, PerformanceWeights
from intake_metrics.services.numeric import safe01

GEOMETRIC_FLOOR = 1e-6


def normalize_weights(weights: PerformanceWeights) -> PerformanceWeights:
    """Scale weights to sum to one, falling back to equal weights."""
    creatine = weights.creatine if math.isfinite(weights.creatine) else 0.0
    hydration = weights.hydration if math.isfinite(weights.hydration) else 0.0
    total = creatine + hydration
    if total <= 0:
        return PerformanceWeights(creatine=0.5, hydration=0.5)
    return PerformanceWeights(creatine=creatine / total, hydration=hydration / total)


def performance_metric(
    creatine: Sequence[float],
    hydration: Sequence[float],
    options: PerformanceOptions | None = None,
) -> list[float]:
    """Blend two saturation series into one score per day.

    When the series differ in length only the trailing overlap is used, so the
    most recent days line up.
    """
    resolved = options or PerformanceOptions()
    weights = normalize_weights(resolved.weights)
    if not creatine or not hydration:
        return []

    size = min(len(creatine), len(hydration))
    aligned_creatine = creatine[len(creatine) - size :]
    aligned_hydration = hydration[len(hydration) - size :]

    scores = []
    for c_value, h_value in zip(aligned_creatine, aligned_hydration, strict=True):
        c_value = safe01(c_value)
        h_value = safe01(h_value)
        if resolved.mode == "geometric":
            score = (
                max(c_value, GEOMETRIC_FLOOR) ** weights.creatine
                * max(h_value, GEOMETRIC_FLOOR) ** weights.hydration
            )
        else:
            score = weights.creatine * c_value + weights.hydration * h_value
        scores.append(safe01(score) if resolved.clamp else score)
    return scores
