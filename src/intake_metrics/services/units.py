"""Unit conversion for water and supplement amounts."""

from typing import Literal

WaterUnit = Literal["oz", "ml"]
SupplementUnit = Literal["g", "mg"]

ML_PER_OZ = 29.5735
MG_PER_G = 1000.0

_WATER_TO_ML = {"oz": ML_PER_OZ, "ml": 1.0}
_SUPPLEMENT_TO_MG = {"g": MG_PER_G, "mg": 1.0}


def convert_water(amount: float, from_unit: str, to_unit: str) -> float:
    """Convert a water volume between ounces and millilitres."""
    return _convert(amount, from_unit, to_unit, _WATER_TO_ML, "water")


def convert_supplement(amount: float, from_unit: str, to_unit: str) -> float:
    """Convert a supplement mass between grams and milligrams."""
    return _convert(amount, from_unit, to_unit, _SUPPLEMENT_TO_MG, "supplement")


def _convert(
    amount: float,
    from_unit: str,
    to_unit: str,
    factors: dict[str, float],
    kind: str,
) -> float:
    for unit in (from_unit, to_unit):
        if unit not in factors:
            raise ValueError(f"Unknown {kind} unit: {unit}")
    if from_unit == to_unit:
        return amount
    return amount * factors[from_unit] / factors[to_unit]
