"""Tests for unit conversion."""

import pytest

from intake_metrics.services.units import convert_supplement, convert_water


def test_convert_water_between_units() -> None:
    assert convert_water(1, "oz", "ml") == pytest.approx(29.5735)
    assert convert_water(29.5735, "ml", "oz") == pytest.approx(1)
    assert convert_water(12, "oz", "oz") == 12


def test_convert_supplement_between_units() -> None:
    assert convert_supplement(5, "g", "mg") == pytest.approx(5000)
    assert convert_supplement(2500, "mg", "g") == pytest.approx(2.5)


def test_unknown_unit_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown water unit"):
        convert_water(1, "cup", "ml")
