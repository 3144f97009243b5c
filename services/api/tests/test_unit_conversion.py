"""
Tests for conversion factors, pairing and formatting.
"""

import pytest
from metric_imperial.services.unit_conversion import (
    CONVERSION_FACTORS,
    Unit,
    convert,
    describe,
    format_quantity,
    reciprocal_unit,
    round_quantity,
    spell_out,
)


def test_pairing_is_an_involution():
    for unit in Unit:
        assert reciprocal_unit(unit) is not unit
        assert reciprocal_unit(reciprocal_unit(unit)) is unit


def test_factors_are_exact_reciprocals():
    for unit in Unit:
        pair = reciprocal_unit(unit)
        assert CONVERSION_FACTORS[unit] * CONVERSION_FACTORS[pair] == pytest.approx(1.0, rel=1e-15)


@pytest.mark.parametrize("qty", [0.5, 1, 4, 3.1, 123.456, 10000])
def test_round_trip_stays_close(qty):
    for unit in Unit:
        there = convert(qty, unit)
        back = convert(there, reciprocal_unit(unit))
        assert back == pytest.approx(qty, abs=1e-4)


def test_known_conversions():
    assert convert(4, Unit.GAL) == 15.14164
    assert convert(1, Unit.GAL) == 3.78541
    assert convert(10, Unit.L) == 2.64172
    assert convert(3.1, Unit.MI) == 4.98895
    assert convert(0.5, Unit.KM) == 0.31069
    assert convert(1, Unit.LBS) == 0.45359
    assert convert(1, Unit.KG) == 2.20462


def test_rounding_is_half_away_from_zero():
    assert round_quantity(0.000005) == 0.00001
    assert round_quantity(-0.000005) == -0.00001
    # Banker's rounding would give 2.5
    assert round_quantity(2.500005) == 2.50001
    assert round_quantity(1.234564) == 1.23456


def test_rounding_large_and_non_finite_values():
    assert round_quantity(1e30) == 1e30
    assert round_quantity(float("inf")) == float("inf")


def test_spell_out_is_always_plural():
    assert [spell_out(u) for u in Unit] == [
        "gallons", "liters", "miles", "kilometers", "pounds", "kilograms",
    ]


def test_format_quantity():
    assert format_quantity(4.0) == "4"
    assert format_quantity(0.5) == "0.5"
    assert format_quantity(15.14164) == "15.14164"
    assert format_quantity(-0.0) == "0"


def test_describe():
    assert describe(4.0, Unit.GAL, 15.14164, Unit.L) == "4 gallons converts to 15.14164 liters"
    assert describe(1, Unit.KG, 2.20462, Unit.LBS) == "1 kilograms converts to 2.20462 pounds"


def test_format_quantity_avoids_scientific_notation():
    assert format_quantity(1e-05) == "0.00001"
    assert format_quantity(4e-05) == "0.00004"
    assert format_quantity(1e16) == "10000000000000000"
    assert format_quantity(1.60934e16) == "16093400000000000"


def test_convert_never_returns_negative_zero():
    result = convert(-0.000001, Unit.GAL)
    assert result == 0
    assert str(result) == "0.0"
