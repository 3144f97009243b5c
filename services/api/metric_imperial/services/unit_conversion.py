"""
Unit Conversion Service.

Fixed imperial <-> metric pairs (gal/L, mi/km, lbs/kg) with one
multiplicative factor per unit.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum
from typing import Dict

# --- Types ---

class Unit(str, Enum):
    GAL = "gal"
    L = "L"
    MI = "mi"
    KM = "km"
    LBS = "lbs"
    KG = "kg"

    def __str__(self) -> str:
        return self.value


RETURN_PLACES = 5

# --- Data Tables ---

# Imperial unit -> factor to its metric pair.
# The metric side is derived as the exact reciprocal below.
IMPERIAL_FACTORS: Dict[Unit, float] = {
    Unit.GAL: 3.78541,   # gallons -> liters
    Unit.MI: 1.60934,    # miles -> kilometers
    Unit.LBS: 0.453592,  # pounds -> kilograms
}

UNIT_PAIRS: Dict[Unit, Unit] = {
    Unit.GAL: Unit.L,
    Unit.L: Unit.GAL,
    Unit.MI: Unit.KM,
    Unit.KM: Unit.MI,
    Unit.LBS: Unit.KG,
    Unit.KG: Unit.LBS,
}

CONVERSION_FACTORS: Dict[Unit, float] = {}
for _imperial, _factor in IMPERIAL_FACTORS.items():
    CONVERSION_FACTORS[_imperial] = _factor
    CONVERSION_FACTORS[UNIT_PAIRS[_imperial]] = 1 / _factor

SPELLINGS: Dict[Unit, str] = {
    Unit.GAL: "gallons",
    Unit.L: "liters",
    Unit.MI: "miles",
    Unit.KM: "kilometers",
    Unit.LBS: "pounds",
    Unit.KG: "kilograms",
}

# Every table must cover the whole enum.
for _table in (UNIT_PAIRS, CONVERSION_FACTORS, SPELLINGS):
    _missing = set(Unit) - set(_table)
    if _missing:
        raise RuntimeError(f"Unit table is missing entries for: {sorted(u.value for u in _missing)}")

# --- Core Functions ---

def round_quantity(qty: float, places: int = RETURN_PLACES) -> float:
    """Round half away from zero to `places` decimals."""
    if not math.isfinite(qty):
        return qty
    value = Decimal(repr(qty))
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the decimals
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return float(value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def convert(qty: float, unit: Unit) -> float:
    """Convert `qty` of `unit` into its paired unit, rounded to 5 places."""
    result = round_quantity(qty * CONVERSION_FACTORS[unit])
    # -0.000001 rounds to -0.0
    if result == 0:
        return 0.0
    return result


def reciprocal_unit(unit: Unit) -> Unit:
    return UNIT_PAIRS[unit]


def spell_out(unit: Unit) -> str:
    return SPELLINGS[unit]


def format_quantity(qty: float) -> str:
    """Natural decimal rendering: 4.0 -> "4", 1e-05 -> "0.00001", 1e+16 -> "10000000000000000"."""
    text = format(Decimal(repr(float(qty))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def describe(init_qty: float, init_unit: Unit, ret_qty: float, ret_unit: Unit) -> str:
    return (
        f"{format_quantity(init_qty)} {spell_out(init_unit)} converts to "
        f"{format_quantity(ret_qty)} {spell_out(ret_unit)}"
    )
