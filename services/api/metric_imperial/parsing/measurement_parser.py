import math
import re
from enum import Enum
from typing import Union

from ..services.unit_conversion import Unit


class ParseError(str, Enum):
    """Failure markers returned by the parsers."""
    INVALID_NUMBER = "invalid number"
    INVALID_UNIT = "invalid unit"


# Optional sign, digits with an optional fractional part, or a bare ".5".
NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$", re.ASCII)

# Characters that belong to the numeric grammar.
NUMERIC_CHARS_RE = re.compile(r"[\d./]", re.ASCII)

DEFAULT_QUANTITY = 1.0

LITER_TOKENS = {"l", "liter", "liters"}

UNIT_TOKENS = {
    unit.value.lower(): unit
    for unit in Unit
    if unit is not Unit.L
}


def find_unit_boundary(raw: str) -> int:
    """Index of the first ASCII letter, or len(raw) if there is none."""
    for i, ch in enumerate(raw):
        if ch.isascii() and ch.isalpha():
            return i
    return len(raw)


def _parse_decimal(text: str) -> Union[float, None]:
    text = text.strip()
    if not NUMBER_RE.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def parse_quantity(raw: str) -> Union[float, ParseError]:
    """
    Parse the numeric prefix of a measurement.

    Everything before the unit boundary is the candidate. An empty
    candidate means the caller omitted the number and gets 1. A single
    "/" makes it a fraction; more than one is rejected.
    """
    boundary = find_unit_boundary(raw)
    candidate = raw[:boundary].strip()

    # Digits after the first letter ("3a2b") mean the number was not
    # fully consumed before the unit began.
    if NUMERIC_CHARS_RE.search(raw[boundary:]):
        return ParseError.INVALID_NUMBER

    if not candidate:
        return DEFAULT_QUANTITY

    slashes = candidate.count("/")
    if slashes > 1:
        return ParseError.INVALID_NUMBER

    if slashes == 1:
        num_text, den_text = candidate.split("/")
        numerator = _parse_decimal(num_text)
        denominator = _parse_decimal(den_text)
        if numerator is None or denominator is None or denominator == 0:
            return ParseError.INVALID_NUMBER
        value = numerator / denominator
        if not math.isfinite(value):
            return ParseError.INVALID_NUMBER
        return value

    value = _parse_decimal(candidate)
    if value is None:
        return ParseError.INVALID_NUMBER
    return value


def parse_unit(raw: str) -> Union[Unit, ParseError]:
    """Parse the unit suffix (first letter onward) into a canonical Unit."""
    boundary = find_unit_boundary(raw)
    if boundary == len(raw):
        return ParseError.INVALID_UNIT

    token = raw[boundary:].strip().lower()

    if token in LITER_TOKENS:
        return Unit.L

    return UNIT_TOKENS.get(token, ParseError.INVALID_UNIT)
