"""
Measurement conversion pipeline.

Parses a raw string such as "4gal" or "1/2km", classifies parse failures
and converts valid measurements to the paired unit.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..parsing.measurement_parser import ParseError, parse_quantity, parse_unit
from .unit_conversion import Unit, convert, describe, reciprocal_unit


class ErrorKind(str, Enum):
    INVALID_NUMBER = "invalid number"
    INVALID_UNIT = "invalid unit"
    INVALID_NUMBER_AND_UNIT = "invalid number and unit"


@dataclass(frozen=True)
class ConversionResult:
    init_num: float
    init_unit: Unit
    return_num: float
    return_unit: Unit
    description: str

    def to_dict(self):
        return {
            "initNum": self.init_num,
            "initUnit": self.init_unit.value,
            "returnNum": self.return_num,
            "returnUnit": self.return_unit.value,
            "string": self.description,
        }


@dataclass(frozen=True)
class ConversionError:
    kind: ErrorKind

    @property
    def message(self) -> str:
        return self.kind.value

    def to_dict(self):
        return {"error": self.message}


def classify_errors(
    quantity: Union[float, ParseError],
    unit: Union[Unit, ParseError],
) -> Optional[ErrorKind]:
    """Combine the two parse outcomes. Returns None when both are valid."""
    bad_number = quantity is ParseError.INVALID_NUMBER
    bad_unit = unit is ParseError.INVALID_UNIT

    if bad_number and bad_unit:
        return ErrorKind.INVALID_NUMBER_AND_UNIT
    if bad_number:
        return ErrorKind.INVALID_NUMBER
    if bad_unit:
        return ErrorKind.INVALID_UNIT
    return None


def convert_measurement(raw: str) -> Union[ConversionResult, ConversionError]:
    quantity = parse_quantity(raw)
    unit = parse_unit(raw)

    error = classify_errors(quantity, unit)
    if error is not None:
        return ConversionError(error)

    return_num = convert(quantity, unit)
    # 1e308 gal is a valid number but has no finite conversion
    if not math.isfinite(return_num):
        return ConversionError(ErrorKind.INVALID_NUMBER)

    return_unit = reciprocal_unit(unit)

    return ConversionResult(
        init_num=quantity,
        init_unit=unit,
        return_num=return_num,
        return_unit=return_unit,
        description=describe(quantity, unit, return_num, return_unit),
    )
