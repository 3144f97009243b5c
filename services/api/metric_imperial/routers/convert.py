"""
Router for metric/imperial conversions.
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, Query, Request

from ..rate_limit import limiter
from ..schemas import ConvertErrorResponse, ConvertResponse, UnitListResponse, UnitOut
from ..services.measurement import ConversionError, convert_measurement
from ..services.unit_conversion import CONVERSION_FACTORS, Unit, reciprocal_unit, spell_out
from ..settings import settings

logger = logging.getLogger("metric_imperial.convert")

router = APIRouter()

NO_INPUT_ERROR = "No input provided"
SERVER_ERROR = "Server error"


@router.get("/convert", response_model=Union[ConvertResponse, ConvertErrorResponse])
@limiter.limit(settings.rate_limit)
def convert_units(
    request: Request,  # Required for rate limiter
    raw: Optional[str] = Query(None, alias="input", description="Measurement such as 4gal, 1/2km or kg"),
):
    """
    Convert a measurement to its paired unit.

    Every outcome is a 200 carrying either the conversion or an `error`
    message ("invalid number", "invalid unit", "invalid number and unit").
    """
    if not raw:
        return ConvertErrorResponse(error=NO_INPUT_ERROR)

    try:
        outcome = convert_measurement(raw)
    except Exception as e:
        logger.error(f"Conversion failed for input {raw!r}: {e}", exc_info=True)
        return ConvertErrorResponse(error=SERVER_ERROR)

    if isinstance(outcome, ConversionError):
        logger.debug(f"Rejected input {raw!r}: {outcome.message}")
        return ConvertErrorResponse(**outcome.to_dict())

    logger.info(f"Converted {raw!r}: {outcome.description}")
    return ConvertResponse(**outcome.to_dict())


@router.get("/units", response_model=UnitListResponse)
def list_units():
    """List the supported units and what each converts to."""
    items = [
        UnitOut(
            unit=unit.value,
            name=spell_out(unit),
            return_unit=reciprocal_unit(unit).value,
            factor=CONVERSION_FACTORS[unit],
        )
        for unit in Unit
    ]
    return {"items": items}
