"""Pydantic schemas for the converter API.

Response models for:
- Conversions (success and error payloads)
- Supported units
"""

from pydantic import BaseModel, Field


# --- Conversion ---

class ConvertResponse(BaseModel):
    initNum: float
    initUnit: str
    returnNum: float
    returnUnit: str
    string: str


class ConvertErrorResponse(BaseModel):
    error: str


# --- Units ---

class UnitOut(BaseModel):
    unit: str
    name: str
    return_unit: str
    factor: float = Field(..., gt=0)


class UnitListResponse(BaseModel):
    items: list[UnitOut]
