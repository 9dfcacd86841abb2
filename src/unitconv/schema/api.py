"""
Request and response models for conversions.
"""
from typing import List

from pydantic import BaseModel


class ConversionRequest(BaseModel):
    """Request model for a single conversion."""
    value: float
    from_unit: str
    to_unit: str


class ConversionResult(BaseModel):
    """Response model for a conversion."""
    value: float
    from_unit: str
    to_unit: str
    converted_value: float
    path: List[str]
