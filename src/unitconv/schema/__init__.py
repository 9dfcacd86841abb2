"""
Data models for unitconv.
"""
from .api import ConversionRequest, ConversionResult
from .graph import Relation, UnitInfo
from .records import DefineRelation, DefineUnit

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "DefineRelation",
    "DefineUnit",
    "Relation",
    "UnitInfo",
]
