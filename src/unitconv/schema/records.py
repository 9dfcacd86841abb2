"""
Definition records produced by the definition file reader.
"""
from pydantic import BaseModel


class DefineUnit(BaseModel):
    """Declares a unit node."""
    id: str
    long_name: str


class DefineRelation(BaseModel):
    """Declares a conversion between two units: to = factor * from (or factor / from)."""
    from_id: str
    factor: float
    to_id: str
    inverted: bool = False
