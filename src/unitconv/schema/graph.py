"""
Data models for the unit graph.
"""
from pydantic import BaseModel


class UnitInfo(BaseModel):
    """Represents a unit node."""
    index: int
    id: str
    long_name: str


class Relation(BaseModel):
    """Represents a directed conversion from one unit to another."""
    source: int
    target: int
    factor: float
    inverted: bool = False

    def apply(self, value: float) -> float:
        """Transform a value expressed in the source unit into the target unit."""
        if self.inverted:
            return self.factor / value
        return self.factor * value
