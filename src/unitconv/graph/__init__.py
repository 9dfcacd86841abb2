"""
Unit graph implementation using NetworkX.
"""
from .unit_graph import UnitGraph

__all__ = ["UnitGraph"]
