"""
Depth-first conversion between units of a unit graph.
"""
import logging
from typing import List, Optional, Tuple

from ..exceptions import (
    DivisionByZeroError,
    NoConversionPathError,
    SearchDepthExceededError,
    UnknownUnitError,
)
from ..graph import UnitGraph
from ..schema.api import ConversionRequest, ConversionResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_SEARCH_DEPTH = 10000


class PathConverter:
    """
    Converts values by searching the unit graph for a chain of relations.

    The search is a depth-first walk from the source unit that follows the
    most recently defined relation of each unit first and never revisits a
    unit within one conversion. The first path that reaches the target
    determines the result, even if a shorter one exists.
    """

    def __init__(self, graph: UnitGraph, config=None):
        """
        Initialize converter.

        Args:
            graph: Fully built unit graph
            config: Optional configuration object providing max_search_depth
        """
        self.graph = graph
        self.max_depth = (
            config.max_search_depth if config is not None else DEFAULT_MAX_SEARCH_DEPTH
        )

    def convert(self, value: float, from_id: str, to_id: str) -> float:
        """
        Convert a value from one unit to another.

        Args:
            value: Value expressed in the source unit
            from_id: Source unit id
            to_id: Target unit id

        Returns:
            Value expressed in the target unit

        Raises:
            UnknownUnitError: if either unit is not defined
            NoConversionPathError: if the units are not connected
            DivisionByZeroError: if an inverted relation is reached with value 0
        """
        converted, _ = self.find_path(value, from_id, to_id)
        return converted

    def convert_request(self, request: ConversionRequest) -> ConversionResult:
        """Convert a structured request, reporting the path that was used."""
        converted, path = self.find_path(request.value, request.from_unit, request.to_unit)
        return ConversionResult(
            value=request.value,
            from_unit=request.from_unit,
            to_unit=request.to_unit,
            converted_value=converted,
            path=path,
        )

    def find_path(self, value: float, from_id: str, to_id: str) -> Tuple[float, List[str]]:
        """
        Search for the first conversion path and apply it.

        Returns:
            Tuple of (converted value, unit ids along the path)
        """
        source = self._resolve(from_id)
        target = self._resolve(to_id)

        if source == target:
            return value, [from_id]

        # Each frame is (unit index, value in that unit, pending relations)
        visited = {source}
        stack = [(source, value, iter(self.graph.relations(source)))]

        while stack:
            node_index, current, pending = stack[-1]
            relation = next(pending, None)
            if relation is None:
                stack.pop()
                continue
            if relation.target in visited:
                continue

            if relation.inverted and current == 0:
                raise DivisionByZeroError(
                    self.graph.unit_id(node_index), self.graph.unit_id(relation.target)
                )
            next_value = relation.apply(current)

            if relation.target == target:
                path = [self.graph.unit_id(frame[0]) for frame in stack] + [to_id]
                logger.debug("converted %r %s -> %r %s via %s", value, from_id, next_value, to_id, path)
                return next_value, path

            visited.add(relation.target)
            if len(stack) >= self.max_depth:
                raise SearchDepthExceededError(self.max_depth)
            stack.append((relation.target, next_value, iter(self.graph.relations(relation.target))))

        raise NoConversionPathError(from_id, to_id)

    def _resolve(self, unit_id: str) -> int:
        unit = self.graph.find(unit_id)
        if unit is None:
            raise UnknownUnitError(unit_id)
        return unit.index


def convert(graph: UnitGraph, value: float, from_id: str, to_id: str, config: Optional[object] = None) -> float:
    """Convert a value between two units of a graph."""
    return PathConverter(graph, config).convert(value, from_id, to_id)
