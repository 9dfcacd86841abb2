"""
Unit graph built on NetworkX.

Architecture:
- Every unit is a NetworkX node keyed by its stable integer index (the order in
  which it was registered). The short unit id maps to that index.
- Every relation is a parallel edge in a MultiDiGraph carrying ``factor``,
  ``inverted`` and a monotonically increasing ``seq`` so that relations can be
  walked in insertion order even when two units are related more than once.
- Defining a relation between A and B always stores two edges, A->B as declared
  and B->A as its reverse.
"""
import logging
import math
from typing import Dict, Iterator, List, Optional, Tuple

import networkx as nx

from ..exceptions import InvalidFactorError, UnknownUnitError, ZeroFactorError
from ..schema.graph import Relation, UnitInfo

logger = logging.getLogger(__name__)


class UnitGraph:
    """
    Directed graph of units and the conversion relations between them.

    Units are never removed. Relations are ordered per source unit; the most
    recently added relation is returned first by ``relations()``, which is the
    order the conversion search explores them in.
    """

    def __init__(self):
        self.graph = nx.MultiDiGraph()
        # Mapping: unit id -> node index
        self.index: Dict[str, int] = {}
        self._next_seq = 0
        # Mapping: node index -> relations in traversal order
        self._relations: Dict[int, List[Relation]] = {}

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def __contains__(self, unit_id: str) -> bool:
        return unit_id in self.index

    def add_node(self, unit_id: str, long_name: str) -> bool:
        """
        Register a unit.

        Args:
            unit_id: Short identifier, matched exactly
            long_name: Descriptive name

        Returns:
            True if the unit was added, False if it was already defined
        """
        if unit_id in self.index:
            logger.warning("unit %s is already defined", unit_id)
            return False

        node_index = self.graph.number_of_nodes()
        self.graph.add_node(node_index, unit_id=unit_id, long_name=long_name)
        self.index[unit_id] = node_index
        logger.debug("defined unit %s (%s) at index %d", unit_id, long_name, node_index)
        return True

    def add_relation(self, from_id: str, factor: float, to_id: str, inverted: bool = False):
        """
        Define a conversion between two registered units.

        A linear relation states ``to = factor * from``; an inverted one states
        ``to = factor / from``. The reverse edge is derived from it.

        Args:
            from_id: Source unit id
            factor: Nonzero conversion factor
            to_id: Target unit id
            inverted: Whether the relation is reciprocal

        Raises:
            ZeroFactorError: if factor is zero
            InvalidFactorError: if factor or its reverse is infinite or NaN
            UnknownUnitError: if either unit is not defined
        """
        if factor == 0.0:
            raise ZeroFactorError(from_id, to_id)
        if not math.isfinite(factor):
            raise InvalidFactorError(from_id, to_id, factor)

        source = self._require(from_id)
        target = self._require(to_id)

        reverse_factor = factor if inverted else 1.0 / factor
        # subnormal factors overflow when reciprocated
        if not math.isfinite(reverse_factor):
            raise InvalidFactorError(to_id, from_id, reverse_factor)
        self._add_edge(source, target, factor, inverted)
        self._add_edge(target, source, reverse_factor, inverted)
        logger.debug(
            "defined relation %s -> %s factor=%r inverted=%s",
            from_id, to_id, factor, inverted,
        )

    def _add_edge(self, source: int, target: int, factor: float, inverted: bool):
        self.graph.add_edge(source, target, factor=factor, inverted=inverted, seq=self._next_seq)
        self._next_seq += 1
        self._relations.pop(source, None)

    def _require(self, unit_id: str) -> int:
        node_index = self.index.get(unit_id)
        if node_index is None:
            raise UnknownUnitError(unit_id)
        return node_index

    def find(self, unit_id: str) -> Optional[UnitInfo]:
        """
        Look up a unit by id.

        Returns:
            The unit, or None if it is not defined
        """
        node_index = self.index.get(unit_id)
        if node_index is None:
            return None
        return self.node(node_index)

    def node(self, node_index: int) -> UnitInfo:
        """Return the unit stored at an index."""
        data = self.graph.nodes[node_index]
        return UnitInfo(index=node_index, id=data["unit_id"], long_name=data["long_name"])

    def unit_id(self, node_index: int) -> str:
        return self.graph.nodes[node_index]["unit_id"]

    def relations(self, node_index: int) -> List[Relation]:
        """
        Outgoing relations of a unit, most recently defined first.

        Args:
            node_index: Index of the source unit

        Returns:
            List of relations in traversal order. The list is cached until a
            relation is added to the unit and must not be modified.
        """
        cached = self._relations.get(node_index)
        if cached is not None:
            return cached

        edges = sorted(
            self.graph.out_edges(node_index, data=True),
            key=lambda edge: edge[2]["seq"],
            reverse=True,
        )
        relations = [
            Relation(source=source, target=target, factor=data["factor"], inverted=data["inverted"])
            for source, target, data in edges
        ]
        self._relations[node_index] = relations
        return relations

    def list_nodes(self) -> Iterator[Tuple[str, str]]:
        """Yield (id, long_name) pairs in registration order."""
        for node_index in range(self.graph.number_of_nodes()):
            data = self.graph.nodes[node_index]
            yield data["unit_id"], data["long_name"]

    def connected_units(self, unit_id: str) -> List[str]:
        """
        Units reachable from a unit, including itself, in registration order.

        Raises:
            UnknownUnitError: if the unit is not defined
        """
        node_index = self._require(unit_id)
        reachable = nx.descendants(self.graph, node_index) | {node_index}
        return [self.unit_id(i) for i in sorted(reachable)]

    def get_stats(self) -> Dict[str, int]:
        """
        Get graph statistics.

        Returns:
            Dictionary with unit and relation counts
        """
        return {
            "units": self.graph.number_of_nodes(),
            "relations": self.graph.number_of_edges(),
        }
