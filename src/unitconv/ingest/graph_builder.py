"""
Graph construction from definition records.
"""
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from ..exceptions import DefinitionSyntaxError
from ..graph import UnitGraph
from ..schema.records import DefineRelation, DefineUnit
from .definitions import Record, load_definitions

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Applies definition records to a unit graph."""

    def __init__(self, graph: Optional[UnitGraph] = None):
        """
        Initialize graph builder.

        Args:
            graph: Graph to populate; a new one is created if omitted
        """
        self.graph = graph if graph is not None else UnitGraph()
        self.units_defined = 0
        self.duplicates_skipped = 0
        self.relations_defined = 0

    def apply(self, record: Record):
        """
        Apply one record to the graph.

        Raises:
            DefinitionSyntaxError: for an unrecognized record type
            ZeroFactorError: for a relation with a zero factor
            UnknownUnitError: for a relation between undefined units
        """
        if isinstance(record, DefineUnit):
            if self.graph.add_node(record.id, record.long_name):
                self.units_defined += 1
            else:
                self.duplicates_skipped += 1
        elif isinstance(record, DefineRelation):
            self.graph.add_relation(record.from_id, record.factor, record.to_id, record.inverted)
            self.relations_defined += 1
        else:
            raise DefinitionSyntaxError(f"unrecognized record: {record!r}")

    def build(self, records: Iterable[Record]) -> Dict[str, int]:
        """
        Apply a stream of records in order.

        Args:
            records: Definition records

        Returns:
            Dictionary with build statistics
        """
        for record in records:
            self.apply(record)

        stats = {
            "units_defined": self.units_defined,
            "duplicates_skipped": self.duplicates_skipped,
            "relations_defined": self.relations_defined,
            "graph_units": self.graph.get_stats()["units"],
            "graph_relations": self.graph.get_stats()["relations"],
        }
        logger.debug("graph built: %s", stats)
        return stats


def load_graph(path: Path) -> UnitGraph:
    """Read a definition file and build its unit graph."""
    builder = GraphBuilder()
    builder.build(load_definitions(path))
    return builder.graph
