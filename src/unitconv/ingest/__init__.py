"""
Definition loading and graph construction.
"""
from .definitions import (
    load_definitions,
    locate_definition_file,
    parse_line,
    read_definitions,
)
from .graph_builder import GraphBuilder, load_graph

__all__ = [
    "GraphBuilder",
    "load_definitions",
    "load_graph",
    "locate_definition_file",
    "parse_line",
    "read_definitions",
]
