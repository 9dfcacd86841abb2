"""
unitconv: conversion of units through a graph of pairwise definitions.
"""
from .config import Config
from .conversion import PathConverter, convert
from .exceptions import (
    ConfigurationError,
    ConversionError,
    DefinitionFileNotFoundError,
    DefinitionSyntaxError,
    DivisionByZeroError,
    InvalidFactorError,
    NoConversionPathError,
    SearchDepthExceededError,
    UnknownUnitError,
    ZeroFactorError,
)
from .graph import UnitGraph
from .ingest import GraphBuilder, load_graph

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigurationError",
    "ConversionError",
    "DefinitionFileNotFoundError",
    "DefinitionSyntaxError",
    "DivisionByZeroError",
    "GraphBuilder",
    "InvalidFactorError",
    "NoConversionPathError",
    "PathConverter",
    "SearchDepthExceededError",
    "UnitGraph",
    "UnknownUnitError",
    "ZeroFactorError",
    "convert",
    "load_graph",
]
