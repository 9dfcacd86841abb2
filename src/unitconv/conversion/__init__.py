"""
Conversion path search.
"""
from .path_converter import PathConverter, convert

__all__ = ["PathConverter", "convert"]
