"""
Configuration for unitconv.
"""
from .config import Config

__all__ = ["Config"]
