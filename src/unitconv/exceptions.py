"""
Error kinds raised while loading unit definitions and converting values.
"""
from typing import Optional


class ConversionError(Exception):
    """Base class for every fatal unit conversion failure."""


class DefinitionFileNotFoundError(ConversionError):
    """No readable definition file could be located."""

    def __init__(self, searched):
        self.searched = list(searched)
        locations = ", ".join(str(path) for path in self.searched) or "<none>"
        super().__init__(f"Cannot open definition file (searched: {locations})")


class DefinitionSyntaxError(ConversionError):
    """A definition line could not be parsed."""

    def __init__(self, message: str, source: Optional[str] = None, line_number: Optional[int] = None):
        self.source = source
        self.line_number = line_number
        location = ""
        if source is not None and line_number is not None:
            location = f"{source}:{line_number}: "
        elif line_number is not None:
            location = f"line {line_number}: "
        super().__init__(f"Error in definition file: {location}{message}")


class ZeroFactorError(ConversionError):
    """A relation was defined with a conversion factor of zero."""

    def __init__(self, from_id: str, to_id: str):
        self.from_id = from_id
        self.to_id = to_id
        super().__init__(f"Conversion factor from {from_id} to {to_id} is zero")


class UnknownUnitError(ConversionError):
    """A relation or conversion request references an undefined unit."""

    def __init__(self, unit_id: str):
        self.unit_id = unit_id
        super().__init__(f"Unit {unit_id} not found")


class NoConversionPathError(ConversionError):
    """Both units exist but no chain of relations connects them."""

    def __init__(self, from_id: str, to_id: str):
        self.from_id = from_id
        self.to_id = to_id
        super().__init__(f"Cannot convert {from_id} to {to_id}")


class DivisionByZeroError(ConversionError):
    """An inverted relation was traversed while the running value was zero."""

    def __init__(self, unit_id: str, next_id: str):
        self.unit_id = unit_id
        self.next_id = next_id
        super().__init__(
            f"Cannot convert zero value through inverted relation {unit_id} -> {next_id}"
        )


class SearchDepthExceededError(ConversionError):
    """The conversion search went deeper than the configured limit."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Conversion path search exceeded maximum depth of {max_depth}")


class InvalidFactorError(ConversionError):
    """A relation factor, or its derived reverse, is not a finite number."""

    def __init__(self, from_id: str, to_id: str, factor: float):
        self.from_id = from_id
        self.to_id = to_id
        self.factor = factor
        super().__init__(f"Conversion factor from {from_id} to {to_id} is not finite: {factor!r}")


class ConfigurationError(ConversionError):
    """A configuration file could not be read or is invalid."""

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Cannot load configuration {path}: {reason}")
