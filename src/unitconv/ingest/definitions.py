"""
Definition file location and parsing.

A definition file holds one record per line::

    # comment
    node eV electronvolt
    edge meV 0.001 eV NOINVERT
    edge eV 1239.842 nm INVERT

``node`` declares a unit (short id, long name). ``edge`` declares that one
unit of the first id equals ``factor`` units of the second (or, for INVERT,
that the second equals ``factor`` divided by the first).
"""
import logging
import math
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from ..config import Config
from ..exceptions import DefinitionFileNotFoundError, DefinitionSyntaxError
from ..schema.records import DefineRelation, DefineUnit

logger = logging.getLogger(__name__)

Record = Union[DefineUnit, DefineRelation]

COMMENT_PREFIX = "#"
INVERSION_FLAGS = {"INVERT": True, "NOINVERT": False}


def parse_line(line: str, line_number: Optional[int] = None, source: Optional[str] = None) -> Optional[Record]:
    """
    Parse a single definition line.

    Args:
        line: Raw line text
        line_number: 1-based line number, used in error messages
        source: Name of the file the line came from

    Returns:
        A record, or None for comment and blank lines

    Raises:
        DefinitionSyntaxError: if the line is not a valid record
    """
    if line.startswith(COMMENT_PREFIX):
        logger.debug("comment: %s", line.rstrip())
        return None

    tokens = line.split()
    if not tokens:
        return None

    keyword = tokens[0]
    if keyword == "node":
        if len(tokens) < 3:
            raise DefinitionSyntaxError(
                "node definition needs a short name and a long name", source, line_number
            )
        return DefineUnit(id=tokens[1], long_name=tokens[2])

    if keyword == "edge":
        if len(tokens) < 5:
            raise DefinitionSyntaxError(
                "edge definition needs from unit, factor, to unit and inversion flag",
                source,
                line_number,
            )
        _, from_id, factor_text, to_id, flag = tokens[:5]
        try:
            factor = float(factor_text)
        except ValueError:
            raise DefinitionSyntaxError(
                f"invalid conversion factor: {factor_text}", source, line_number
            ) from None
        if not math.isfinite(factor):
            raise DefinitionSyntaxError(
                f"invalid conversion factor: {factor_text}", source, line_number
            )
        if flag not in INVERSION_FLAGS:
            raise DefinitionSyntaxError(
                "inversion flag must be INVERT or NOINVERT", source, line_number
            )
        return DefineRelation(
            from_id=from_id, factor=factor, to_id=to_id, inverted=INVERSION_FLAGS[flag]
        )

    raise DefinitionSyntaxError(f"invalid type in definition file: {keyword}", source, line_number)


def read_definitions(lines: Iterable[str], source: Optional[str] = None) -> Iterator[Record]:
    """Lazily parse records from an iterable of lines, skipping comments."""
    for line_number, line in enumerate(lines, start=1):
        record = parse_line(line, line_number, source)
        if record is not None:
            yield record


def load_definitions(path: Path) -> Iterator[Record]:
    """
    Read records from a definition file.

    Raises:
        DefinitionFileNotFoundError: if the file cannot be opened
        DefinitionSyntaxError: on the first malformed line
    """
    path = Path(path)
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError:
        raise DefinitionFileNotFoundError([path]) from None
    with f:
        yield from read_definitions(f, source=str(path))


def candidate_paths(config: Config, cwd: Optional[Path] = None) -> List[Path]:
    """
    Locations searched for the definition file, in order.

    An explicit ``config.definition_file`` is the only candidate when set.
    Otherwise the current directory is tried first, then ``$HOME/bin``.
    """
    if config.definition_file is not None:
        return [Path(config.definition_file)]

    candidates = [Path(cwd or Path.cwd()) / config.definition_file_name]
    home = os.environ.get("HOME")
    if home:
        candidates.append(Path(home) / config.home_subdir / config.definition_file_name)
    return candidates


def locate_definition_file(config: Config, cwd: Optional[Path] = None) -> Path:
    """
    Find the definition file to load.

    Raises:
        DefinitionFileNotFoundError: if no candidate is a readable file
    """
    candidates = candidate_paths(config, cwd)
    for path in candidates:
        if path.is_file() and os.access(path, os.R_OK):
            logger.debug("using definition file %s", path)
            return path
        logger.debug("definition file %s not found", path)
    raise DefinitionFileNotFoundError(candidates)
