"""
Command line front end for unitconv.

    cv 25 meV K
    cv -2.5e-3 eV K
    cv            # list the units known to the definition file

Options go before the value. A negative value is accepted in any float
notation; ``--`` may also be given explicitly before it.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import yaml

from ..config import Config
from ..conversion import PathConverter
from ..exceptions import ConfigurationError, ConversionError
from ..graph import UnitGraph
from ..ingest import load_graph, locate_definition_file

logger = logging.getLogger(__name__)

OPTIONS_WITH_VALUES = {"--definitions", "--config", "--precision", "--log-level"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cv",
        usage="%(prog)s [options] [--] [value from_unit to_unit]",
        description="Convert a value between units defined in a convert.def file.",
    )
    parser.add_argument("value", nargs="?", help="value to convert")
    parser.add_argument("from_unit", nargs="?", help="unit the value is expressed in")
    parser.add_argument("to_unit", nargs="?", help="unit to convert to")
    parser.add_argument("--definitions", type=Path, help="definition file to use")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--precision", type=int, help="significant digits in the output")
    parser.add_argument("--log-level", help="logging level (default WARNING)")
    return parser


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def separate_negative_value(argv: List[str]) -> List[str]:
    """
    Insert ``--`` before a negative value so argparse reads it as positional.

    argparse only recognizes plain negatives such as ``-5``; ``-2.5e-3`` or
    ``-inf`` would otherwise be taken for an unknown option.
    """
    for i, token in enumerate(argv):
        if token == "--":
            break
        if i > 0 and argv[i - 1] in OPTIONS_WITH_VALUES:
            continue
        if token.startswith("-") and _is_number(token):
            return argv[:i] + ["--"] + argv[i:]
    return argv


def load_config(args: argparse.Namespace) -> Config:
    """Resolve configuration, letting command line options override it."""
    try:
        config = Config.from_yaml(args.config) if args.config else Config.default()
    except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
        raise ConfigurationError(args.config or "config.yaml", str(e)) from e
    overrides = {}
    if args.definitions is not None:
        overrides["definition_file"] = args.definitions
    if args.precision is not None:
        overrides["output_precision"] = args.precision
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )


def format_number(value: float, precision: int) -> str:
    return f"{value:.{precision}g}"


def print_units(graph: UnitGraph, definition_file: Path, config: Config, stream: TextIO):
    """Print usage and the list of known units."""
    print(" cv: unit conversions: ", file=stream)
    print(f" Current definition file is {definition_file}", file=stream)
    print(" use: cv value from_unit to_unit ", file=stream)
    print(" allowed units are: ", file=stream)
    for unit_id, long_name in graph.list_nodes():
        print(f" {unit_id:<{config.list_name_width}}{long_name}", file=stream)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the converter.

    Returns:
        Process exit status: 0 on success, 1 on any conversion error
    """
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(separate_negative_value(list(argv)))

    try:
        config = load_config(args)
        configure_logging(config.log_level)

        definition_file = locate_definition_file(config)
        graph = load_graph(definition_file)
        logger.debug("loaded %s: %s", definition_file, graph.get_stats())

        if args.to_unit is None:
            print_units(graph, definition_file, config, sys.stderr)
            return 0

        try:
            value = float(args.value)
        except ValueError:
            print(f" invalid value: {args.value}", file=sys.stderr)
            return 1

        result = PathConverter(graph, config).convert(value, args.from_unit, args.to_unit)
    except ConversionError as e:
        print(f" {e}", file=sys.stderr)
        return 1

    precision = config.output_precision
    print(
        f" {format_number(value, precision)} {args.from_unit} = "
        f"{format_number(result, precision)} {args.to_unit}"
    )
    return 0
