"""
Example usage of unitconv.
"""
from pathlib import Path

from unitconv import Config, PathConverter, load_graph
from unitconv.schema import ConversionRequest

DEFINITIONS = Path(__file__).parent / "convert.def"

requests = [
    ConversionRequest(value=25, from_unit="meV", to_unit="K"),
    ConversionRequest(value=1, from_unit="Ha", to_unit="cm-1"),
    ConversionRequest(value=2.5, from_unit="eV", to_unit="nm"),
    ConversionRequest(value=1, from_unit="bohr", to_unit="pm"),
]


def main():
    """Run example."""
    config = Config.default()
    graph = load_graph(DEFINITIONS)
    converter = PathConverter(graph, config)

    print(f"Loaded {graph.get_stats()}")
    for request in requests:
        result = converter.convert_request(request)
        print(
            f"{result.value:g} {result.from_unit} = {result.converted_value:.8g} {result.to_unit}"
            f"  (via {' -> '.join(result.path)})"
        )


if __name__ == "__main__":
    main()
