"""Shared fixtures for unitconv tests."""
import pytest

from unitconv.graph import UnitGraph

ENERGY_DEFINITIONS = """\
# energy units
node meV millielectronvolt
node eV electronvolt
node K Kelvin
node nm nanometer
node Ha Hartree
#
edge meV 0.001 eV NOINVERT
edge eV 11604.518 K NOINVERT
edge eV 1239.842 nm INVERT
edge Ha 27.211386 eV NOINVERT
"""


@pytest.fixture
def chain_graph():
    """A -(2)-> B -(3)-> C, plus an isolated unit X."""
    graph = UnitGraph()
    for unit_id in ("A", "B", "C", "X"):
        graph.add_node(unit_id, f"unit_{unit_id}")
    graph.add_relation("A", 2.0, "B")
    graph.add_relation("B", 3.0, "C")
    return graph


@pytest.fixture
def definition_file(tmp_path):
    path = tmp_path / "convert.def"
    path.write_text(ENERGY_DEFINITIONS)
    return path
