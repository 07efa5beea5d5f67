"""
Shared test fixtures for the circuit builder test suite.

All fixtures build pure-Python model objects on a small grid. Positions
are (row, col); a component spans two grid steps from its anchor.
"""

import sys
from pathlib import Path

# Ensure circuit_builder/ is on sys.path so bare imports (models, analysis, controllers)
# work when running individual test files (e.g., python -m pytest circuit_builder/tests/unit/test_foo.py).
_app_dir = str(Path(__file__).resolve().parent.parent)
if _app_dir not in sys.path:
    sys.path.insert(0, _app_dir)

import pytest
from analysis.presets import wire_run
from models.component import VERTICAL, ComponentData
from models.wire import WireData


def make_component(component_type, component_id, position=(0, 0), orientation="horizontal", **values):
    """Helper to create a ComponentData with minimal boilerplate."""
    return ComponentData(
        component_id=component_id,
        component_type=component_type,
        position=position,
        orientation=orientation,
        **values,
    )


def make_wire(start, end):
    """Helper to create a single WireData segment."""
    return WireData(start=start, end=end)


def make_path(*points):
    """Unit wire segments along straight runs through the given points."""
    wires = []
    for start, end in zip(points, points[1:]):
        wires.extend(wire_run(start, end))
    return wires


def battery(voltage=9.0, component_id="B1", position=(0, 0)):
    """Vertical battery with terminals at position and two rows below."""
    return make_component("Battery", component_id, position, VERTICAL, voltage=voltage)


@pytest.fixture
def single_loop_circuit():
    """
    B1 (9 V) -- R1 (100 Ω) in one loop.

    (0,0)---(0,4)
      B1      R1
    (2,0)---(2,4)
    """
    components = [
        battery(9.0),
        make_component("Resistor", "R1", (0, 4), VERTICAL, resistance=100.0),
    ]
    wires = make_path((0, 0), (0, 4)) + make_path((2, 0), (2, 4))
    return components, wires


@pytest.fixture
def series_circuit():
    """B1 (9 V) -- R1 (100 Ω) -- R2 (200 Ω) in series."""
    components = [
        battery(9.0),
        make_component("Resistor", "R1", (0, 2), resistance=100.0),
        make_component("Resistor", "R2", (0, 6), VERTICAL, resistance=200.0),
    ]
    wires = make_path((0, 0), (0, 2)) + make_path((0, 4), (0, 6)) + make_path((2, 6), (2, 0))
    return components, wires


@pytest.fixture
def parallel_circuit():
    """B1 (9 V) with R1 and R2 (100 Ω each) across the same two rails."""
    components = [
        battery(9.0),
        make_component("Resistor", "R1", (0, 2), VERTICAL, resistance=100.0),
        make_component("Resistor", "R2", (0, 4), VERTICAL, resistance=100.0),
    ]
    wires = make_path((0, 0), (0, 4)) + make_path((2, 0), (2, 4))
    return components, wires


@pytest.fixture
def series_parallel_circuit():
    """
    B1 (9 V) feeding R1 || R2 (100 Ω each) in series with R3 (100 Ω).

    (0,0)---(0,2)---(0,4)
      B1      R1      R2
    (2,0)   (2,2)---(2,4)---(2,6) R3 (2,8)
      |                               |
    (4,0)-------------------------(4,8)
    """
    components = [
        battery(9.0),
        make_component("Resistor", "R1", (0, 2), VERTICAL, resistance=100.0),
        make_component("Resistor", "R2", (0, 4), VERTICAL, resistance=100.0),
        make_component("Resistor", "R3", (2, 6), resistance=100.0),
    ]
    wires = make_path((0, 0), (0, 4)) + make_path((2, 2), (2, 6)) + make_path((2, 8), (4, 8), (4, 0), (2, 0))
    return components, wires


@pytest.fixture
def short_circuit():
    """B1 (9 V) wired straight back to itself."""
    components = [battery(9.0)]
    wires = make_path((0, 0), (0, 1), (2, 1), (2, 0))
    return components, wires


@pytest.fixture
def open_switch_circuit():
    """B1 (9 V) -- R1 (100 Ω) -- S1 (open) in series."""
    components = [
        battery(9.0),
        make_component("Resistor", "R1", (0, 2), resistance=100.0),
        make_component("Switch", "S1", (0, 6), VERTICAL, closed=False),
    ]
    wires = make_path((0, 0), (0, 2)) + make_path((0, 4), (0, 6)) + make_path((2, 6), (2, 0))
    return components, wires


@pytest.fixture
def closed_switch_circuit(open_switch_circuit):
    """The open switch circuit with S1 closed."""
    components, wires = open_switch_circuit
    components = [
        make_component("Switch", "S1", (0, 6), VERTICAL, closed=True) if c.component_id == "S1" else c
        for c in components
    ]
    return components, wires


@pytest.fixture
def disconnected_circuit(single_loop_circuit):
    """The single loop plus a resistor placed away from it."""
    components, wires = single_loop_circuit
    return components + [make_component("Resistor", "R9", (6, 6), resistance=100.0)], wires
