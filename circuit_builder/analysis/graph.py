"""
analysis/graph.py

Builds adjacency relations over grid positions from placed components and
wire segments. Positions are serialized to "row,col" keys.

Two graphs are built from the same circuit:

- the full graph joins every component's terminals and every wire, and
  answers whether the placed parts form one connected circuit;
- the conductor graph only follows zero-resistance paths (wires, Wire
  parts, closed switches); its connected classes are the electrical nodes.
"""

from typing import Callable, Iterable

from models.component import ComponentData
from models.wire import WireData

Adjacency = dict[str, set[str]]


def node_key(row: int, col: int) -> str:
    """Serialize a grid position to its adjacency key."""
    return f"{row},{col}"


def position_key(position: tuple[int, int]) -> str:
    return node_key(position[0], position[1])


def component_terminal_keys(component: ComponentData) -> tuple[str, str]:
    """Return the adjacency keys of a component's two terminals."""
    first, second = component.get_terminal_positions()
    return position_key(first), position_key(second)


def _add_edge(adjacency: Adjacency, a: str, b: str) -> None:
    adjacency.setdefault(a, set()).add(b)
    adjacency.setdefault(b, set()).add(a)


def _build(
    components: Iterable[ComponentData],
    wires: Iterable[WireData],
    include: Callable[[ComponentData], bool],
) -> Adjacency:
    adjacency: Adjacency = {}

    for wire in wires:
        _add_edge(adjacency, position_key(wire.start), position_key(wire.end))

    for component in components:
        a, b = component_terminal_keys(component)
        if include(component):
            _add_edge(adjacency, a, b)
        else:
            # Terminals still exist as nodes even when not joined
            adjacency.setdefault(a, set())
            adjacency.setdefault(b, set())

    return adjacency


def build_adjacency(components: Iterable[ComponentData], wires: Iterable[WireData]) -> Adjacency:
    """
    Build the reachability graph: every wire and every component is an edge.

    Resistive parts count as edges here; resistance is only accounted for
    by the network solver.
    """
    return _build(components, wires, lambda component: True)


def build_conductor_adjacency(components: Iterable[ComponentData], wires: Iterable[WireData]) -> Adjacency:
    """Build the zero-resistance graph: wires, Wire parts and closed switches."""
    return _build(components, wires, lambda component: component.is_conductor)


def iter_edges(adjacency: Adjacency):
    """Yield each undirected edge once as a (key_a, key_b) pair."""
    for node in adjacency:
        for neighbor in adjacency[node]:
            if node <= neighbor:
                yield node, neighbor
