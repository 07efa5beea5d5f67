"""
NodeData - Pure Python value for electrical nodes.

An electrical node is a set of grid positions joined by zero-resistance
paths, so every position in it sits at the same potential. Nodes are
derived fresh on every analysis and never stored in the circuit.
"""

from dataclasses import dataclass


def generate_label(index: int) -> str:
    """
    Generate label like nodeA, nodeB, ..., nodeZ, nodeAA, nodeAB...

    Args:
        index: Zero-based index for the node.

    Returns:
        A string label like "nodeA", "nodeB", etc.
    """
    if index < 26:
        return "node" + chr(ord('A') + index)
    else:
        # For more than 26 nodes, use AA, AB, AC...
        first = (index // 26) - 1
        second = index % 26
        return "node" + chr(ord('A') + first) + chr(ord('A') + second)


@dataclass(frozen=True)
class NodeData:
    """
    One electrical node.

    ``keys`` holds the "row,col" grid keys merged into this node.
    """

    keys: frozenset[str]
    label: str = ""

    def __contains__(self, key: str) -> bool:
        return key in self.keys

    def __len__(self) -> int:
        return len(self.keys)

    def positions(self) -> list[tuple[int, int]]:
        """Return the member grid positions as sorted (row, col) tuples."""
        result = []
        for key in self.keys:
            row, col = key.split(",")
            result.append((int(row), int(col)))
        return sorted(result)

    def __repr__(self) -> str:
        return f"NodeData({self.label}, positions={len(self.keys)})"
