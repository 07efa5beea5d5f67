"""
analysis/connectivity.py

Disjoint-set (union-find) structure over grid keys. Collapses an
adjacency graph into equivalence classes; each class is one electrical
node when built from the conductor graph.
"""

from typing import Hashable, Iterable, Optional

from models.node import NodeData, generate_label

from .graph import Adjacency, iter_edges


class UnionFind:
    """
    Union-find with path compression and union by size.

    Keys are created as singleton classes the first time find() sees
    them, so callers never have to register keys up front.
    """

    def __init__(self, keys: Optional[Iterable[Hashable]] = None):
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}
        for key in keys or ():
            self.find(key)

    def find(self, key: Hashable) -> Hashable:
        """Return the representative of the key's class."""
        parent = self._parent
        if key not in parent:
            parent[key] = key
            self._size[key] = 1
            return key

        root = key
        while parent[root] != root:
            root = parent[root]

        # Point every node on the path straight at the root
        while parent[key] != root:
            parent[key], key = root, parent[key]

        return root

    def union(self, a: Hashable, b: Hashable) -> Hashable:
        """Merge the classes of a and b and return the new representative."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return root_a

        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        return root_a

    def same(self, a: Hashable, b: Hashable) -> bool:
        """Check whether a and b are in the same class."""
        return self.find(a) == self.find(b)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def groups(self) -> dict[Hashable, set]:
        """Map each representative to the members of its class."""
        result: dict[Hashable, set] = {}
        for key in list(self._parent):
            result.setdefault(self.find(key), set()).add(key)
        return result

    def partition(self) -> set[frozenset]:
        """
        Return the classes as a set of frozensets.

        Unlike representatives, the partition does not depend on the order
        in which unions were applied.
        """
        return {frozenset(members) for members in self.groups().values()}

    def electrical_nodes(self) -> list[NodeData]:
        """Return the classes as labelled nodes, ordered by smallest member key."""
        classes = sorted(self.partition(), key=lambda members: min(members))
        return [
            NodeData(keys=frozenset(members), label=generate_label(i))
            for i, members in enumerate(classes)
        ]


def resolve_connectivity(adjacency: Adjacency) -> UnionFind:
    """Run every adjacency edge through union() and return the structure."""
    connectivity = UnionFind(adjacency.keys())
    for a, b in iter_edges(adjacency):
        connectivity.union(a, b)
    return connectivity
