"""UnionFind (Disjoint Set Union) data structure.

This module provides a Union-Find over the integer nodes 0..n-1 of an
undirected graph, used to count connected components and the minimum number
of edges needed to connect them.
"""

import logging
from typing import Iterable

logger = logging.getLogger(__name__)


class UnionFind:
    """Union-Find (Disjoint Set Union) over a fixed set of integer nodes.

    find() walks parent pointers without path compression and union() always
    hangs the second root under the first, so tree shape depends only on the
    order of unions.

    Attributes:
        parent: List mapping each node to its parent (itself if it is a root).
    """

    def __init__(self, node_count: int) -> None:
        """Initialize with every node in its own component.

        Args:
            node_count: Number of nodes, ids 0..node_count-1.
        """
        self.parent: list[int] = list(range(node_count))
        self._component_count = node_count

    def find(self, v: int) -> int:
        """Find root of node v.

        Args:
            v: Node id.

        Returns:
            The root node of the component containing v.
        """
        while self.parent[v] != v:
            v = self.parent[v]
        return v

    def union(self, v1: int, v2: int) -> None:
        """Merge the components containing v1 and v2.

        The root of v2 becomes a child of the root of v1. Nothing changes if
        both are already in the same component.

        Args:
            v1: Node from first component.
            v2: Node from second component.
        """
        root_1 = self.find(v1)
        root_2 = self.find(v2)
        if root_1 == root_2:
            return
        self.parent[root_2] = root_1
        self._component_count -= 1

    def component_count(self) -> int:
        """Get number of disjoint components."""
        return self._component_count

    def min_connecting_edges(self) -> int:
        """Get minimum number of edges that would connect every component.

        Returns:
            component_count() - 1, or 0 when there are no nodes.
        """
        return max(self._component_count - 1, 0)

    def is_connected(self, v1: int, v2: int) -> bool:
        """Check if v1 and v2 are in the same component."""
        return self.find(v1) == self.find(v2)

    def get_groups(self) -> dict[int, list[int]]:
        """Get all connected components as {root: [members]}.

        Returns:
            Dictionary mapping each root to its members in ascending order.
        """
        groups: dict[int, list[int]] = {}
        for node in range(len(self.parent)):
            groups.setdefault(self.find(node), []).append(node)
        return groups

    def size(self) -> int:
        """Get number of nodes."""
        return len(self.parent)


def count_min_connecting_edges(node_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Compute how many edges must be added to connect an undirected graph.

    Args:
        node_count: Number of nodes, ids 0..node_count-1.
        edges: Undirected (v1, v2) pairs.

    Returns:
        Number of components minus one.
    """
    uf = UnionFind(node_count)
    for v1, v2 in edges:
        uf.union(v1, v2)
    logger.debug("Graph has %d connected components", uf.component_count())
    return uf.min_connecting_edges()
