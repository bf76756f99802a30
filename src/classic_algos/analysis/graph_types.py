"""Data types for DFS edge classification.

This module defines the structures shared by the traversal and its callers:
- EdgeType: Classification assigned to each directed edge
- GraphInput: Parsed directed graph (node count plus ordered edge list)
- ClassifiedEdge: One input edge together with its classification
- DfsResult: Preorder discovery sequence and classified edges
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum


class EdgeType(Enum):
    """Type of a directed edge relative to the DFS forest."""

    UNCLASSIFIED = "u"
    TREE = "t"
    FORWARD = "f"
    BACK = "b"
    CROSS = "c"

    @property
    def label(self) -> str:
        """Human readable name (e.g. "tree")."""
        return self.name.lower()


@dataclass(frozen=True)
class GraphInput:
    """A directed graph with nodes 0..node_count-1.

    Attributes:
        node_count: Number of nodes in the graph.
        edges: Directed (tail, head) pairs in input order. Duplicates and
            self-loops are allowed.
    """

    node_count: int
    edges: tuple[tuple[int, int], ...] = ()

    @property
    def edge_count(self) -> int:
        return len(self.edges)


@dataclass(frozen=True)
class ClassifiedEdge:
    """A directed edge and the type DFS assigned to it."""

    tail: int
    head: int
    edge_type: EdgeType


@dataclass
class DfsResult:
    """Result of a depth-first traversal with edge classification.

    Attributes:
        preorder: Node ids in the order they were discovered.
        edges: Every input edge with its type, in input order.
        preorder_numbers: 1-based preorder number of each node, indexed by id.
        postorder_numbers: 1-based postorder number of each node, indexed by id.
    """

    preorder: list[int]
    edges: list[ClassifiedEdge]
    preorder_numbers: list[int] = field(default_factory=list)
    postorder_numbers: list[int] = field(default_factory=list)

    def count_by_type(self) -> dict[EdgeType, int]:
        """Count classified edges per type.

        Returns:
            Mapping from each non-unclassified EdgeType to its edge count
            (types with no edges map to 0).
        """
        counts = Counter(edge.edge_type for edge in self.edges)
        return {
            edge_type: counts.get(edge_type, 0)
            for edge_type in EdgeType
            if edge_type is not EdgeType.UNCLASSIFIED
        }
