"""Analysis modules for classical graph and string algorithms.

This package provides the core algorithms:
- DFS traversal with tree/forward/back/cross edge classification
- Edit distance with optimal alignment
- Union-Find data structure for connectivity counting
"""

from classic_algos.analysis.edge_classifier import GraphEdgeClassifier, classify_edges
from classic_algos.analysis.edit_distance import (
    EditDistanceResult,
    EditOperation,
    calculate_edit_distance,
)
from classic_algos.analysis.graph_types import ClassifiedEdge, DfsResult, EdgeType, GraphInput
from classic_algos.analysis.union_find import UnionFind, count_min_connecting_edges

__all__ = [
    "GraphEdgeClassifier",
    "classify_edges",
    "GraphInput",
    "ClassifiedEdge",
    "DfsResult",
    "EdgeType",
    "calculate_edit_distance",
    "EditDistanceResult",
    "EditOperation",
    "UnionFind",
    "count_min_connecting_edges",
]
