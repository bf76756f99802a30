"""Depth-first traversal with directed edge classification.

The traversal runs on an explicit stack of edge frames instead of recursion,
so the classification of an edge to an already visited node can be decided
from preorder/postorder numbers at the moment the edge is examined, and deep
graphs do not hit the interpreter's recursion limit.
"""

import logging
from dataclasses import dataclass

from classic_algos.analysis.graph_types import (
    ClassifiedEdge,
    DfsResult,
    EdgeType,
    GraphInput,
)

logger = logging.getLogger(__name__)


@dataclass
class _EdgeFrame:
    """Stack frame for one edge.

    Attributes:
        tail: Tail node id, or None for the synthetic edge that roots a tree.
        head: Head node id.
        index: Position of the edge in the input, or None when synthetic.
        edge_type: Classification assigned so far.
        traversed: True once the edge (and for tree edges, its subtree)
            has been processed.
    """

    tail: int | None
    head: int
    index: int | None
    edge_type: EdgeType = EdgeType.UNCLASSIFIED
    traversed: bool = False


class GraphEdgeClassifier:
    """Classifies every edge of a directed graph as tree, forward, back or cross.

    Node state lives in flat per-node arrays indexed by node id, and each
    call to classify() builds fresh state, so repeated calls on the same
    graph produce identical results.
    """

    def __init__(self, graph: GraphInput) -> None:
        """Initialize the classifier.

        Args:
            graph: A validated graph. Node ids in edges must lie in
                0..node_count-1.
        """
        self.graph = graph
        # Adjacency lists keep input order; they determine traversal order.
        self._adjacency: list[list[int]] = [[] for _ in range(graph.node_count)]
        for index, (tail, _head) in enumerate(graph.edges):
            self._adjacency[tail].append(index)

    def classify(self) -> DfsResult:
        """Run the traversal.

        Returns:
            DfsResult with the preorder discovery sequence and every input
            edge classified, in input order.
        """
        node_count = self.graph.node_count
        edges = self.graph.edges
        logger.debug("Classifying %d edges over %d nodes", len(edges), node_count)

        frames = [_EdgeFrame(tail, head, index) for index, (tail, head) in enumerate(edges)]
        visited = [False] * node_count
        preorder_numbers = [0] * node_count
        postorder_numbers = [0] * node_count
        discovery: list[int] = []

        if node_count == 0:
            return DfsResult(preorder=[], edges=[], preorder_numbers=[], postorder_numbers=[])

        next_preorder = 1
        next_postorder = 1
        min_unvisited = 0
        stack = [_EdgeFrame(None, 0, None)]

        while stack:
            frame = stack[-1]
            head = frame.head

            if frame.traversed:
                if frame.edge_type is EdgeType.TREE:
                    postorder_numbers[head] = next_postorder
                    next_postorder += 1
                stack.pop()
                if not stack and min_unvisited < node_count:
                    logger.debug("Starting new DFS tree at node %d", min_unvisited)
                    stack.append(_EdgeFrame(None, min_unvisited, None))
                continue

            if not visited[head]:
                visited[head] = True
                while min_unvisited < node_count and visited[min_unvisited]:
                    min_unvisited += 1
                discovery.append(head)
                preorder_numbers[head] = next_preorder
                next_preorder += 1
                # Synthetic frames are marked too, so roots get postorder numbers.
                frame.edge_type = EdgeType.TREE
                for index in reversed(self._adjacency[head]):
                    stack.append(frames[index])
            else:
                frame.edge_type = self._classify_visited(
                    frame, preorder_numbers, postorder_numbers
                )
            frame.traversed = True

        return DfsResult(
            preorder=discovery,
            edges=[ClassifiedEdge(f.tail, f.head, f.edge_type) for f in frames],
            preorder_numbers=preorder_numbers,
            postorder_numbers=postorder_numbers,
        )

    @staticmethod
    def _classify_visited(
        frame: _EdgeFrame,
        preorder_numbers: list[int],
        postorder_numbers: list[int],
    ) -> EdgeType:
        """Classify an edge whose head was already visited."""
        # Synthetic frames always point at unvisited nodes, so tail is set here.
        if preorder_numbers[frame.head] > preorder_numbers[frame.tail]:
            return EdgeType.FORWARD
        if postorder_numbers[frame.head] == 0:
            return EdgeType.BACK
        return EdgeType.CROSS


def classify_edges(graph: GraphInput) -> DfsResult:
    """Classify the edges of a graph. Shortcut for GraphEdgeClassifier(graph).classify()."""
    return GraphEdgeClassifier(graph).classify()
