"""
Concrete directed, weighted graph implementation.

Implements the Graph interface using a fixed adjacency list built once from an
edge list. The graph is immutable after construction.
"""

from typing import Iterable, List, Sequence, Tuple

from graph import Edge, Graph, Weight


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by a node -> [(neighbor, weight), ...] list.

    Duplicate edges and self-loops are kept as given.
    """

    def __init__(self, num_nodes: int, edges: Iterable[Edge] = ()) -> None:
        if num_nodes < 0:
            raise ValueError(f"num_nodes must be non-negative, got {num_nodes}")
        self._num_nodes = num_nodes
        adj: List[List[Tuple[int, Weight]]] = [[] for _ in range(num_nodes)]
        count = 0
        for src, dst, weight in edges:
            self._check_node(src)
            self._check_node(dst)
            adj[src].append((dst, weight))
            count += 1
        # Freeze rows so outgoing() can hand them out without copying.
        self._adj: Tuple[Tuple[Tuple[int, Weight], ...], ...] = tuple(tuple(row) for row in adj)
        self._edge_count = count

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self._num_nodes:
            raise IndexError(f"node {node} out of range for graph with {self._num_nodes} nodes")

    def edge_count(self) -> int:
        return self._edge_count

    def __repr__(self) -> str:
        return f"AdjacencyListGraph(num_nodes={self._num_nodes}, edges={self._edge_count})"

    # --- Graph interface -----------------------------------------------------

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    def outgoing(self, node: int) -> Sequence[Tuple[int, Weight]]:
        self._check_node(node)
        return self._adj[node]
