"""
Algorithm interfaces for shortest-path computation.

Keeps graph algorithms separate from the graph storage and from the batch
runner.
"""

from abc import ABC, abstractmethod
import math
from typing import Dict, List, NamedTuple, Optional, Tuple

from graph import Graph, Weight


class ShortestPathResult(NamedTuple):
    """Furthest finite distance from the source plus the settlement order."""

    max_distance: Weight
    visit_order: List[int]


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path(self, graph: Graph, source: int) -> Optional[ShortestPathResult]:
        """
        Settle every node reachable from source.

        Returns:
            (max_distance, visit_order), or None when no finite distance exists.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: int) -> List[float]:
        """
        Compute shortest-path costs from source to every node.

        Returns:
            List indexed by node id; unreachable nodes hold math.inf.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: int) -> Tuple[List[float], Dict[int, int]]:
        """
        Compute shortest-path costs plus the predecessor chain for each dest.

        Returns:
            (dist, prev) where dist is the cost table and prev records parents.
        """
        raise NotImplementedError

    def path_to(self, graph: Graph, source: int, target: int) -> Optional[List[int]]:
        """
        Node sequence source -> ... -> target, or None if target is unreachable.
        """
        if target not in graph.nodes():
            raise IndexError(f"target {target} out of range for graph with {graph.num_nodes} nodes")
        dist, prev = self.shortest_paths(graph, source)
        if dist[target] == math.inf:
            return None
        path = [target]
        while path[-1] != source:
            path.append(prev[path[-1]])
        path.reverse()
        return path
