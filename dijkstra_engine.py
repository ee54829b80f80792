"""
Lazy-deletion Dijkstra built on IndexedBinaryHeap.

There is no decrease-key: when a node's distance improves, a fresh copy is
pushed and the stale copy is discarded when it surfaces, because the node is
already in the visited set by then.
"""

from typing import Dict, List, Optional, Set, Tuple
import math

from graph import Graph
from algorithms import ShortestPathEngine, ShortestPathResult
from priority_queue import DistanceOrder, IndexedBinaryHeap


class LazyDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra using a comparator-driven binary heap.

    Weights must be non-negative; negative weights give wrong but finite
    answers and are not checked.

    Complexity:
        O(E log E) over the nodes reachable from the source.
    """

    def _run(
        self, graph: Graph, source: int
    ) -> Tuple[List[float], Dict[int, int], List[int]]:
        """
        Run the relax loop once and return (dist, prev, visit_order).

        dist is shared by reference with the heap's DistanceOrder; it is only
        written between heap operations, never during one.
        """
        if source not in graph.nodes():
            raise IndexError(f"source {source} out of range for graph with {graph.num_nodes} nodes")

        dist: List[float] = [math.inf for _ in graph.nodes()]
        dist[source] = 0
        prev: Dict[int, int] = {}
        visited: Set[int] = set()
        visit_order: List[int] = []

        heap: IndexedBinaryHeap[int] = IndexedBinaryHeap(DistanceOrder(dist))
        heap.push(source)

        while not heap.is_empty():
            u = heap.pop()

            # Skip stale copies; u was settled through a fresher entry.
            if u in visited:
                continue
            visited.add(u)
            visit_order.append(u)

            for v, w in graph.outgoing(u):
                alt = dist[u] + w
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    heap.push(v)

        return dist, prev, visit_order

    def shortest_path(self, graph: Graph, source: int) -> Optional[ShortestPathResult]:
        """
        Return the largest finite distance from source and the order in which
        nodes were settled. Unreachable nodes are left out of both.
        """
        dist, _, visit_order = self._run(graph, source)
        finite = [d for d in dist if d != math.inf]
        if not finite:
            return None
        return ShortestPathResult(max(finite), visit_order)

    def shortest_path_costs(self, graph: Graph, source: int) -> List[float]:
        dist, _, _ = self._run(graph, source)
        return dist

    def shortest_paths(self, graph: Graph, source: int) -> Tuple[List[float], Dict[int, int]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        The predecessor map omits the source itself because it has no parent,
        and omits unreachable nodes.
        """
        dist, prev, _ = self._run(graph, source)
        return dist, prev
