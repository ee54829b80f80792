"""
Directed, weighted graph abstraction.

Nodes are integer ids in ``range(num_nodes)``.
Edges are directed: u -> v with a non-negative weight.
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple, Union

Weight = Union[int, float]
Edge = Tuple[int, int, Weight]


class Graph(ABC):
    """Directed, weighted graph over integer node ids."""

    @property
    @abstractmethod
    def num_nodes(self) -> int:
        """Number of nodes; valid ids are 0..num_nodes-1."""
        raise NotImplementedError

    def nodes(self) -> range:
        """Return all node ids in the graph."""
        return range(self.num_nodes)

    @abstractmethod
    def outgoing(self, node: int) -> Sequence[Tuple[int, Weight]]:
        """
        Outgoing neighbors and edge weights for a given node, in insertion order.

        Returns: sequence of (neighbor, weight)
        """
        raise NotImplementedError
