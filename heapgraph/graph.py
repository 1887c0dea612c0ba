"""Weighted graphs over a string-keyed adjacency dict."""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Set, Tuple

from .exceptions import NodeNotInGraph

logger = logging.getLogger(__name__)

Edge = Tuple[str, str, int]


class Graph(ABC):
    """Base class for weighted graphs.

    Internally, the graph is an adjacency dict:
    node -> list of (neighbour, weight) pairs.
    Presence of a key defines membership. Nodes and edges are never removed.

    Subclasses decide how an edge is recorded by implementing ``add_edge``;
    every query is derived from the adjacency dict.

    Not thread-safe. Guard every call with one lock if an instance is shared.
    """

    def __init__(self) -> None:
        """Create an empty graph."""
        self._adjacency: Dict[str, List[Tuple[str, int]]] = {}

    # ------------- Mutators -------------------------------------------------
    def add_node(self, node: str) -> bool:
        """Add a node if it does not exist. Return True if it was added."""
        if node in self._adjacency:
            return False
        self._adjacency[node] = []
        logger.debug(f"Added node {node!r}")
        return True

    @abstractmethod
    def add_edge(self, source: str, target: str, weight: int) -> None:
        """Record an edge of the given weight. Missing nodes are created."""

    # ------------- Basic queries -------------------------------------------
    def contains(self, node: str) -> bool:
        """Return True if node exists in the graph."""
        return node in self._adjacency

    def nodes(self) -> Set[str]:
        """Return all nodes."""
        return set(self._adjacency)

    def edges(self) -> List[Edge]:
        """Return every (source, target, weight) triple stored in the adjacency dict."""
        res: List[Edge] = []
        for u, nbrs in self._adjacency.items():
            for v, w in nbrs:
                res.append((u, v, w))
        return res

    def neighbours(self, node: str) -> List[Tuple[str, int]]:
        """Return the (neighbour, weight) pairs of node (copy).

        Raises NodeNotInGraph if node was never added.
        """
        try:
            return list(self._adjacency[node])
        except KeyError:
            raise NodeNotInGraph(node) from None

    def adjacency_table(self) -> Dict[str, List[Tuple[str, int]]]:
        """Return a shallow copy of the adjacency dict."""
        return {u: list(nbrs) for u, nbrs in self._adjacency.items()}

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        """Return number of nodes."""
        return len(self._adjacency)


class UndirectedGraph(Graph):
    """A graph whose edges are stored once in each endpoint's list.

    Self-loops and parallel edges are kept as given.
    """

    def add_edge(self, source: str, target: str, weight: int) -> None:
        """Add edge source -- target. Nodes are created if missing."""
        self.add_node(source)
        self.add_node(target)
        self._adjacency[source].append((target, weight))
        self._adjacency[target].append((source, weight))
        logger.debug(f"Added edge {source!r} -- {target!r} (weight={weight})")
