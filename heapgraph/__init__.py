"""Binary heap with a pluggable comparator and a weighted undirected graph."""
from .exceptions import EmptyHeapError, HeapGraphError, NodeNotInGraph
from .graph import Edge, Graph, UndirectedGraph
from .heap import Comparator, Heap, max_heap, min_heap

__version__ = "0.1.0"

__all__ = [
    "Comparator",
    "Edge",
    "EmptyHeapError",
    "Graph",
    "Heap",
    "HeapGraphError",
    "NodeNotInGraph",
    "UndirectedGraph",
    "max_heap",
    "min_heap",
]
