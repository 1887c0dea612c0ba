"""Exceptions raised by the heapgraph containers."""


class HeapGraphError(Exception):
    """Base exception for heapgraph."""
    pass


class EmptyHeapError(HeapGraphError, IndexError):
    """Root access on a heap that holds no elements."""
    pass


class NodeNotInGraph(HeapGraphError, KeyError):
    """Lookup of a node that was never added to the graph."""

    def __init__(self, node: str) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"accessing a node that is not in the graph: {self.node!r}"
