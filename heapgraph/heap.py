"""Binary heap ordered by an injected comparator."""
import logging
import operator
from typing import Any, Callable, Generic, Iterable, Iterator, List, TypeVar

from .exceptions import EmptyHeapError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Comparator = Callable[[T, T], bool]


class Heap(Generic[T]):
    """A binary heap whose ordering is a strict predicate fixed at construction.

    ``comparator(a, b)`` must return True only when ``a`` has to end up above
    ``b``. Elements are stored in a plain list using 0-based index arithmetic.

    The heap is consumed as an iterator: ``next(heap)`` removes and returns the
    most preferred element and raises StopIteration once the heap is empty.
    Draining is forward-only; adding more elements lets iteration resume.

    Not thread-safe. Guard every call with one lock if an instance is shared.
    """

    def __init__(self, comparator: Comparator) -> None:
        """Create an empty heap ordered by ``comparator``."""
        self._items: List[T] = []
        self._comparator = comparator

    # ------------- Constructors --------------------------------------------
    @classmethod
    def new_min(cls) -> "Heap[T]":
        """Heap yielding the smallest element first."""
        return cls(operator.lt)

    @classmethod
    def new_max(cls) -> "Heap[T]":
        """Heap yielding the largest element first."""
        return cls(operator.gt)

    # ------------- Mutators -------------------------------------------------
    def add(self, value: T) -> None:
        """Insert value and sift it up to its place."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def extend(self, values: Iterable[T]) -> None:
        """Add every value in order."""
        for value in values:
            self.add(value)

    # ------------- Basic queries -------------------------------------------
    def len(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def peek(self) -> T:
        """Return the root without removing it. Raises EmptyHeapError if empty."""
        if not self._items:
            raise EmptyHeapError("peek from an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={len(self._items)})"

    # ------------- Iteration -----------------------------------------------
    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        """Remove and return the root, or raise StopIteration when empty.

        The last element takes the root's slot and is sifted down.
        """
        if not self._items:
            raise StopIteration
        last = self._items.pop()
        if not self._items:
            logger.debug("Heap drained")
            return last
        result = self._items[0]
        self._items[0] = last
        self._sift_down(0)
        return result

    # ------------- Internal helpers ----------------------------------------
    def _sift_up(self, idx: int) -> None:
        items = self._items
        while idx > 0:
            parent = (idx - 1) // 2
            if self._comparator(items[idx], items[parent]):
                items[idx], items[parent] = items[parent], items[idx]
                idx = parent
            else:
                break

    def _preferred_child(self, idx: int) -> int:
        """Index of the child that should rise first.

        Caller guarantees at least a left child exists.
        """
        left = 2 * idx + 1
        right = left + 1
        if right >= len(self._items):
            return left
        if self._comparator(self._items[left], self._items[right]):
            return left
        return right

    def _sift_down(self, idx: int) -> None:
        items = self._items
        while 2 * idx + 1 < len(items):
            child = self._preferred_child(idx)
            if self._comparator(items[child], items[idx]):
                items[idx], items[child] = items[child], items[idx]
                idx = child
            else:
                break


def min_heap() -> Heap[Any]:
    """Return an empty heap that produces values in ascending order."""
    return Heap.new_min()


def max_heap() -> Heap[Any]:
    """Return an empty heap that produces values in descending order."""
    return Heap.new_max()
