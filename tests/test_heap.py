import random

import pytest

from heapgraph import EmptyHeapError, Heap, max_heap, min_heap


def _assert_heap_property(heap: Heap) -> None:
    items = heap._items
    for i in range(len(items)):
        for child in (2 * i + 1, 2 * i + 2):
            if child < len(items):
                assert not heap._comparator(items[child], items[i])


def test_empty_heap_is_exhausted() -> None:
    heap = max_heap()
    assert heap.is_empty()
    assert next(heap, None) is None
    with pytest.raises(StopIteration):
        next(heap)
    with pytest.raises(StopIteration):
        next(heap)


def test_min_heap() -> None:
    heap = min_heap()
    for v in (4, 2, 9, 11):
        heap.add(v)
    assert heap.len() == 4
    assert next(heap) == 2
    assert next(heap) == 4
    assert next(heap) == 9
    heap.add(1)
    assert next(heap) == 1


def test_max_heap() -> None:
    heap = max_heap()
    for v in (4, 2, 9, 11):
        heap.add(v)
    assert len(heap) == 4
    assert next(heap) == 11
    assert next(heap) == 9
    assert next(heap) == 4
    heap.add(1)
    assert next(heap) == 2


def test_drain_yields_count_then_stops() -> None:
    heap = Heap.new_min()
    heap.extend([5, 3, 8, 1, 7])
    assert list(heap) == [1, 3, 5, 7, 8]
    assert heap.is_empty()
    assert list(heap) == []


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_heap_property_holds_after_adds(seed: int) -> None:
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(40)]
    heap = min_heap()
    for v in values:
        heap.add(v)
        _assert_heap_property(heap)
    out = []
    for v in heap:
        out.append(v)
        _assert_heap_property(heap)
    assert out == sorted(values)


def test_custom_comparator() -> None:
    heap = Heap(lambda a, b: len(a) > len(b))
    heap.extend(["bb", "a", "dddd", "ccc"])
    assert list(heap) == ["dddd", "ccc", "bb", "a"]


def test_equal_priorities_are_all_produced() -> None:
    heap = Heap(lambda a, b: a[0] < b[0])
    heap.extend([(1, "x"), (0, "y"), (1, "z"), (0, "w")])
    out = list(heap)
    assert [k for k, _ in out] == [0, 0, 1, 1]
    assert {v for _, v in out} == {"w", "x", "y", "z"}


def test_peek_does_not_remove() -> None:
    heap = max_heap()
    heap.extend([3, 7, 5])
    assert heap.peek() == 7
    assert len(heap) == 3
    assert bool(heap)


def test_peek_empty_raises() -> None:
    heap = min_heap()
    with pytest.raises(EmptyHeapError):
        heap.peek()
    with pytest.raises(IndexError):
        heap.peek()


def test_unorderable_values_raise_type_error() -> None:
    heap = min_heap()
    heap.add(object())
    with pytest.raises(TypeError):
        heap.add(object())
