import random
from typing import Callable

import pytest

from indexed_heap import IndexedMinHeap


@pytest.fixture(autouse=True)
def init_random() -> None:
    random.seed(0)


def check_heap(heap: IndexedMinHeap) -> None:
    items = list(heap)

    for idx in range(1, len(items)):
        parent_idx = (idx - 1) // 2
        assert not items[idx] < items[parent_idx], f"heap order violated at {idx}"

    total = 0
    for item in set(items):
        expected = tuple(idx for idx, stored in enumerate(items) if stored == item)
        assert heap.positions(item) == expected
        total += len(expected)

    assert total == len(heap)
    assert heap._index.total() == len(heap)
    assert len(heap._index) == len(set(items))


@pytest.fixture
def heap_checker() -> Callable[[IndexedMinHeap], None]:
    return check_heap
