from indexed_heap import IndexedMinHeap
from indexed_heap.render import EMPTY_HEAP, render_levels


def test_render_empty():
    assert render_levels([]) == EMPTY_HEAP
    assert str(IndexedMinHeap()) == 'empty heap'


def test_render_single_level():
    assert render_levels([1]) == '1'


def test_render_levels():
    assert render_levels(list(range(1, 8))) == '1\n2 3\n4 5 6 7'


def test_render_partial_last_level():
    assert render_levels(list(range(1, 10))) == '1\n2 3\n4 5 6 7\n8 9'


def test_heap_str():
    heap = IndexedMinHeap([3, 1, 2])

    assert str(heap) == '1\n3 2'
    assert repr(heap) == 'IndexedMinHeap([1, 3, 2])'
