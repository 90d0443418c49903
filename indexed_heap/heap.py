import heapq
import logging
from typing import Any, Generator, Generic, Hashable, Iterable, Iterator, List, Optional, Protocol, Tuple, TypeVar

from . import exceptions
from .index import IndexTable
from .render import render_levels

logger = logging.getLogger(__package__)


class ComparableP(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __eq__(self, other: Any) -> bool: ...


class ComparableAndHashable(ComparableP, Protocol, Hashable):
    pass


Item = TypeVar('Item', bound=ComparableAndHashable)


class IndexedMinHeap(Generic[Item]):
    """
    Binary min-heap with an index table.
    Similar to `heapq` but supports arbitrary item removal in O(log(n)) and membership test in O(1).
    Items may repeat: the index table keeps every position an item is stored at.

    The structure is not thread-safe: guard all the calls with a single lock if it is shared between threads.

    :param items: initial items
    """

    def __init__(self, items: Iterable[Item] = ()) -> None:
        heap: List[Item] = list(items)
        if any(item is None for item in heap):
            raise exceptions.InvalidArgumentError("heap items can't be None")

        self._heap = heap
        self._index: IndexTable[Item] = IndexTable()
        for idx, item in enumerate(self._heap):
            self._index.add(item, idx)

        self._heapify()
        logger.debug("heap built: %d items", len(self._heap))

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: Item) -> bool:
        return item in self._index

    def __iter__(self) -> Iterator[Item]:
        return iter(self._heap)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._heap!r})"

    def __str__(self) -> str:
        return render_levels(self._heap)

    def clear(self) -> None:
        """
        Remove all items from the heap.
        """

        self._heap.clear()
        self._index.clear()
        logger.debug("heap cleared")

    def add(self, item: Item) -> None:
        """
        Inserts an item onto the heap, maintaining the heap invariant.
        If the item is `None` raises `InvalidArgumentError`.

        :param item: item to be pushed
        """

        if item is None:
            raise exceptions.InvalidArgumentError("heap items can't be None")

        item_idx = len(self._heap)
        self._index.add(item, item_idx)
        self._heap.append(item)

        self._swim(item_idx)

    def remove(self, item: Item) -> bool:
        """
        Removes an item from the heap.
        If the item occurs multiple times the one stored at the lowest position is removed.

        :param item: item to be removed
        :return: `True` if the item has been removed, `False` if it is not found
        """

        if item is None or (idx := self._index.first(item)) is None:
            logger.debug("item not found: %r", item)
            return False

        self._remove_at(idx)
        return True

    def poll(self) -> Optional[Item]:
        """
        Pops the smallest item off the heap, maintaining the heap invariant.

        :return: the smallest item or `None` if the heap is empty
        """

        return self._remove_at(0)

    def peek(self) -> Optional[Item]:
        """
        Returns the smallest item without removing it.

        :return: the smallest item or `None` if the heap is empty
        """

        if len(self._heap) != 0:
            return self._heap[0]
        else:
            return None

    def positions(self, item: Item) -> Tuple[int, ...]:
        """
        Returns heap positions the item is stored at in ascending order.

        :param item: item to be looked up
        :return: item positions, empty if the item is not found
        """

        return self._index.positions(item)

    def heapsort(self) -> Generator[Item, None, None]:
        """
        Iterates over all items in ascending order without modifying the heap.
        """

        h = [(item, idx) for idx, item in enumerate(self._heap)]
        heapq.heapify(h)
        while h:
            item, _ = heapq.heappop(h)
            yield item

    def _heapify(self) -> None:
        for idx in reversed(range(len(self._heap) // 2)):
            self._sink(idx)

    def _remove_at(self, idx: int) -> Optional[Item]:
        if not 0 <= idx < len(self._heap):
            return None

        item = self._heap[idx]
        last_idx = len(self._heap) - 1
        self._swap(idx, last_idx)

        self._index.discard(self._heap.pop(), last_idx)

        if idx < len(self._heap):
            moved = self._heap[idx]
            self._sink(idx)
            # nothing moved down so the item may still be smaller than its parent
            if self._heap[idx] == moved:
                self._swim(idx)

        return item

    def _swap(self, idx1: int, idx2: int) -> None:
        item1 = self._heap[idx1]
        item2 = self._heap[idx2]

        self._heap[idx1], self._heap[idx2] = item2, item1
        if idx1 == idx2 or item1 == item2:
            return

        self._index.move(item1, idx1, idx2)
        self._index.move(item2, idx2, idx1)

    def _sink(self, idx: int) -> None:
        heap = self._heap

        left_child_idx = 2 * idx + 1
        while left_child_idx < len(heap):
            right_child_idx = left_child_idx + 1
            if right_child_idx >= len(heap) or not heap[right_child_idx] < heap[left_child_idx]:
                min_child_idx = left_child_idx
            else:
                min_child_idx = right_child_idx

            if not heap[min_child_idx] < heap[idx]:
                break

            self._swap(idx, min_child_idx)

            idx = min_child_idx
            left_child_idx = 2 * idx + 1

    def _swim(self, idx: int) -> None:
        heap = self._heap

        while idx > 0:
            parent_idx = (idx - 1) // 2
            if heap[idx] < heap[parent_idx]:
                self._swap(idx, parent_idx)
                idx = parent_idx
            else:
                break
