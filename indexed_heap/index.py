from typing import Dict, Generic, Hashable, Iterator, Optional, Tuple, TypeVar

from sortedcontainers import SortedSet

Item = TypeVar('Item', bound=Hashable)


class IndexTable(Generic[Item]):
    """
    Reverse index of a heap: maps every stored item to the ascending set of heap positions holding it.
    An item has an entry only while at least one position holds it.
    """

    def __init__(self) -> None:
        self._positions: Dict[Item, SortedSet] = {}

    def __len__(self) -> int:
        return len(self._positions)

    def __contains__(self, item: Item) -> bool:
        return item in self._positions

    def __iter__(self) -> Iterator[Item]:
        return iter(self._positions)

    def clear(self) -> None:
        self._positions.clear()

    def add(self, item: Item, position: int) -> None:
        """
        Registers a position for the item.

        :param item: heap item
        :param position: heap position the item is stored at
        """

        if (positions := self._positions.get(item)) is None:
            self._positions[item] = SortedSet((position,))
        else:
            positions.add(position)

    def discard(self, item: Item, position: int) -> None:
        """
        Unregisters a position of the item. Drops the item entry once no positions left.

        :param item: heap item
        :param position: heap position the item is no longer stored at
        """

        if (positions := self._positions.get(item)) is None:
            return

        positions.discard(position)
        if not positions:
            del self._positions[item]

    def move(self, item: Item, src: int, dst: int) -> None:
        """
        Moves an item position.

        :param item: heap item
        :param src: position the item is moved from
        :param dst: position the item is moved to
        """

        positions = self._positions[item]
        positions.discard(src)
        positions.add(dst)

    def first(self, item: Item) -> Optional[int]:
        """
        Returns the lowest position holding the item or `None` if the item is not indexed.
        """

        if (positions := self._positions.get(item)) is None:
            return None

        return positions[0]

    def positions(self, item: Item) -> Tuple[int, ...]:
        if (positions := self._positions.get(item)) is None:
            return ()

        return tuple(positions)

    def total(self) -> int:
        """
        Returns the number of indexed positions across all items.
        """

        return sum(len(positions) for positions in self._positions.values())
