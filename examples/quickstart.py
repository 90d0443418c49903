import logging

from indexed_heap import IndexedMinHeap


def show(heap: IndexedMinHeap[int]) -> None:
    print(heap)
    print({item: heap.positions(item) for item in sorted(set(heap))})
    print()


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    heap = IndexedMinHeap[int]([8, 3, 5, 6, 3, 3, 2])
    show(heap)

    heap.add(4)
    print("added 4")
    show(heap)

    heap.remove(2)
    print("removed 2")
    show(heap)

    print("polled:", heap.poll())
    show(heap)

    print("contains 3:", 3 in heap)


main()
