"""Priority queue backed by a binary max-heap."""

from dataclasses import replace
from typing import Iterator, List

from .entry import EmptyQueueError, Entry


class HeapPriorityQueue:
    """Binary max-heap ordered by priority."""

    def __init__(self) -> None:
        self._heap: List[Entry] = []

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index].priority > heap[parent].priority:
                heap[index], heap[parent] = heap[parent], heap[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            largest = index
            if left < size and heap[left].priority > heap[largest].priority:
                largest = left
            if right < size and heap[right].priority > heap[largest].priority:
                largest = right
            if largest == index:
                break
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def insert(self, value: int, priority: int) -> None:
        """Add ``value`` with the given priority."""
        self._heap.append(Entry(value, priority))
        self._sift_up(len(self._heap) - 1)

    def extract_max(self) -> Entry:
        """Remove and return the element with the highest priority."""
        if not self._heap:
            raise EmptyQueueError()
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def find_max(self) -> Entry:
        """Return the element with the highest priority without removing it."""
        if not self._heap:
            raise EmptyQueueError()
        return self._heap[0]

    def modify_key(self, value: int, priority: int) -> bool:
        """Change the priority of the first element holding ``value``.

        Returns False, leaving the heap untouched, when no element holds it.
        """
        index = next(
            (i for i, entry in enumerate(self._heap) if entry.value == value), None
        )
        if index is None:
            return False
        old_priority = self._heap[index].priority
        self._heap[index] = replace(self._heap[index], priority=priority)
        if priority > old_priority:
            self._sift_up(index)
        elif priority < old_priority:
            self._sift_down(index)
        return True

    def clear(self) -> None:
        """Remove every element."""
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Entry]:
        """Iterate over the elements in heap storage order."""
        return iter(list(self._heap))