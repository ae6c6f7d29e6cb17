"""Priority queue kept as a sequence ordered by descending priority."""

from bisect import bisect_right
from typing import Iterator, List

from .entry import EmptyQueueError, Entry


def _sort_key(entry: Entry) -> int:
    return -entry.priority


class LinkedPriorityQueue:
    """Ordered priority queue: the front always holds the highest priority.

    Elements with equal priority keep their insertion order, so a new
    element is placed after every element whose priority is not lower.
    """

    def __init__(self) -> None:
        self._entries: List[Entry] = []

    def insert(self, value: int, priority: int) -> None:
        """Insert ``value`` behind all elements of equal or higher priority."""
        position = bisect_right(self._entries, -priority, key=_sort_key)
        self._entries.insert(position, Entry(value, priority))

    def extract_max(self) -> Entry:
        """Remove and return the element at the front of the queue."""
        if not self._entries:
            raise EmptyQueueError()
        return self._entries.pop(0)

    def find_max(self) -> Entry:
        """Return the element at the front of the queue without removing it."""
        if not self._entries:
            raise EmptyQueueError()
        return self._entries[0]

    def modify_key(self, index: int, priority: int) -> None:
        """Give the element at position ``index`` a new priority.

        The element is taken out and inserted again with the new priority.
        """
        if not self._entries:
            raise EmptyQueueError()
        if not 0 <= index < len(self._entries):
            raise IndexError(f"invalid index: {index}")
        entry = self._entries.pop(index)
        self.insert(entry.value, priority)

    def describe(self) -> str:
        """Return a one-line listing of the queue from front to back."""
        if not self._entries:
            return "No elements in the queue"
        return " ".join(
            f"(Priority: {entry.priority}, Value: {entry.value})"
            for entry in self._entries
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))