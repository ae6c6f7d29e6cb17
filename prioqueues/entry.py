"""Shared value type and error for the priority queues."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """A value stored in a priority queue together with its priority."""

    value: int
    priority: int


class EmptyQueueError(IndexError):
    """Raised when an operation needs an element but the queue is empty."""

    def __init__(self, message: str = "no elements in the queue") -> None:
        super().__init__(message)