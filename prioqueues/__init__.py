"""Max-priority queues on an ordered list and on a binary heap, with a menu and a benchmark."""

__version__ = "0.1.0"