"""Interactive text menus for exercising both priority queues."""

import argparse
import random
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple

from .benchmark import run_benchmarks
from .entry import EmptyQueueError
from .heap_queue import HeapPriorityQueue
from .linked_queue import LinkedPriorityQueue

DATA_FILE = "dane.txt"
RANDOM_LIMIT = 10000
EMPTY_MESSAGE = "No elements in the queue"
INVALID_CHOICE = "Invalid choice!"
INVALID_INPUT = "Invalid input!"
PROMPT = "Your choice: "

HEAP_MENU = """
--- Heap menu ---
1. Build from file
2. Remove element
3. Add element
4. Find max
5. Create randomly
6. Show size
0. Back"""

LIST_MENU = """
--- Linked list queue menu ---
1. Remove element
2. Add element
3. Find max
4. Show size
5. Show queue
0. Back"""

MAIN_MENU = """=== MAIN MENU ===
1. Priority queue on a linked list
2. Priority queue on a heap
3. Run benchmarks
0. Exit"""


class _EndOfInput(Exception):
    """The token stream ran out."""


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise _EndOfInput from None


def _read_int(tokens: Iterator[str]) -> Optional[int]:
    token = _next_token(tokens)
    try:
        return int(token)
    except ValueError:
        return None


def _read_pair(tokens: Iterator[str], out: TextIO) -> Optional[Tuple[int, int]]:
    print("Enter value and priority: ", end="", file=out)
    value = _read_int(tokens)
    priority = _read_int(tokens)
    if value is None or priority is None:
        print(INVALID_INPUT, file=out)
        return None
    return value, priority


def _load_pairs(path) -> List[Tuple[int, int]]:
    """Read whitespace-separated value/priority pairs, stopping at the first bad token."""
    try:
        words = Path(path).read_text(encoding="utf-8").split()
    except OSError:
        return []
    pairs: List[Tuple[int, int]] = []
    numbers = iter(words)
    for first, second in zip(numbers, numbers):
        try:
            pairs.append((int(first), int(second)))
        except ValueError:
            break
    return pairs


def _prompt_choice(tokens: Iterator[str], out: TextIO, menu: str) -> Optional[int]:
    print(menu, file=out)
    print(PROMPT, end="", file=out)
    return _read_int(tokens)


def heap_menu(
    queue: HeapPriorityQueue,
    tokens: Iterable[str],
    out: TextIO = sys.stdout,
    data_file=DATA_FILE,
    rng: Optional[random.Random] = None,
) -> None:
    """Run the heap queue menu until the user picks 0 or input runs out."""
    tokens = iter(tokens)
    rng = rng if rng is not None else random.Random()
    try:
        while True:
            choice = _prompt_choice(tokens, out, HEAP_MENU)
            match choice:
                case 0:
                    return
                case 1:
                    queue.clear()
                    for value, priority in _load_pairs(data_file):
                        queue.insert(value, priority)
                case 2:
                    try:
                        queue.extract_max()
                    except EmptyQueueError:
                        print(EMPTY_MESSAGE, file=out)
                case 3:
                    pair = _read_pair(tokens, out)
                    if pair is not None:
                        queue.insert(*pair)
                case 4:
                    try:
                        top = queue.find_max()
                    except EmptyQueueError:
                        print(EMPTY_MESSAGE, file=out)
                    else:
                        print(f"Max element: {top.value} Max priority: {top.priority}", file=out)
                case 5:
                    print("How many elements to generate randomly? ", end="", file=out)
                    count = _read_int(tokens)
                    if count is None:
                        print(INVALID_INPUT, file=out)
                        continue
                    queue.clear()
                    for _ in range(count):
                        value = rng.randrange(RANDOM_LIMIT)
                        priority = rng.randrange(RANDOM_LIMIT)
                        queue.insert(value, priority)
                case 6:
                    print(f"Heap size: {len(queue)}", file=out)
                case _:
                    print(INVALID_CHOICE, file=out)
    except _EndOfInput:
        return


def list_menu(
    queue: LinkedPriorityQueue,
    tokens: Iterable[str],
    out: TextIO = sys.stdout,
) -> None:
    """Run the linked-list queue menu until the user picks 0 or input runs out."""
    tokens = iter(tokens)
    try:
        while True:
            choice = _prompt_choice(tokens, out, LIST_MENU)
            match choice:
                case 0:
                    return
                case 1:
                    try:
                        queue.extract_max()
                    except EmptyQueueError:
                        print(EMPTY_MESSAGE, file=out)
                case 2:
                    pair = _read_pair(tokens, out)
                    if pair is not None:
                        queue.insert(*pair)
                case 3:
                    # Option 3 removes the front element and then reports the size.
                    try:
                        queue.extract_max()
                    except EmptyQueueError:
                        print(EMPTY_MESSAGE, file=out)
                    print(f"Queue size: {len(queue)}", file=out)
                case 4:
                    print(f"Queue size: {len(queue)}", file=out)
                case 5:
                    print(queue.describe(), file=out)
                case _:
                    print(INVALID_CHOICE, file=out)
    except _EndOfInput:
        return


def main_menu(tokens: Iterable[str], out: TextIO = sys.stdout, benchmark_dir=".") -> None:
    """Run the top-level menu until the user picks 0 or input runs out."""
    tokens = iter(tokens)
    heap = HeapPriorityQueue()
    linked = LinkedPriorityQueue()
    try:
        while True:
            choice = _prompt_choice(tokens, out, MAIN_MENU)
            match choice:
                case 0:
                    print("End of program.", file=out)
                    return
                case 1:
                    list_menu(linked, tokens, out)
                case 2:
                    heap_menu(heap, tokens, out, DATA_FILE, random.Random())
                case 3:
                    run_benchmarks(benchmark_dir, log=lambda message: print(message, file=out))
                case _:
                    print(INVALID_CHOICE, file=out)
    except _EndOfInput:
        return


def _stream_tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Optional[List[str]] = None) -> int:
    """Start the interactive menu reading from standard input."""
    parser = argparse.ArgumentParser(description="Interactive priority queue explorer.")
    parser.add_argument(
        "--benchmark-dir",
        default=".",
        help="directory where benchmark CSV files are written",
    )
    args = parser.parse_args(argv)
    main_menu(_stream_tokens(sys.stdin), sys.stdout, args.benchmark_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())