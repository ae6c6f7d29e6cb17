"""Timing benchmark comparing the heap and the ordered-list priority queues."""

import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Protocol, Sequence, Tuple

from .entry import Entry
from .heap_queue import HeapPriorityQueue
from .linked_queue import LinkedPriorityQueue

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

TEST_SIZES = (5000, 8000, 10000, 15000, 20000, 35000, 42500, 50000, 80000, 100000)
LARGE_SIZE_THRESHOLD = 35000
SMALL_SIZE_TRIALS = 50
LARGE_SIZE_TRIALS = 10

HEAP_NAME = "Kopiec"
LIST_NAME = "Lista wiązana"

OPERATION_HEADER = "kolejka,liczba_elementow,czas_ns"
ALL_HEADER = "operacja,kolejka,liczba_elementow,czas_ns"
ALL_FILE = "wyniki.csv"

# File name and result field of every per-operation CSV file.
OPERATION_FILES = (
    ("insert.csv", "insert_ns"),
    ("extract.csv", "extract_ns"),
    ("findMax.csv", "find_ns"),
    ("modifyKey.csv", "modify_ns"),
    ("returnSize.csv", "size_ns"),
)

# Operation label and result field of every row in the combined CSV file.
ALL_FILE_ROWS = (
    ("insert", "insert_ns"),
    ("extract", "extract_ns"),
    ("returnSize", "size_ns"),
    ("modifyKey", "modify_ns"),
    ("findMax", "find_ns"),
)

Dataset = List[Tuple[int, int]]
Log = Callable[[str], None]


class _Queue(Protocol):
    def insert(self, value: int, priority: int) -> None: ...

    def extract_max(self) -> Entry: ...

    def find_max(self) -> Entry: ...

    def modify_key(self, key: int, priority: int) -> object: ...

    def __len__(self) -> int: ...


@dataclass(frozen=True)
class BenchmarkResult:
    """Average time in nanoseconds of each operation for one queue and size."""

    queue_name: str
    size: int
    insert_ns: int
    extract_ns: int
    find_ns: int
    modify_ns: int
    size_ns: int


def _random_int32(rng: random.Random) -> int:
    return rng.randint(INT32_MIN, INT32_MAX)


def _timed(operation: Callable[[], object]) -> int:
    start = time.perf_counter_ns()
    operation()
    return time.perf_counter_ns() - start


def generate_dataset(size: int, rng: random.Random) -> Dataset:
    """Return ``size`` random (value, priority) pairs, highest priority first."""
    pairs: Dataset = []
    for _ in range(size):
        priority = _random_int32(rng)
        value = _random_int32(rng)
        pairs.append((value, priority))
    pairs.sort(key=lambda pair: pair[1], reverse=True)
    return pairs


def run_test(
    queue_name: str,
    queue_factory: Callable[[], _Queue],
    size: int,
    datasets: Sequence[Dataset],
    rng: random.Random,
    log: Optional[Log] = None,
) -> BenchmarkResult:
    """Time every queue operation once per dataset and average the results.

    Each dataset is loaded into three fresh queues; one is used for the size,
    find-max and modify-key measurements, one for insert and one for extract.
    """
    if not datasets:
        raise ValueError("at least one dataset is needed")
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    emit: Log = log if log is not None else (lambda _message: None)

    total_insert = total_extract = total_find = total_modify = total_size = 0
    for trial, data in enumerate(datasets):
        insert_queue, extract_queue, probe_queue = (queue_factory() for _ in range(3))
        for value, priority in data:
            insert_queue.insert(value, priority)
            extract_queue.insert(value, priority)
            probe_queue.insert(value, priority)

        suffix = f"{queue_name} {size} elements for trial {trial}"

        total_size += _timed(lambda: len(probe_queue))
        emit(f"returnsize done for: {queue_name} size = {len(probe_queue)} {size} elements for trial {trial}")

        total_find += _timed(probe_queue.find_max)
        emit(f"find-max done for: {suffix}")

        new_value, new_priority = _random_int32(rng), _random_int32(rng)
        total_insert += _timed(lambda: insert_queue.insert(new_value, new_priority))
        emit(f"insert done for: {suffix}")

        total_extract += _timed(extract_queue.extract_max)
        emit(f"extractmax done for: {suffix}")

        key, key_priority = rng.randrange(size), _random_int32(rng)
        total_modify += _timed(lambda: probe_queue.modify_key(key, key_priority))
        emit(f"modify done for: {suffix}")

    trials = len(datasets)
    return BenchmarkResult(
        queue_name=queue_name,
        size=size,
        insert_ns=total_insert // trials,
        extract_ns=total_extract // trials,
        find_ns=total_find // trials,
        modify_ns=total_modify // trials,
        size_ns=total_size // trials,
    )


def write_results(results: Iterable[BenchmarkResult], output_dir) -> List[Path]:
    """Write the per-operation CSV files and the combined one; return their paths."""
    results = list(results)
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    for file_name, field in OPERATION_FILES:
        lines = [OPERATION_HEADER]
        lines.extend(
            f"{result.queue_name},{result.size},{getattr(result, field)}"
            for result in results
        )
        path = directory / file_name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        written.append(path)

    all_lines = [ALL_HEADER]
    for result in results:
        all_lines.extend(
            f"{label},{result.queue_name},{result.size},{getattr(result, field)}"
            for label, field in ALL_FILE_ROWS
        )
    all_path = directory / ALL_FILE
    all_path.write_text("\n".join(all_lines) + "\n", encoding="utf-8")
    written.append(all_path)
    return written


def run_benchmarks(
    output_dir,
    sizes: Optional[Iterable[int]] = None,
    rng: Optional[random.Random] = None,
    log: Optional[Log] = print,
) -> List[BenchmarkResult]:
    """Benchmark both queues for every size and write the CSV reports."""
    rng = rng if rng is not None else random.Random()
    results: List[BenchmarkResult] = []
    for size in TEST_SIZES if sizes is None else sizes:
        trials = SMALL_SIZE_TRIALS if size <= LARGE_SIZE_THRESHOLD else LARGE_SIZE_TRIALS
        datasets = [generate_dataset(size, rng) for _ in range(trials)]
        results.append(run_test(HEAP_NAME, HeapPriorityQueue, size, datasets, rng, log))
        results.append(run_test(LIST_NAME, LinkedPriorityQueue, size, datasets, rng, log))
    write_results(results, output_dir)
    if log is not None:
        log("Tests finished, results saved to files.")
    return results