# prioqueues

Two max-priority queues of integer `(value, priority)` pairs, an interactive
console menu for trying them out, and a benchmark that times their operations
against each other.

- `LinkedPriorityQueue` (`prioqueues.linked_queue`): a sequence kept in
  descending priority order. A new element goes after every element whose
  priority is not lower, so equal priorities keep their insertion order.
  `find_max` and `extract_max` work on the front of the sequence.
  `modify_key(index, priority)` takes the element at position `index` out and
  inserts it again with the new priority; it raises `IndexError` for a position
  outside the queue. `describe()` returns a one-line listing of the queue.
- `HeapPriorityQueue` (`prioqueues.heap_queue`): an array-backed binary
  max-heap. `modify_key(value, priority)` changes the priority of the first
  element that holds `value` and returns `True`, or returns `False` and leaves
  the heap unchanged when no element holds it. `clear()` empties the heap.
  Iteration yields the elements in heap storage order.

Both hold `Entry` objects (`prioqueues.entry`, with fields `value` and
`priority`), support `len()` and iteration, and raise `EmptyQueueError`
(a subclass of `IndexError`) from `find_max` and `extract_max` when empty.

## Installation

```
pip install .
```

## Library use

```python
from prioqueues.heap_queue import HeapPriorityQueue
from prioqueues.linked_queue import LinkedPriorityQueue

heap = HeapPriorityQueue()
heap.insert(10, 3)
heap.insert(20, 7)
heap.insert(30, 5)
print(heap.find_max())     # Entry(value=20, priority=7)
heap.modify_key(10, 9)     # True: value 10 now has priority 9
print(heap.extract_max())  # Entry(value=10, priority=9)
print(len(heap))           # 2

queue = LinkedPriorityQueue()
queue.insert(1, 4)
queue.insert(2, 8)
queue.modify_key(1, 0)     # the element at position 1 gets priority 0
print(queue.describe())    # (Priority: 8, Value: 2) (Priority: 0, Value: 1)
```

## Interactive menu

```
prioqueues [--benchmark-dir DIR]
```

The command reads whitespace-separated tokens from standard input and stops at
option 0 of the main menu or at the end of input. The main menu offers:

1. The list queue menu: remove the front element, add an element, option 3
   (labelled "Find max"), which removes the front element and then prints the
   size, show the size, and print the whole queue.
2. The heap menu: build the heap from `dane.txt` (whitespace-separated value
   and priority pairs in the current directory; reading stops at the first
   token that is not a number), remove the maximum, add an element, show the
   maximum, fill the heap with a given number of random elements (values and
   priorities below 10000), and show the size.
3. The benchmark, writing its CSV files to `--benchmark-dir` (default: the
   current directory).

The same menus can be driven from code with `prioqueues.cli.main_menu`,
`list_menu` and `heap_menu`, which take any iterable of tokens and an output
stream.

## Benchmark

`prioqueues.benchmark.run_benchmarks(output_dir, sizes=None, rng=None, log=print)`
builds random datasets (by default of 5,000 to 100,000 elements; 50 datasets
per size up to 35,000 and 10 above) and times `len`, `find_max`, `insert`,
`extract_max` and `modify_key` once per dataset on both queues. It returns a
list of `BenchmarkResult` objects with the average time of each operation in
nanoseconds and writes them with `write_results` to `insert.csv`,
`extract.csv`, `findMax.csv`, `modifyKey.csv` and `returnSize.csv`, with all
rows together in `wyniki.csv`. `generate_dataset` and `run_test` can be used
on their own for smaller runs.

## Tests

```
pip install .[test]
pytest
```