import io
import random

from prioqueues.cli import heap_menu, list_menu, main, main_menu
from prioqueues.entry import Entry
from prioqueues.heap_queue import HeapPriorityQueue
from prioqueues.linked_queue import LinkedPriorityQueue


def _run_heap(script, data_file="missing-file.txt", rng=None):
    queue = HeapPriorityQueue()
    out = io.StringIO()
    heap_menu(queue, script.split(), out, data_file, rng or random.Random(0))
    return queue, out.getvalue()


def _run_list(script, queue=None):
    queue = queue if queue is not None else LinkedPriorityQueue()
    out = io.StringIO()
    list_menu(queue, script.split(), out)
    return queue, out.getvalue()


def test_heap_menu_insert_and_find_max():
    queue, output = _run_heap("3 5 10 3 7 20 4 0")
    assert len(queue) == 2
    assert queue.find_max() == Entry(7, 20)
    assert "Max element: 7 Max priority: 20" in output


def test_heap_menu_build_from_file(tmp_path):
    data = tmp_path / "data.txt"
    data.write_text("1 5\n2 9\n3 1\n", encoding="utf-8")
    queue, _ = _run_heap("3 100 100 1 0", data_file=data)
    assert len(queue) == 3
    assert queue.find_max() == Entry(2, 9)


def test_heap_menu_build_stops_at_bad_token(tmp_path):
    data = tmp_path / "data.txt"
    data.write_text("1 5 x 9 3 1", encoding="utf-8")
    queue, _ = _run_heap("1 0", data_file=data)
    assert list(queue) == [Entry(1, 5)]


def test_heap_menu_build_from_missing_file_empties_queue(tmp_path):
    queue, _ = _run_heap("3 1 1 1 0", data_file=tmp_path / "absent.txt")
    assert len(queue) == 0


def test_heap_menu_random_fill():
    queue, output = _run_heap("5 7 6 0", rng=random.Random(3))
    assert len(queue) == 7
    assert all(0 <= e.value < 10000 and 0 <= e.priority < 10000 for e in queue)
    assert "Heap size: 7" in output


def test_heap_menu_extract_from_empty_reports():
    queue, output = _run_heap("2 4 0")
    assert len(queue) == 0
    assert output.count("No elements in the queue") == 2


def test_heap_menu_invalid_choice_and_end_of_input():
    queue, output = _run_heap("9 abc")
    assert output.count("Invalid choice!") == 2
    assert len(queue) == 0


def test_list_menu_display_and_option_three_removes_front():
    queue, output = _run_list("2 1 5 2 2 9 5 3 0")
    assert "(Priority: 9, Value: 2) (Priority: 5, Value: 1)" in output
    assert "Queue size: 1" in output
    assert list(queue) == [Entry(1, 5)]


def test_list_menu_extract_and_size():
    queue = LinkedPriorityQueue()
    queue.insert(4, 1)
    queue.insert(5, 8)
    queue, output = _run_list("1 4 0", queue)
    assert list(queue) == [Entry(4, 1)]
    assert "Queue size: 1" in output


def test_list_menu_empty_display():
    _, output = _run_list("5 1 0")
    assert output.count("No elements in the queue") == 2


def test_list_menu_bad_pair_is_rejected():
    queue, output = _run_list("2 x 3 0")
    assert "Invalid input!" in output
    assert len(queue) == 0


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3 8 2\n6\n0\n0\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "Heap size: 1" in captured
    assert "End of program." in captured