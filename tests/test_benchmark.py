from datetime import timedelta

from structkit.benchmark import BenchmarkResult, main, run_benchmark


def test_run_benchmark_sorts_both_lists():
    result = run_benchmark(5, 40, seed=7)
    assert isinstance(result, BenchmarkResult)
    assert result.singly_length == 5
    assert result.doubly_length == 40
    assert result.singly_sorted is True
    assert result.doubly_sorted is True


def test_run_benchmark_durations_are_consistent():
    result = run_benchmark(3, 30, seed=1)
    assert result.singly_elapsed >= timedelta(0)
    assert result.doubly_elapsed >= timedelta(0)
    assert result.total_elapsed >= result.singly_elapsed
    assert result.total_elapsed >= result.doubly_elapsed


def test_run_benchmark_empty_lists():
    result = run_benchmark(0, 0, seed=2)
    assert result.singly_length == 0
    assert result.doubly_length == 0
    assert result.singly_sorted and result.doubly_sorted


def test_main_prints_report(capsys):
    assert main(["--singly", "4", "--doubly", "25", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "LinkedList sort:" in out
    assert "DoublyLinkedList sort:" in out
    assert "All time:" in out
    assert "LinkedList sorted correctly:       1" in out
    assert "DoublyLinkedList sorted correctly: 1" in out
    assert out.rstrip().endswith("dll:")