import random

import pytest

from sortbench.heapsort import (
    benchmark_heap_sort_basic,
    benchmark_heap_sort_optimized,
    benchmark_library_heap,
    heap_sort_basic,
    heap_sort_optimized,
    library_heap_sort,
)

WORDS = ["pear", "apple", "fig", "banana", "apple"]
SORTED_WORDS = ["apple", "apple", "banana", "fig", "pear"]


def _cases():
    rng = random.Random(1234)
    yield []
    yield [7]
    yield [2, 1]
    yield [4, 4, 4, 4]
    yield list(range(50))
    yield list(range(50, 0, -1))
    for size in (3, 10, 101, 500):
        yield [rng.randint(-1000, 1000) for _ in range(size)]


CASES = list(_cases())


@pytest.mark.parametrize("data", CASES)
def test_library_heap_sort_sorts(data):
    work = list(data)
    assert library_heap_sort(work) is None
    assert work == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_heap_sort_basic_sorts(data):
    work = list(data)
    assert heap_sort_basic(work) is None
    assert work == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_heap_sort_optimized_sorts(data):
    work = list(data)
    assert heap_sort_optimized(work) is None
    assert work == sorted(data)


def test_library_heap_sort_strings():
    words = list(WORDS)
    library_heap_sort(words)
    assert words == SORTED_WORDS


def test_heap_sort_basic_strings():
    words = list(WORDS)
    heap_sort_basic(words)
    assert words == SORTED_WORDS


def test_heap_sort_optimized_strings():
    words = list(WORDS)
    heap_sort_optimized(words)
    assert words == SORTED_WORDS


@pytest.mark.parametrize(
    "bench, title",
    [
        (benchmark_library_heap, "STL Heap Sort (make_heap + sort_heap)"),
        (benchmark_heap_sort_basic, "基本 Heap Sort"),
        (benchmark_heap_sort_optimized, "Optimized Heap Sort (Floyd + Bottom-Up Build)"),
    ],
)
def test_benchmarks_report_title(bench, title, capsys):
    result = bench([9, 2, 7, 4, 1])
    assert result.title == title
    assert result.format().startswith(f"====== {title} ======")
    assert capsys.readouterr().err == ""