"""Merge sort variants and their benchmarks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .common import BenchmarkResult, run_benchmark


def _merge(left: Sequence, right: Sequence) -> list:
    """Merge two sorted sequences; ties keep the element from ``left`` first."""
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def library_stable_sort(items: list) -> None:
    """Sort in place with the built-in stable sort."""
    items.sort()


def merge_sort_iterative(items: list) -> None:
    """Sort in place with a bottom-up merge sort that doubles the run width each pass."""
    n = len(items)
    current = list(items)
    width = 1
    while width < n:
        merged = []
        for start in range(0, n, 2 * width):
            merged.extend(
                _merge(current[start:start + width], current[start + width:start + 2 * width])
            )
        current = merged
        width *= 2
    items[:] = current


def _ascending_runs(items: Sequence) -> Iterator[list]:
    run: list = []
    for item in items:
        if run and item < run[-1]:
            yield run
            run = []
        run.append(item)
    if run:
        yield run


def natural_merge_sort(items: list) -> None:
    """Sort in place by merging the naturally ascending runs of the input pairwise."""
    if len(items) <= 1:
        return
    runs = list(_ascending_runs(items))
    while len(runs) > 1:
        merged = [_merge(runs[i], runs[i + 1]) for i in range(0, len(runs) - 1, 2)]
        if len(runs) % 2 == 1:
            merged.append(runs[-1])
        runs = merged
    items[:] = runs[0]


def benchmark_library_merge(data: Sequence) -> BenchmarkResult:
    """Time the built-in stable sort."""
    return run_benchmark("STL Merge Sort (stable_sort)", library_stable_sort, data)


def benchmark_merge_sort_iterative(data: Sequence) -> BenchmarkResult:
    """Time the iterative merge sort."""
    return run_benchmark("Iterative Merge Sort", merge_sort_iterative, data)


def benchmark_natural_merge_sort(data: Sequence) -> BenchmarkResult:
    """Time the natural merge sort."""
    return run_benchmark("Natural Merge Sort", natural_merge_sort, data)