"""Heap sort variants and their benchmarks."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

from .common import BenchmarkResult, run_benchmark


def library_heap_sort(items: list) -> None:
    """Sort in place using the standard library heap."""
    heap = list(items)
    heapq.heapify(heap)
    items[:] = [heapq.heappop(heap) for _ in range(len(heap))]


def _adjust(items: list, root: int, end: int) -> None:
    """Move the element at ``root`` down into the max-heap ``items[:end]`` using a hole."""
    element = items[root]
    hole = root
    child = 2 * hole + 1
    while child < end:
        if child + 1 < end and items[child] < items[child + 1]:
            child += 1
        if element >= items[child]:
            break
        items[hole] = items[child]
        hole = child
        child = 2 * hole + 1
    items[hole] = element


def heap_sort_basic(items: list) -> None:
    """Sort in place with a textbook max-heap that shifts children up into a hole."""
    n = len(items)
    for root in range(n // 2 - 1, -1, -1):
        _adjust(items, root, n)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _adjust(items, 0, end)


def _sift_down(items: list, start: int, end: int) -> None:
    """Swap the element at ``start`` downwards until ``items[:end]`` is a max-heap."""
    root = start
    while (child := 2 * root + 1) < end:
        if child + 1 < end and items[child] < items[child + 1]:
            child += 1
        if not items[root] < items[child]:
            return
        items[root], items[child] = items[child], items[root]
        root = child


def heap_sort_optimized(items: list) -> None:
    """Sort in place with a bottom-up heap build and swap-based sift-down."""
    n = len(items)
    for start in range(n // 2 - 1, -1, -1):
        _sift_down(items, start, n)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)


def benchmark_library_heap(data: Sequence) -> BenchmarkResult:
    """Time the standard library heap sort."""
    return run_benchmark("STL Heap Sort (make_heap + sort_heap)", library_heap_sort, data)


def benchmark_heap_sort_basic(data: Sequence) -> BenchmarkResult:
    """Time the basic heap sort."""
    return run_benchmark("基本 Heap Sort", heap_sort_basic, data)


def benchmark_heap_sort_optimized(data: Sequence) -> BenchmarkResult:
    """Time the optimized heap sort."""
    return run_benchmark(
        "Optimized Heap Sort (Floyd + Bottom-Up Build)", heap_sort_optimized, data
    )