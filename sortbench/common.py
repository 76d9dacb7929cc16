"""Shared helpers: input loading, memory probing and the timing harness."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from itertools import pairwise
from pathlib import Path

import psutil

DEFAULT_REPEAT = 5


@dataclass(frozen=True)
class BenchmarkResult:
    """Timing and memory figures collected for one sorting algorithm."""

    title: str
    average_us: int
    memory_before_kb: int
    memory_after_kb: int

    @property
    def memory_delta_kb(self) -> int:
        """Growth of the working set across the last run; never negative."""
        return max(self.memory_after_kb - self.memory_before_kb, 0)

    def format(self) -> str:
        """Render the result as the report block printed by the command."""
        return (
            f"====== {self.title} ======\n"
            f"平均排序時間：{self.average_us} 微秒\n"
            f"排序前記憶體使用量：{self.memory_before_kb} KB\n"
            f"排序後記憶體使用量：{self.memory_after_kb} KB\n"
            f"記憶體使用變化量：{self.memory_delta_kb} KB\n\n"
        )


def read_data(path: str | os.PathLike[str]) -> list[int]:
    """Read whitespace-separated integers, stopping at the first token that is not one.

    Raises OSError (e.g. FileNotFoundError) when the file cannot be opened.
    """
    numbers: list[int] = []
    with Path(path).open(encoding="utf-8") as handle:
        for token in _tokens(handle):
            try:
                numbers.append(int(token))
            except ValueError:
                break
    return numbers


def _tokens(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        yield from line.split()


def memory_usage_kb() -> int:
    """Return the resident set size of the current process in kilobytes."""
    return psutil.Process().memory_info().rss // 1024


def is_sorted(items: Sequence) -> bool:
    """Return True when the items are in non-decreasing order."""
    return all(not later < earlier for earlier, later in pairwise(items))


def run_benchmark(
    title: str,
    sort_func: Callable[[list], None],
    data: Sequence,
    repeat: int = DEFAULT_REPEAT,
) -> BenchmarkResult:
    """Sort a fresh copy of ``data`` ``repeat`` times and report the average time.

    ``sort_func`` sorts a list in place. Copying the input is not timed.
    Memory figures are those of the last run.
    """
    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    total_us = 0
    memory_before = memory_after = 0
    for _ in range(repeat):
        work = list(data)
        memory_before = memory_usage_kb()
        start = time.perf_counter_ns()
        sort_func(work)
        elapsed = time.perf_counter_ns() - start
        memory_after = memory_usage_kb()
        if not is_sorted(work):
            print(f">>> 錯誤：{title} 沒排好！", file=sys.stderr)
        total_us += elapsed // 1000
    return BenchmarkResult(
        title=title,
        average_us=total_us // repeat,
        memory_before_kb=memory_before,
        memory_after_kb=memory_after,
    )