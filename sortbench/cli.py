"""Command-line entry point that runs every sorting benchmark on one input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from .common import BenchmarkResult, read_data
from .heapsort import (
    benchmark_heap_sort_basic,
    benchmark_heap_sort_optimized,
    benchmark_library_heap,
)
from .mergesort import (
    benchmark_library_merge,
    benchmark_merge_sort_iterative,
    benchmark_natural_merge_sort,
)

_PROMPT = "請輸入元素個數（會讀取 testcaseN.txt）："

_BENCHMARKS = (
    benchmark_library_heap,
    benchmark_heap_sort_basic,
    benchmark_heap_sort_optimized,
    benchmark_library_merge,
    benchmark_merge_sort_iterative,
    benchmark_natural_merge_sort,
)


def run_all(data: Sequence) -> list[BenchmarkResult]:
    """Run every benchmark on ``data`` in report order."""
    return [benchmark(data) for benchmark in _BENCHMARKS]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sortbench",
        description="Benchmark sorting algorithms on the integers in testcaseN.txt.",
    )
    parser.add_argument(
        "count", nargs="?", help="number of elements N; prompted for when omitted"
    )
    parser.add_argument(
        "--directory", default=".", help="directory holding the testcase files"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Read testcaseN.txt, run all benchmarks and print their reports."""
    args = _parse_args(argv)
    count = args.count
    if count is None:
        try:
            count = input(_PROMPT)
        except EOFError:
            count = ""
    try:
        n = int(count.strip())
    except ValueError:
        print("資料讀取失敗，請確認檔案是否存在。", file=sys.stderr)
        return 1

    path = Path(args.directory) / f"testcase{n}.txt"
    try:
        data = read_data(path)
    except OSError:
        print("開啟檔案失敗！", file=sys.stderr)
        data = []
    if not data:
        print("資料讀取失敗，請確認檔案是否存在。", file=sys.stderr)
        return 1

    for result in run_all(data):
        sys.stdout.write(result.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())