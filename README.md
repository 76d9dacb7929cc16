# sortbench

Times several heap sort and merge sort implementations on a list of integers
read from a whitespace-separated text file. For each algorithm it reports the
average sorting time over five runs, in microseconds, and the resident memory
of the process, in kilobytes, before and after the last run, together with the
growth between the two (never below zero).

The algorithms measured, in report order:

- Heap sort: a sort built on the standard-library `heapq` module, a basic
  heap sort that moves children up into a hole, and an optimised variant with
  a bottom-up heap build and swap-based sift-down.
- Merge sort: the built-in stable `list.sort`, an iterative bottom-up merge
  sort, and a natural merge sort that merges the input's ascending runs
  pairwise.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Run the command without arguments and it asks for the number of elements N,
then reads `testcaseN.txt` from the current directory (for example
`testcase1000.txt` for 1000):

```
sortbench
```

The element count can also be given on the command line, and `--directory`
names the directory that holds the testcase files:

```
sortbench 1000
sortbench 1000 --directory data
```

Reading stops at the first token in the file that is not an integer. If the
count is not a number, the file cannot be opened, or it holds no integers, the
command prints an error to standard error and exits with status 1. If an
algorithm ever leaves its input out of order, a warning is printed to standard
error.

## Using the library

```python
from sortbench.common import read_data, run_benchmark
from sortbench.heapsort import heap_sort_basic
from sortbench.mergesort import natural_merge_sort
from sortbench.cli import run_all

data = read_data("testcase1000.txt")

items = list(data)
heap_sort_basic(items)          # sorts the list in place
print(items[:10])

for result in run_all(data):    # one BenchmarkResult per algorithm
    print(result.format(), end="")

print(run_benchmark("Natural Merge Sort", natural_merge_sort, data, repeat=3).average_us)
```

- `sortbench.common`: `read_data(path)`, `memory_usage_kb()`,
  `is_sorted(items)`, `run_benchmark(title, sort_func, data, repeat=5)` and the
  `BenchmarkResult` dataclass (`title`, `average_us`, `memory_before_kb`,
  `memory_after_kb`, the `memory_delta_kb` property and `format()`).
  `run_benchmark` raises `ValueError` when `repeat` is below 1.
- `sortbench.heapsort`: `library_heap_sort`, `heap_sort_basic`,
  `heap_sort_optimized` and their `benchmark_*` functions.
- `sortbench.mergesort`: `library_stable_sort`, `merge_sort_iterative`,
  `natural_merge_sort` and their `benchmark_*` functions.
- `sortbench.cli`: `run_all(data)` and `main(argv=None)`.

Every sorting function takes a list and sorts it in place, returning `None`.
The `benchmark_*` functions and `run_benchmark` copy the input for each run,
so the data passed to them is left unchanged.

## What it does not do

Only the heap sort and merge sort families are benchmarked; there are no
insertion sort or quick sort variants. Test data files are not generated: the
`testcaseN.txt` files must already exist.