"""Heap sort and merge sort variants with a timing and memory benchmark harness."""

__version__ = "0.1.0"