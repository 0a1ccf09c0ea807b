"""
Constants for Majority Vote Benchmarking
========================================

This module defines global constants used throughout the majority_vote package.
"""

# Export format for tracker snapshot history.
# Column order is fixed: readers match on the header line exactly.
CSV_COLUMNS = [
    "InputSize",
    "Comparisons",
    "Swaps",
    "ArrayAccesses",
    "MemoryAllocations",
    "ExecutionTime(ns)",
]
CSV_HEADER = ",".join(CSV_COLUMNS)

# Benchmark defaults
DEFAULT_SIZES = (100, 1000, 10000, 100000)
WARMUP_ITERATIONS = 5
BENCHMARK_ITERATIONS = 10

# Seed shared by every synthetic input generator so runs are reproducible
DEFAULT_SEED = 42

# Generated values are drawn from [0, VALUE_RANGE)
VALUE_RANGE = 100

# Sizes used by the doubling check and the allowed gap between
# the operation-count ratio and the size ratio of consecutive runs
SCALING_SIZES = (100, 200, 400, 800)
LINEARITY_TOLERANCE = 0.5

NS_PER_MS = 1_000_000
NS_PER_US = 1_000
