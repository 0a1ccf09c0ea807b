"""
Benchmark Suite
===============

Drives the majority finder over synthetic inputs and collects averaged
operation counts and timings.

Key Functions:
--------------
- benchmark_input_type(): warm-up + measured runs for one (size, input type)
- run_benchmark_suite(): benchmark_input_type() over every requested pair
- compare_distributions(): one run per input type at a fixed size
- format_table(): fixed-width text rendering of a results DataFrame

Result Columns (run_benchmark_suite):
-------------------------------------
    input_type, size, majority, avg_time_ns, avg_comparisons,
    avg_array_accesses, comparisons_per_element, accesses_per_element

When a shared PerformanceTracker is passed in, the measured runs record on it
and one snapshot (the last measured run) is saved per (input type, size), so
tracker.export() afterwards writes one CSV row per benchmark cell.
"""

import logging

import pandas as pd

from majority_vote.analysis.inputs import InputType, generate_input
from majority_vote.constants import BENCHMARK_ITERATIONS, DEFAULT_SIZES, NS_PER_US, WARMUP_ITERATIONS
from majority_vote.core.boyer_moore import BoyerMooreMajorityVote
from majority_vote.metrics.tracker import PerformanceTracker

logger = logging.getLogger(__name__)


def _as_scalar(element):
    # numpy scalars -> plain Python values for display and CSV
    return element.item() if hasattr(element, "item") else element


def _results_frame(rows):
    df = pd.DataFrame(rows)
    if "majority" in df.columns:
        # Nullable ints so a missing majority does not turn the column into floats
        df["majority"] = df["majority"].astype("Int64")
    return df


def benchmark_input_type(size, input_type, iterations=BENCHMARK_ITERATIONS,
                         warmup=WARMUP_ITERATIONS, tracker=None):
    """
    Benchmark one input distribution at one size.

    Args:
        size (int): Input length.
        input_type (InputType): Distribution to generate.
        iterations (int): Measured runs to average (>= 1).
        warmup (int): Runs executed first and discarded.
        tracker (PerformanceTracker, optional): Tracker the measured runs
            record on. A snapshot of the last measured run is saved to it.

    Returns:
        dict: One benchmark row (see module docstring for keys).
    """
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")

    arr = generate_input(size, input_type)

    for _ in range(warmup):
        BoyerMooreMajorityVote().find_majority_element(arr)

    finder = BoyerMooreMajorityVote(tracker)
    total_time = 0
    total_comparisons = 0
    total_accesses = 0
    majority = None

    for _ in range(iterations):
        majority = finder.find_majority_element(arr)
        total_time += finder.tracker.get_execution_time()
        total_comparisons += finder.tracker.comparisons
        total_accesses += finder.tracker.array_accesses

    if tracker is not None:
        tracker.save_snapshot(size)

    avg_comparisons = total_comparisons / iterations
    avg_accesses = total_accesses / iterations
    row = {
        "input_type": input_type.name,
        "size": size,
        "majority": _as_scalar(majority) if majority is not None else None,
        "avg_time_ns": total_time / iterations,
        "avg_comparisons": avg_comparisons,
        "avg_array_accesses": avg_accesses,
        "comparisons_per_element": avg_comparisons / size if size else 0.0,
        "accesses_per_element": avg_accesses / size if size else 0.0,
    }
    logger.debug("Benchmarked %s n=%d: %s", input_type.name, size, row)
    return row


def run_benchmark_suite(sizes=DEFAULT_SIZES, input_types=None, iterations=BENCHMARK_ITERATIONS,
                        warmup=WARMUP_ITERATIONS, tracker=None, verbose=False):
    """
    Benchmark every (input type, size) combination.

    Args:
        sizes (iterable of int): Input lengths, in run order.
        input_types (iterable of InputType, optional): Defaults to all types.
        iterations (int): Measured runs per cell.
        warmup (int): Discarded runs per cell.
        tracker (PerformanceTracker, optional): Collects one snapshot per cell.
        verbose (bool): Print each cell as it completes.

    Returns:
        pd.DataFrame: One row per (input type, size), types in outer order.
    """
    if input_types is None:
        input_types = list(InputType)

    rows = []
    for input_type in input_types:
        if verbose:
            print(f"\n>>> Testing: {input_type.description} <<<")
        for size in sizes:
            row = benchmark_input_type(size, input_type, iterations, warmup, tracker)
            rows.append(row)
            if verbose:
                print(f"\nArray size: {size}")
                print(f"  Avg Time: {row['avg_time_ns'] / NS_PER_US:.2f} μs")
                print(f"  Avg Comparisons: {row['avg_comparisons']:.0f}")
                print(f"  Avg Array Accesses: {row['avg_array_accesses']:.0f}")
                print(f"  Comparisons/n: {row['comparisons_per_element']:.2f}")
                print(f"  Accesses/n: {row['accesses_per_element']:.2f}")

    logger.info("Benchmark suite finished: %d cells", len(rows))
    return _results_frame(rows)


def compare_distributions(size, input_types=None):
    """
    Run every input distribution once at the same size.

    Returns:
        pd.DataFrame: Columns distribution, majority, time_us, comparisons,
        array_accesses.
    """
    if input_types is None:
        input_types = list(InputType)

    rows = []
    for input_type in input_types:
        tracker = PerformanceTracker()
        majority = BoyerMooreMajorityVote(tracker).find_majority_element(generate_input(size, input_type))
        rows.append({
            "distribution": input_type.description,
            "majority": _as_scalar(majority) if majority is not None else None,
            "time_us": tracker.get_execution_time() / NS_PER_US,
            "comparisons": tracker.comparisons,
            "array_accesses": tracker.array_accesses,
        })

    return _results_frame(rows)


def format_table(df, float_format="{:.2f}"):
    """Render a results DataFrame as a fixed-width text table."""
    if df.empty:
        return "(no results)"
    df = df.copy()
    for col in df.columns:
        # to_string() ignores na_rep for nullable extension columns and prints <NA>
        if isinstance(df[col].dtype, pd.api.extensions.ExtensionDtype) and df[col].isna().any():
            df[col] = df[col].astype(object).where(df[col].notna(), "-")
    formatters = {
        col: float_format.format
        for col in df.columns
        if pd.api.types.is_float_dtype(df[col])
    }
    return df.to_string(index=False, formatters=formatters, na_rep="-")
