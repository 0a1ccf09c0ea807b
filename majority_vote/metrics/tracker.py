"""
Operation Tracker
=================

Counts the primitive operations an algorithm performs and times each run.

The tracker is a passive recorder: the algorithm under measurement drives it
through explicit increment/reset/start/stop calls, and the tracker has no
knowledge of what is being measured.

Key Data Structures:
--------------------

Counters : int
    comparisons, array_accesses, swaps, memory_allocations.
    Only ever changed by increment_*() and reset().

Timer : two states
    Idle     -> _started_at is None, _elapsed_ns holds the last interval
    Running  -> _started_at holds the perf_counter_ns() start timestamp

    get_execution_time() reads live elapsed time while Running and the last
    captured interval while Idle.

snapshots : list of MetricsSnapshot
    Append-only history (in insertion order) of counter values, one entry per
    save_snapshot() call. Survives reset(); emptied only by clear_snapshots().

Export Format:
--------------
    InputSize,Comparisons,Swaps,ArrayAccesses,MemoryAllocations,ExecutionTime(ns)
    100,299,0,200,0,5120
    ...

Usage:
------
    tracker = PerformanceTracker()
    finder = BoyerMooreMajorityVote(tracker)
    finder.find_majority(values)
    tracker.save_snapshot(len(values))
    tracker.export("results.csv")
"""

import logging
import time
from dataclasses import astuple, dataclass

import pandas as pd

from majority_vote.constants import CSV_COLUMNS, NS_PER_MS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricsSnapshot:
    """Point-in-time copy of the tracker counters."""

    input_size: int
    comparisons: int
    swaps: int
    array_accesses: int
    memory_allocations: int
    execution_time: int

    def __str__(self):
        return (
            f"n={self.input_size}: comparisons={self.comparisons}, swaps={self.swaps}, "
            f"accesses={self.array_accesses}, time={self.execution_time}ns"
        )


class PerformanceTracker:
    """
    Operation counters plus a two-state timer and a snapshot history.

    Not thread-safe: give each concurrent measurement its own tracker.
    """

    def __init__(self):
        self._snapshots = []
        self.reset()

    def reset(self):
        """Zero every counter and discard timer state. Snapshot history is kept."""
        self._comparisons = 0
        self._swaps = 0
        self._array_accesses = 0
        self._memory_allocations = 0
        self._started_at = None
        self._elapsed_ns = 0

    # Timer

    def start_timer(self):
        self._started_at = time.perf_counter_ns()

    def stop_timer(self):
        if self._started_at is None:
            return
        self._elapsed_ns = time.perf_counter_ns() - self._started_at
        self._started_at = None

    @property
    def timer_running(self):
        return self._started_at is not None

    def get_execution_time(self):
        """
        Elapsed time in nanoseconds.

        Returns:
            int: live elapsed time while the timer runs, otherwise the last
            captured interval.
        """
        if self._started_at is not None:
            return time.perf_counter_ns() - self._started_at
        return self._elapsed_ns

    def get_execution_time_ms(self):
        return self.get_execution_time() / NS_PER_MS

    # Counters

    def increment_comparisons(self, count=1):
        self._comparisons += count

    def increment_array_accesses(self, count=1):
        self._array_accesses += count

    def increment_swaps(self, count=1):
        self._swaps += count

    def increment_memory_allocations(self, count=1):
        self._memory_allocations += count

    @property
    def comparisons(self):
        return self._comparisons

    @property
    def array_accesses(self):
        return self._array_accesses

    @property
    def swaps(self):
        return self._swaps

    @property
    def memory_allocations(self):
        return self._memory_allocations

    @property
    def total_operations(self):
        """Comparisons plus array accesses, the figure used for scaling checks."""
        return self._comparisons + self._array_accesses

    # Snapshot history

    def save_snapshot(self, input_size):
        """
        Append the current counters and execution time to the history.

        Args:
            input_size (int): Size of the input the counters were recorded for.

        Returns:
            MetricsSnapshot: The snapshot that was appended.
        """
        snapshot = MetricsSnapshot(
            input_size=input_size,
            comparisons=self._comparisons,
            swaps=self._swaps,
            array_accesses=self._array_accesses,
            memory_allocations=self._memory_allocations,
            execution_time=self.get_execution_time(),
        )
        self._snapshots.append(snapshot)
        return snapshot

    def get_snapshots(self):
        return list(self._snapshots)

    def clear_snapshots(self):
        self._snapshots.clear()

    def to_dataframe(self):
        """
        Snapshot history as a DataFrame using the export column names.

        Returns:
            pd.DataFrame: One row per snapshot, in insertion order.
        """
        rows = [astuple(snapshot) for snapshot in self._snapshots]
        return pd.DataFrame(rows, columns=CSV_COLUMNS, dtype="int64")

    def export(self, path):
        """
        Write the snapshot history as comma-separated text.

        Parent directories are not created. Any OSError raised while opening
        or writing the destination propagates unchanged.

        Args:
            path (str or Path): Destination file.
        """
        # Parent directories must already exist
        with open(path, "w", newline="") as handle:
            self.to_dataframe().to_csv(handle, index=False, lineterminator="\n")
        logger.info("Exported %d snapshots to %s", len(self._snapshots), path)

    # Reporting

    def format_metrics(self):
        lines = [
            "=== Performance Metrics ===",
            f"Execution Time: {self.get_execution_time_ms()} ms",
            f"Comparisons: {self._comparisons}",
            f"Swaps: {self._swaps}",
            f"Array Accesses: {self._array_accesses}",
            f"Memory Allocations: {self._memory_allocations}",
        ]
        return "\n".join(lines)

    def print_metrics(self):
        print("\n" + self.format_metrics())


def read_snapshots(path):
    """
    Parse a file written by PerformanceTracker.export() back into snapshots.

    Args:
        path (str or Path): Exported CSV file.

    Returns:
        list: MetricsSnapshot objects in file order.

    Raises:
        ValueError: If the header does not match the export format.
    """
    df = pd.read_csv(path, dtype="int64")
    if list(df.columns) != CSV_COLUMNS:
        raise ValueError(f"Unexpected snapshot header in {path}: {','.join(map(str, df.columns))}")

    snapshots = [
        MetricsSnapshot(*(int(value) for value in row))
        for row in df.itertuples(index=False, name=None)
    ]
    logger.debug("Read %d snapshots from %s", len(snapshots), path)
    return snapshots
