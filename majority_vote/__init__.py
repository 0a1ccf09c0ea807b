"""
Boyer-Moore Majority Vote

An instrumented implementation of the two-pass Boyer-Moore majority vote,
with operation counting and benchmark tooling.
"""

from majority_vote.core.boyer_moore import (
    BoyerMooreMajorityVote,
    InvalidInputError,
    MajorityResult,
    find_majority,
    find_majority_element,
)
from majority_vote.metrics.tracker import MetricsSnapshot, PerformanceTracker, read_snapshots

__version__ = "1.0.0"

__all__ = [
    "BoyerMooreMajorityVote",
    "InvalidInputError",
    "MajorityResult",
    "MetricsSnapshot",
    "PerformanceTracker",
    "find_majority",
    "find_majority_element",
    "read_snapshots",
]
