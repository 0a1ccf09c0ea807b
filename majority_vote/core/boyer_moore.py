"""
Boyer-Moore Majority Vote
=========================

Finds the element occupying strictly more than half the positions of a
sequence, if one exists, in linear time and constant extra space.

Algorithm:
----------
Phase 1 (candidate selection): one left-to-right pass keeping a candidate and
a running count. A matching element increments the count, a different one
decrements it, and when the count is 0 the current element becomes the new
candidate. A true majority element always survives as the final candidate,
because every cancellation pairs one majority occurrence with one
non-majority occurrence.

Phase 2 (verification): a second pass counts the candidate and records its
first and last index. Phase 1 alone can return a spurious candidate when no
majority exists (e.g. [1, 2, 3] leaves candidate 3), so this pass is
mandatory.

Majority threshold: count > n // 2 (strict). For n = 4, two occurrences is
not a majority.

Operation Accounting:
---------------------
Charges recorded on the tracker are part of the observable contract and match
the control flow exactly:

    length 1          -> 0 comparisons, 1 array access
    phase 1 setup     -> 1 array access (reading sequence[0])
    phase 1, i >= 1   -> 1 array access, plus
                         1 comparison  if count == 0 (reset branch)
                         2 comparisons otherwise (zero check + equality)
    phase 2, each i   -> 1 array access, 1 comparison
    threshold test    -> 1 comparison

For n >= 2 this gives 2n array accesses and 3n - 1 - z comparisons, where z
is the number of phase 1 resets. No swaps or allocations are charged.

Usage:
------
    finder = BoyerMooreMajorityVote()
    result = finder.find_majority([1, 2, 3, 3, 3, 2, 3])
    # MajorityResult(element=3, count=4, first_position=2, last_position=6)
    finder.tracker.comparisons
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from majority_vote.metrics.tracker import PerformanceTracker

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when no sequence is supplied (None rather than an empty sequence)."""


@dataclass(frozen=True)
class MajorityResult:
    """
    Majority element of a sequence with its count and first/last index.

    Attributes:
        element: The majority value.
        count: Occurrences of element, always > len(sequence) // 2.
        first_position: Smallest index holding element.
        last_position: Largest index holding element.
    """

    element: Any
    count: int
    first_position: int
    last_position: int

    def __str__(self):
        return (
            f"Majority: {self.element} (count={self.count}, "
            f"first@{self.first_position}, last@{self.last_position})"
        )


class BoyerMooreMajorityVote:
    """
    Two-pass majority finder that records its work on a PerformanceTracker.

    The finder holds no per-call state. The tracker is reset at the start of
    every find_majority() call, so its counters always describe the most
    recent run; snapshots saved by the caller are kept across runs.
    """

    def __init__(self, tracker: Optional[PerformanceTracker] = None):
        self.tracker = tracker if tracker is not None else PerformanceTracker()

    def find_majority(self, sequence) -> Optional[MajorityResult]:
        """
        Find the majority element of a sequence.

        Args:
            sequence: Indexable, sized collection of comparable scalars
                (list, tuple or 1-D numpy array). Not modified.

        Returns:
            MajorityResult if some element occurs more than len(sequence) // 2
            times, otherwise None. An empty sequence returns None.

        Raises:
            InvalidInputError: If sequence is None.
        """
        if sequence is None:
            raise InvalidInputError("Sequence cannot be None")

        tracker = self.tracker
        tracker.reset()
        tracker.start_timer()

        n = len(sequence)
        if n == 0:
            tracker.stop_timer()
            return None

        if n == 1:
            tracker.increment_comparisons(0)
            tracker.increment_array_accesses(1)
            tracker.stop_timer()
            return MajorityResult(sequence[0], 1, 0, 0)

        candidate = self._find_candidate(sequence)
        result = self._verify_candidate(sequence, candidate)

        tracker.stop_timer()
        logger.debug(
            "n=%d candidate=%r majority=%s comparisons=%d accesses=%d",
            n, candidate, result is not None, tracker.comparisons, tracker.array_accesses,
        )
        return result

    def find_majority_element(self, sequence):
        """Majority element only, or None when there is no majority."""
        result = self.find_majority(sequence)
        return result.element if result is not None else None

    def _find_candidate(self, sequence):
        tracker = self.tracker
        candidate = sequence[0]
        count = 1
        tracker.increment_array_accesses(1)

        for i in range(1, len(sequence)):
            tracker.increment_array_accesses(1)
            value = sequence[i]

            if count == 0:
                candidate = value
                count = 1
                tracker.increment_comparisons(1)
            else:
                tracker.increment_comparisons(2)
                if value == candidate:
                    count += 1
                else:
                    count -= 1

        return candidate

    def _verify_candidate(self, sequence, candidate):
        tracker = self.tracker
        count = 0
        first_position = None
        last_position = None

        for i in range(len(sequence)):
            tracker.increment_array_accesses(1)
            tracker.increment_comparisons(1)

            if sequence[i] == candidate:
                count += 1
                if first_position is None:
                    first_position = i
                last_position = i

        # count > n // 2
        tracker.increment_comparisons(1)

        if count > len(sequence) // 2:
            return MajorityResult(candidate, count, first_position, last_position)
        return None

    def print_statistics(self):
        tracker = self.tracker
        print("\n=== Boyer-Moore Majority Vote Statistics ===")
        print(f"Execution Time: {tracker.get_execution_time()} ns")
        print(f"Array Accesses: {tracker.array_accesses}")
        print(f"Comparisons: {tracker.comparisons}")
        print("Theoretical Complexity: Θ(n)")
        print("Space Complexity: Θ(1)")


def find_majority(sequence, tracker=None):
    """
    Find the majority element of sequence, recording operations on tracker.

    Args:
        sequence: Indexable, sized collection of comparable scalars.
        tracker (PerformanceTracker, optional): Tracker to record on. A fresh
            one is used when omitted.

    Returns:
        MajorityResult or None.
    """
    return BoyerMooreMajorityVote(tracker).find_majority(sequence)


def find_majority_element(sequence, tracker=None):
    return BoyerMooreMajorityVote(tracker).find_majority_element(sequence)
