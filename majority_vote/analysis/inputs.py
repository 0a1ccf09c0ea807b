"""
Synthetic Input Distributions
=============================

Deterministic generators for the input shapes used in benchmarks.

Input Types:
------------
- RANDOM_WITH_MAJORITY: n // 2 + 1 copies of one value, the rest random
  non-majority values, shuffled.
- ALL_SAME: every position holds the same value (best case).
- NO_MAJORITY: i % max(3, n // 3), so no value holds a majority once n >= 2.
- NEARLY_MAJORITY: exactly n // 2 copies of one value, the rest cycling
  through the other values so none of them gains a majority either.
- SORTED_WITH_MAJORITY: n // 2 + 1 copies of one value followed by the
  remaining indices (i at position i).
- ALTERNATING: 1, 2, 1, 2, ... with 1 at every even index (worst case for
  candidate changes). Odd lengths have a majority of 1s, even lengths a tie.

All generators return an int64 numpy array and use a seeded
numpy.random.Generator, so the same (size, type, seed) always yields the same
array.
"""

from enum import Enum

import numpy as np

from majority_vote.constants import DEFAULT_SEED, VALUE_RANGE


class InputType(Enum):
    RANDOM_WITH_MAJORITY = "Random array with majority element"
    ALL_SAME = "All elements identical (best case)"
    NO_MAJORITY = "No majority element exists"
    NEARLY_MAJORITY = "Element appears exactly n/2 times (no majority for n >= 2)"
    SORTED_WITH_MAJORITY = "Sorted array with majority"
    ALTERNATING = "Alternating pattern (worst case for candidate changes)"

    @property
    def description(self):
        return self.value

    @classmethod
    def from_name(cls, name):
        """Look up an input type by case-insensitive name, e.g. 'all_same'."""
        try:
            return cls[name.strip().upper().replace("-", "_")]
        except KeyError:
            choices = ", ".join(t.name.lower() for t in cls)
            raise ValueError(f"Unknown input type '{name}'. Choose from: {choices}") from None


def _fill_without(rng, count, excluded):
    # Random values in [0, VALUE_RANGE) with `excluded` shifted to its successor
    values = rng.integers(0, VALUE_RANGE, size=count)
    values[values == excluded] = (excluded + 1) % VALUE_RANGE
    return values


def _cycle_without(rng, count, excluded):
    # Every value except `excluded` in turn, shuffled; each repeats at most
    # ceil(count / (VALUE_RANGE - 1)) times
    values = (excluded + 1 + np.arange(count) % (VALUE_RANGE - 1)) % VALUE_RANGE
    return rng.permutation(values)


def generate_input(size, input_type, seed=DEFAULT_SEED):
    """
    Build a synthetic input array.

    Args:
        size (int): Number of elements (>= 0).
        input_type (InputType): Distribution to generate.
        seed (int): Seed for numpy.random.default_rng.

    Returns:
        np.ndarray: int64 array of length size.

    Raises:
        ValueError: If size is negative.
    """
    if size < 0:
        raise ValueError(f"Input size must be non-negative, got {size}")

    rng = np.random.default_rng(seed)
    majority_count = size // 2 + 1

    if input_type is InputType.RANDOM_WITH_MAJORITY:
        value = int(rng.integers(0, VALUE_RANGE))
        arr = np.empty(size, dtype=np.int64)
        arr[:majority_count] = value
        arr[majority_count:] = _fill_without(rng, max(size - majority_count, 0), value)
        rng.shuffle(arr)

    elif input_type is InputType.ALL_SAME:
        arr = np.full(size, int(rng.integers(0, VALUE_RANGE)), dtype=np.int64)

    elif input_type is InputType.NO_MAJORITY:
        arr = np.arange(size, dtype=np.int64) % max(3, size // 3)

    elif input_type is InputType.NEARLY_MAJORITY:
        value = int(rng.integers(0, VALUE_RANGE))
        half = size // 2
        arr = np.empty(size, dtype=np.int64)
        arr[:half] = value
        arr[half:] = _cycle_without(rng, size - half, value)

    elif input_type is InputType.SORTED_WITH_MAJORITY:
        value = int(rng.integers(0, VALUE_RANGE))
        arr = np.arange(size, dtype=np.int64)
        arr[:majority_count] = value

    elif input_type is InputType.ALTERNATING:
        arr = np.where(np.arange(size) % 2 == 0, 1, 2).astype(np.int64)

    else:
        raise ValueError(f"Unsupported input type: {input_type!r}")

    return arr
