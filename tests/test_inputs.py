"""Tests for majority_vote.analysis.inputs: synthetic input distributions."""

import numpy as np
import pytest

from majority_vote.analysis.inputs import InputType, generate_input
from majority_vote.core.boyer_moore import find_majority

SIZES = [2, 3, 4, 10, 101, 1000]


class TestGenerateInput:
    @pytest.mark.parametrize("input_type", list(InputType))
    def test_length_and_dtype(self, input_type):
        arr = generate_input(57, input_type)
        assert len(arr) == 57
        assert arr.dtype == np.int64

    @pytest.mark.parametrize("input_type", list(InputType))
    def test_zero_size(self, input_type):
        assert len(generate_input(0, input_type)) == 0

    @pytest.mark.parametrize("input_type", list(InputType))
    def test_deterministic(self, input_type):
        assert np.array_equal(generate_input(200, input_type), generate_input(200, input_type))

    def test_seed_changes_random_input(self):
        a = generate_input(200, InputType.RANDOM_WITH_MAJORITY, seed=1)
        b = generate_input(200, InputType.RANDOM_WITH_MAJORITY, seed=2)
        assert not np.array_equal(a, b)

    def test_negative_size(self):
        with pytest.raises(ValueError):
            generate_input(-1, InputType.ALL_SAME)

    @pytest.mark.parametrize("size", [1] + SIZES)
    def test_random_with_majority(self, size):
        arr = generate_input(size, InputType.RANDOM_WITH_MAJORITY)
        result = find_majority(arr)
        assert result is not None
        assert result.count == size // 2 + 1

    @pytest.mark.parametrize("size", [1] + SIZES)
    def test_all_same(self, size):
        arr = generate_input(size, InputType.ALL_SAME)
        assert len(np.unique(arr)) == 1
        assert find_majority(arr).count == size

    @pytest.mark.parametrize("size", SIZES)
    def test_no_majority(self, size):
        assert find_majority(generate_input(size, InputType.NO_MAJORITY)) is None

    @pytest.mark.parametrize("size", SIZES)
    def test_nearly_majority(self, size):
        arr = generate_input(size, InputType.NEARLY_MAJORITY)
        assert int((arr == arr[0]).sum()) == size // 2
        assert find_majority(arr) is None

    def test_nearly_majority_single_element(self):
        # n // 2 == 0 copies of the planted value; the lone filler is a majority by itself
        arr = generate_input(1, InputType.NEARLY_MAJORITY)
        assert len(arr) == 1
        assert find_majority(arr).count == 1

    @pytest.mark.parametrize("size", [1] + SIZES)
    def test_sorted_with_majority(self, size):
        arr = generate_input(size, InputType.SORTED_WITH_MAJORITY)
        assert find_majority(arr).element == arr[0]

    @pytest.mark.parametrize("size", [1, 3, 7, 101])
    def test_alternating_odd_has_majority(self, size):
        arr = generate_input(size, InputType.ALTERNATING)
        assert arr[:4].tolist() == [1, 2, 1, 2][:size]
        assert find_majority(arr).element == 1

    @pytest.mark.parametrize("size", [2, 4, 100])
    def test_alternating_even_is_a_tie(self, size):
        assert find_majority(generate_input(size, InputType.ALTERNATING)) is None


class TestInputType:
    def test_description(self):
        assert InputType.ALL_SAME.description == "All elements identical (best case)"

    @pytest.mark.parametrize("name", ["all_same", "ALL_SAME", "all-same", " All_Same "])
    def test_from_name(self, name):
        assert InputType.from_name(name) is InputType.ALL_SAME

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown input type"):
            InputType.from_name("bogus")
