"""Tests for majority_vote.analysis.scaling: linear-time and constant-space checks."""

import pandas as pd
import pytest

from majority_vote.analysis.inputs import InputType
from majority_vote.analysis.scaling import (
    doubling_ratios,
    fit_linear,
    is_constant_space,
    is_linear,
    operation_counts,
    plot_scaling,
)


@pytest.fixture
def counts():
    return operation_counts([100, 200, 400, 800])


class TestOperationCounts:
    def test_columns(self, counts):
        assert list(counts.columns) == [
            "size",
            "comparisons",
            "array_accesses",
            "total_operations",
            "memory_allocations",
            "execution_time_ns",
        ]

    def test_exact_totals_without_resets(self, counts):
        # sorted input never resets the phase 1 count: 2n accesses + (3n - 1) comparisons
        for row in counts.itertuples():
            assert row.array_accesses == 2 * row.size
            assert row.comparisons == 3 * row.size - 1
            assert row.total_operations == 5 * row.size - 1

    def test_other_distribution(self):
        df = operation_counts([10, 20], input_type=InputType.NO_MAJORITY)
        assert df["array_accesses"].tolist() == [20, 40]

    @pytest.mark.parametrize("sizes", [[0, 100, 200], [100, -5]])
    def test_rejects_sizes_below_one(self, sizes):
        with pytest.raises(ValueError, match="at least 1"):
            operation_counts(sizes)

    def test_accepts_generator(self):
        df = operation_counts(n for n in (10, 20))
        assert df["size"].tolist() == [10, 20]


class TestLinearity:
    def test_doubling_ratios(self, counts):
        ratios = doubling_ratios(counts)
        assert ratios["size"].tolist() == [200, 400, 800]
        assert ratios["size_ratio"].tolist() == [2.0, 2.0, 2.0]
        assert (ratios["deviation"] < 0.01).all()

    def test_ratios_sorted_by_size(self, counts):
        shuffled = counts.iloc[[2, 0, 3, 1]]
        assert doubling_ratios(shuffled)["size"].tolist() == [200, 400, 800]

    def test_is_linear(self, counts):
        assert is_linear(counts)

    def test_quadratic_is_not_linear(self):
        sizes = [100, 200, 400, 800]
        df = pd.DataFrame({"size": sizes, "total_operations": [n * n for n in sizes]})
        assert not is_linear(df)

    def test_constant_space(self, counts):
        assert is_constant_space(counts)
        assert (counts["memory_allocations"] == 0).all()

    def test_varying_space_detected(self):
        df = pd.DataFrame({"size": [1, 2], "memory_allocations": [1, 2]})
        assert not is_constant_space(df)

    def test_fit_linear(self, counts):
        fit = fit_linear(counts)
        assert fit["slope"] == pytest.approx(5.0)
        assert fit["intercept"] == pytest.approx(-1.0, abs=1e-6)
        assert fit["r_squared"] == pytest.approx(1.0)

    def test_fit_needs_two_points(self):
        with pytest.raises(ValueError):
            fit_linear(operation_counts([100]))


class TestPlot:
    def test_plot_written(self, counts, tmp_path):
        path = tmp_path / "scaling.png"
        plot_scaling(counts, path)
        assert path.exists()
        assert path.stat().st_size > 0
