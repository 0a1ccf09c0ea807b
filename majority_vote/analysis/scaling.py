"""
Scaling Analysis
================

Checks that the finder's operation count grows linearly with input size and
that its auxiliary memory stays constant.

Two checks are offered:

doubling_ratios() / is_linear():
    For sizes s_0 < s_1 < ..., compare total_ops[i+1] / total_ops[i] with
    s[i+1] / s[i]. Linear growth keeps the two ratios within a tolerance band
    (LINEARITY_TOLERANCE). With doubling sizes both ratios approach 2.

fit_linear():
    Least-squares fit of total operations on size (scipy.stats.linregress).
    For this algorithm total_ops is exactly 5n - 1 - z (z = phase 1 resets),
    so r_squared is ~1 and the slope sits just under 5.
"""

import logging

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from scipy import stats

from majority_vote.analysis.inputs import InputType, generate_input
from majority_vote.constants import LINEARITY_TOLERANCE, SCALING_SIZES
from majority_vote.core.boyer_moore import BoyerMooreMajorityVote

logger = logging.getLogger(__name__)


def operation_counts(sizes=SCALING_SIZES, input_type=InputType.SORTED_WITH_MAJORITY):
    """
    Run the finder once per size and collect its operation counters.

    Args:
        sizes (iterable of int): Input lengths.
        input_type (InputType): Distribution used for every size.

    Returns:
        pd.DataFrame: Columns size, comparisons, array_accesses,
        total_operations, memory_allocations, execution_time_ns.

    Raises:
        ValueError: If any size is below 1 (ratios against it are undefined).
    """
    sizes = list(sizes)
    if any(size < 1 for size in sizes):
        raise ValueError(f"Scaling sizes must be at least 1, got {sizes}")

    rows = []
    for size in sizes:
        finder = BoyerMooreMajorityVote()
        finder.find_majority(generate_input(size, input_type))
        tracker = finder.tracker
        rows.append({
            "size": size,
            "comparisons": tracker.comparisons,
            "array_accesses": tracker.array_accesses,
            "total_operations": tracker.total_operations,
            "memory_allocations": tracker.memory_allocations,
            "execution_time_ns": tracker.get_execution_time(),
        })
    return pd.DataFrame(rows)


def doubling_ratios(df):
    """
    Ratios between consecutive rows of an operation_counts() frame.

    Returns:
        pd.DataFrame: Columns size, size_ratio, ops_ratio, deviation
        (one row per consecutive pair, keyed by the larger size).
    """
    df = df.sort_values("size").reset_index(drop=True)
    ratios = pd.DataFrame({
        "size": df["size"].iloc[1:].to_numpy(),
        "size_ratio": (df["size"] / df["size"].shift(1)).iloc[1:].to_numpy(),
        "ops_ratio": (df["total_operations"] / df["total_operations"].shift(1)).iloc[1:].to_numpy(),
    })
    ratios["deviation"] = (ratios["ops_ratio"] - ratios["size_ratio"]).abs()
    return ratios


def is_linear(df, tolerance=LINEARITY_TOLERANCE):
    """True when every consecutive ops ratio is within tolerance of the size ratio."""
    ratios = doubling_ratios(df)
    linear = bool((ratios["deviation"] < tolerance).all())
    if not linear:
        worst = ratios.loc[ratios["deviation"].idxmax()]
        logger.warning("Non-linear growth at n=%d (ops ratio %.3f vs size ratio %.3f)",
                       worst["size"], worst["ops_ratio"], worst["size_ratio"])
    return linear


def is_constant_space(df):
    """True when memory_allocations does not vary with size."""
    return df["memory_allocations"].nunique() <= 1


def fit_linear(df):
    """
    Least-squares line through (size, total_operations).

    Returns:
        dict: slope, intercept, r_squared.
    """
    if len(df) < 2:
        raise ValueError("At least two sizes are needed for a linear fit")
    fit = stats.linregress(df["size"].astype(float), df["total_operations"].astype(float))
    return {
        "slope": float(fit.slope),
        "intercept": float(fit.intercept),
        "r_squared": float(fit.rvalue ** 2),
    }


def plot_scaling(df, path, title="Boyer-Moore Majority Vote: Operations vs Input Size"):
    """
    Plot comparisons, array accesses and their total against input size.

    Args:
        df (pd.DataFrame): Output of operation_counts().
        path (str or Path): Image destination (format from the extension).
    """
    long_df = df.melt(
        id_vars="size",
        value_vars=["comparisons", "array_accesses", "total_operations"],
        var_name="counter",
        value_name="operations",
    )

    fig, ax = plt.subplots(figsize=(8, 5))
    sns.lineplot(data=long_df, x="size", y="operations", hue="counter", marker="o", ax=ax)
    ax.set_title(title)
    ax.set_xlabel("Input size (n)")
    ax.set_ylabel("Operations")
    fig.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    logger.info("Saved scaling plot to %s", path)
