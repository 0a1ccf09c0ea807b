#!/usr/bin/env python3
"""
Boyer-Moore Majority Vote Benchmarks
====================================

Usage:
    python scripts/run_benchmark.py                      # quick benchmark
    python scripts/run_benchmark.py full --csv results/benchmark_results.csv --plot results/scaling.png
    python scripts/run_benchmark.py compare --size 10000
    python scripts/run_benchmark.py run --size 20 --type alternating
    python scripts/run_benchmark.py scaling
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from majority_vote.analysis.benchmark import (
    benchmark_input_type,
    compare_distributions,
    format_table,
    run_benchmark_suite,
)
from majority_vote.analysis.inputs import InputType, generate_input
from majority_vote.analysis.scaling import (
    doubling_ratios,
    fit_linear,
    is_constant_space,
    is_linear,
    operation_counts,
    plot_scaling,
)
from majority_vote.constants import BENCHMARK_ITERATIONS, DEFAULT_SIZES, NS_PER_US, WARMUP_ITERATIONS
from majority_vote.core.boyer_moore import BoyerMooreMajorityVote
from majority_vote.metrics.tracker import PerformanceTracker

PREVIEW_LENGTH = 20


def run_quick(args):
    print("=== Boyer-Moore Majority Vote - Quick Benchmark ===\n")

    for size in args.sizes:
        print(f"Testing with n = {size}")
        row = benchmark_input_type(size, InputType.RANDOM_WITH_MAJORITY, iterations=1, warmup=0)
        result = f"Majority = {row['majority']}" if row["majority"] is not None else "No majority"
        print(f"  Input: {InputType.RANDOM_WITH_MAJORITY.description}")
        print(f"  Result: {result}")
        print(f"  Time: {row['avg_time_ns'] / NS_PER_US:.2f} μs")
        print(f"  Comparisons: {row['avg_comparisons']:.0f} ({row['comparisons_per_element']:.2f} per element)")
        print(f"  Array Accesses: {row['avg_array_accesses']:.0f} ({row['accesses_per_element']:.2f} per element)")
        print()

    print("Quick benchmark complete!")
    print("Run 'full' for comprehensive benchmarks")
    print("Run 'compare' or 'run' for custom testing")
    return 0


def run_full(args):
    print("=== Boyer-Moore Majority Vote - Full Benchmark Suite ===")

    tracker = PerformanceTracker()
    df = run_benchmark_suite(
        sizes=args.sizes,
        iterations=args.iterations,
        warmup=args.warmup,
        tracker=tracker,
        verbose=True,
    )

    print(f"\n{'='*100}")
    print("SUMMARY")
    print(f"{'='*100}")
    print(format_table(df))

    if args.csv:
        try:
            tracker.export(args.csv)
        except OSError as e:
            print(f"\nError exporting results: {e}", file=sys.stderr)
            return 1
        print(f"\n✓ Results exported to {args.csv}")

    if args.plot:
        try:
            counts = operation_counts(args.sizes)
        except ValueError as e:
            print(f"\nError plotting results: {e}", file=sys.stderr)
            return 1
        plot_scaling(counts, args.plot)
        print(f"✓ Scaling plot saved to {args.plot}")

    print("\nFull benchmark suite complete!")
    return 0


def run_compare(args):
    print(f"\n=== Comparing Input Distributions (n = {args.size}) ===\n")
    print(format_table(compare_distributions(args.size)))
    return 0


def run_single(args):
    arr = generate_input(args.size, args.type)

    print(f"\nArray preview (first {PREVIEW_LENGTH} elements):")
    preview = " ".join(str(v) for v in arr[:PREVIEW_LENGTH])
    if len(arr) > PREVIEW_LENGTH:
        preview += " ..."
    print(preview + "\n")

    finder = BoyerMooreMajorityVote()
    result = finder.find_majority(arr)
    if result is not None:
        print(f"Result: {result}")
    else:
        print("No majority element found")

    finder.print_statistics()
    return 0


def run_scaling(args):
    try:
        df = operation_counts(args.sizes)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print("\n=== Operation Counts ===")
    print(format_table(df))
    print("\n=== Doubling Ratios ===")
    print(format_table(doubling_ratios(df), float_format="{:.3f}"))

    fit = fit_linear(df)
    print(f"\nLinear fit: ops = {fit['slope']:.4f} * n + {fit['intercept']:.2f} (R² = {fit['r_squared']:.6f})")
    print(f"Linear time:    {'yes' if is_linear(df) else 'NO'}")
    print(f"Constant space: {'yes' if is_constant_space(df) else 'NO'}")

    if args.plot:
        plot_scaling(df, args.plot)
        print(f"✓ Scaling plot saved to {args.plot}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Benchmark the Boyer-Moore majority vote")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    quick = subparsers.add_parser("quick", help="One run per default size (default command)")
    quick.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    quick.set_defaults(func=run_quick)

    full = subparsers.add_parser("full", help="All input types and sizes, averaged")
    full.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    full.add_argument("--iterations", type=int, default=BENCHMARK_ITERATIONS)
    full.add_argument("--warmup", type=int, default=WARMUP_ITERATIONS)
    full.add_argument("--csv", help="Export snapshot history to this CSV file")
    full.add_argument("--plot", help="Save an operations-vs-size plot to this image file")
    full.set_defaults(func=run_full)

    compare = subparsers.add_parser("compare", help="Compare input distributions at one size")
    compare.add_argument("--size", type=int, required=True)
    compare.set_defaults(func=run_compare)

    single = subparsers.add_parser("run", help="Single run with statistics")
    single.add_argument("--size", type=int, required=True)
    single.add_argument("--type", type=InputType.from_name, default=InputType.RANDOM_WITH_MAJORITY,
                        help=f"One of: {', '.join(t.name.lower() for t in InputType)}")
    single.set_defaults(func=run_single)

    scaling = subparsers.add_parser("scaling", help="Linear-time and constant-space checks")
    scaling.add_argument("--sizes", type=int, nargs="+", default=[100, 200, 400, 800, 1600])
    scaling.add_argument("--plot", help="Save an operations-vs-size plot to this image file")
    scaling.set_defaults(func=run_scaling)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        args.func = run_quick
        args.sizes = list(DEFAULT_SIZES)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
