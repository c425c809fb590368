"""Command-line interface for prime_sequence."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from prime_sequence.core.factory import STRATEGIES
from prime_sequence.core.sequence import DEFAULT_WIDTH_BITS, PrimeOverflowError


def cmd_nth(args: argparse.Namespace) -> int:
    """Find the nth prime and report the elapsed time."""
    from prime_sequence.benchmark import run_benchmark
    from prime_sequence.config import BenchmarkConfig

    config = BenchmarkConfig(
        count=args.n,
        strategy=args.strategy,
        width_bits=args.width_bits,
        progress=args.progress,
        verify=args.verify,
    )
    result = run_benchmark(config)

    print(f"Prime #{result.count:,}: {result.value}")
    print(f"Elapsed: {result.elapsed:.3f}s")

    if result.verified is False:
        print("Verification FAILED against reference sieve", file=sys.stderr)
        return 1
    if result.verified:
        print("Verified against reference sieve")
    return 0


def cmd_take(args: argparse.Namespace) -> int:
    """Print the first n primes."""
    from prime_sequence.core.factory import create_sequence

    sequence = create_sequence(args.strategy, width_bits=args.width_bits)
    for value in sequence.take(args.n):
        print(value)
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Check produced primes against the reference sieve."""
    from prime_sequence.core.factory import create_sequence
    from prime_sequence.verification import verify_sequence

    print(f"Verifying {args.strategy} sequence: n={args.n:,}")

    start = time.perf_counter()
    report = verify_sequence(create_sequence(args.strategy), args.n)
    elapsed = time.perf_counter() - start

    if report.passed:
        print(f"OK: {report.count:,} primes match in {elapsed:.3f}s")
        return 0

    print(f"FAILED (monotonic={report.monotonic})")
    for position, expected, actual in report.mismatches:
        print(f"  #{position}: expected {expected}, got {actual}")
    if report.composites:
        print(f"  Composite values produced: {report.composites}")
    return 1


def cmd_bench(args: argparse.Namespace) -> int:
    """Compare strategies on the same target."""
    from prime_sequence.benchmark import compare_strategies

    strategies = args.strategies.split(',') if args.strategies else None
    print(f"Benchmarking prime #{args.n:,}")

    results = compare_strategies(args.n, strategies=strategies)

    print(f"\n{'Rank':<6}{'Strategy':<12}{'Prime':<14}{'Time(s)':<10}{'Primes/s':<12}")
    print("-" * 54)
    for i, r in enumerate(results, 1):
        print(f"{i:<6}{r.strategy:<12}{r.value:<14}{r.elapsed:<10.3f}{r.rate:<12,.0f}")
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Incremental prime number generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    strategies = list(STRATEGIES.keys())

    nth_parser = subparsers.add_parser("nth", help="Find the nth prime and time it")
    nth_parser.add_argument("n", type=int, nargs="?", default=1_000_000, help="Which prime (1-indexed)")
    nth_parser.add_argument("--strategy", choices=strategies, default="trial", help="Generation strategy")
    nth_parser.add_argument("--width-bits", type=int, default=DEFAULT_WIDTH_BITS, help="Integer width")
    nth_parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    nth_parser.add_argument("--verify", action="store_true", help="Check against reference sieve")

    take_parser = subparsers.add_parser("take", help="Print the first n primes")
    take_parser.add_argument("n", type=int, help="Number of primes")
    take_parser.add_argument("--strategy", choices=strategies, default="trial", help="Generation strategy")
    take_parser.add_argument("--width-bits", type=int, default=DEFAULT_WIDTH_BITS, help="Integer width")

    verify_parser = subparsers.add_parser("verify", help="Check primes against reference sieve")
    verify_parser.add_argument("n", type=int, help="Number of primes to check")
    verify_parser.add_argument("--strategy", choices=strategies, default="trial", help="Generation strategy")

    bench_parser = subparsers.add_parser("bench", help="Compare generation strategies")
    bench_parser.add_argument("n", type=int, help="Which prime (1-indexed)")
    bench_parser.add_argument("--strategies", type=str, default=None,
                              help="Comma-separated list of strategies")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    from prime_sequence.utils.log import setup_logger
    setup_logger(verbose=args.verbose, log_path=Path(args.log_file) if args.log_file else None)

    commands = {
        "nth": cmd_nth,
        "take": cmd_take,
        "verify": cmd_verify,
        "bench": cmd_bench,
    }

    try:
        return commands[args.command](args)
    except (PrimeOverflowError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
