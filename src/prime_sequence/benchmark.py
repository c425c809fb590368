"""Timed runs that reach the nth prime from a fresh sequence."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from tqdm import tqdm

from prime_sequence.config import BenchmarkConfig
from prime_sequence.core.factory import STRATEGIES, create_sequence
from prime_sequence.verification import verify_values

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Result of one timed run."""

    strategy: str
    count: int
    value: int
    elapsed: float
    known_primes: int
    verified: Optional[bool] = None

    @property
    def rate(self) -> float:
        """Primes produced per second."""
        if self.elapsed <= 0:
            return float("inf")
        return self.count / self.elapsed


def run_benchmark(config: BenchmarkConfig) -> BenchmarkResult:
    """Build a fresh sequence and time how long it takes to reach a prime.

    Args:
        config: Which prime to reach and how.

    Returns:
        BenchmarkResult with the prime and the wall-clock time in seconds.
    """
    sequence = create_sequence(config.strategy, width_bits=config.width_bits)
    logger.debug("Running %s to prime #%d", config.strategy, config.count)

    start = time.perf_counter()
    if config.progress:
        for _ in tqdm(range(config.count - 1), desc=f"{config.strategy} primes", leave=False):
            sequence.advance()
        value = sequence.advance()
    else:
        value = sequence.skip(config.count - 1).advance()
    elapsed = time.perf_counter() - start

    verified = None
    if config.verify:
        # Timing excludes the check; the record already holds every value
        report = verify_values(list(sequence.known_primes[:config.count]))
        verified = report.passed

    result = BenchmarkResult(
        strategy=config.strategy,
        count=config.count,
        value=value,
        elapsed=elapsed,
        known_primes=sequence.known_count,
        verified=verified,
    )
    logger.debug("%s: prime #%d = %d in %.3fs", config.strategy, config.count, value, elapsed)
    return result


def compare_strategies(
    count: int,
    strategies: Optional[Sequence[str]] = None,
    width_bits: Optional[int] = None,
) -> List[BenchmarkResult]:
    """Run one benchmark per strategy, fastest first."""
    if strategies is None:
        strategies = list(STRATEGIES.keys())

    results = []
    for strategy in strategies:
        config = BenchmarkConfig(count=count, strategy=strategy)
        if width_bits is not None:
            config.width_bits = width_bits
        results.append(run_benchmark(config))

    results.sort(key=lambda r: r.elapsed)
    return results
