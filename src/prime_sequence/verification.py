"""Cross-check produced primes against the NumPy reference sieve."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from prime_sequence.core.sequence import BasePrimeSequence
from prime_sequence.core.sieve import generate_n_primes, is_prime

logger = logging.getLogger(__name__)

MAX_REPORTED_MISMATCHES = 10


@dataclass
class VerificationReport:
    """Outcome of comparing a sequence with the reference primes."""

    count: int
    monotonic: bool
    # (1-indexed position, expected, actual)
    mismatches: List[Tuple[int, int, int]] = field(default_factory=list)
    # Reported mismatched values that are not prime at all
    composites: List[int] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.monotonic and not self.mismatches


def verify_values(values: List[int]) -> VerificationReport:
    """Compare already produced values with the first len(values) primes."""
    if not values:
        return VerificationReport(count=0, monotonic=True)

    expected = generate_n_primes(len(values))
    actual = np.array(values, dtype=np.int64)

    monotonic = bool(np.all(np.diff(actual) > 0))
    bad = np.nonzero(actual != expected)[0]

    mismatches = [
        (int(i) + 1, int(expected[i]), int(actual[i]))
        for i in bad[:MAX_REPORTED_MISMATCHES]
    ]
    composites = [value for _, _, value in mismatches if not is_prime(value)]

    if len(bad):
        logger.warning("%d of %d values differ from the reference", len(bad), len(values))

    return VerificationReport(
        count=len(values),
        monotonic=monotonic,
        mismatches=mismatches,
        composites=composites,
    )


def verify_sequence(sequence: BasePrimeSequence, count: int) -> VerificationReport:
    """Produce count values from sequence and verify them.

    Args:
        sequence: Sequence to draw from; it is consumed.
        count: Number of values to check.

    Returns:
        VerificationReport describing any differences.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    return verify_values(sequence.take(count))
