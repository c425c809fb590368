"""Core prime sequences and reference sieve utilities."""

from prime_sequence.core.sequence import (
    BasePrimeSequence,
    PrimeSequence,
    PrimeOverflowError,
)
from prime_sequence.core.filters import FilterSequence, PrimeFilter
from prime_sequence.core.factory import STRATEGIES, create_sequence
from prime_sequence.core.sieve import generate_primes, generate_n_primes, is_prime

__all__ = [
    "BasePrimeSequence",
    "PrimeSequence",
    "PrimeOverflowError",
    "FilterSequence",
    "PrimeFilter",
    "STRATEGIES",
    "create_sequence",
    "generate_primes",
    "generate_n_primes",
    "is_prime",
]
