"""prime_sequence - incremental prime generation with reusable divisor records."""

__version__ = "0.1.0"

from prime_sequence.core.sequence import PrimeSequence, PrimeOverflowError
from prime_sequence.core.filters import FilterSequence
from prime_sequence.core.factory import create_sequence

__all__ = [
    "PrimeSequence",
    "PrimeOverflowError",
    "FilterSequence",
    "create_sequence",
]
