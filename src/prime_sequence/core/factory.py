"""Factory for the available prime sequence strategies."""

from __future__ import annotations

from typing import Dict, Type

from prime_sequence.core.filters import FilterSequence
from prime_sequence.core.sequence import BasePrimeSequence, PrimeSequence

STRATEGIES: Dict[str, Type[BasePrimeSequence]] = {
    "trial": PrimeSequence,
    "filter": FilterSequence,
}


def create_sequence(strategy: str = "trial", **kwargs) -> BasePrimeSequence:
    """Factory function to create prime sequences.

    Args:
        strategy: One of "trial" (trial division) or "filter".
        **kwargs: Arguments passed to the sequence constructor.

    Returns:
        A fresh sequence.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy: {strategy}. Choose from {list(STRATEGIES.keys())}")

    return STRATEGIES[strategy](**kwargs)
