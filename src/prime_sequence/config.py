"""Configuration for timed prime sequence runs."""

from __future__ import annotations

from dataclasses import dataclass

from prime_sequence.core.sequence import DEFAULT_WIDTH_BITS


@dataclass
class BenchmarkConfig:
    """Configuration for a single timed run."""

    # Which prime to reach (1-indexed)
    count: int = 1_000_000

    # Sequence parameters
    strategy: str = "trial"
    width_bits: int = DEFAULT_WIDTH_BITS

    # Output
    progress: bool = False
    verify: bool = False

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"count must be >= 1, got {self.count}")
