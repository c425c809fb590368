"""Incremental prime generation by trial division against known primes.

Each new odd candidate is divided only by the previously discovered primes
up to its square root. The record of discovered primes is kept and reused
by every later test, so nothing is recomputed between calls.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from itertools import islice
from typing import Iterator, List, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_WIDTH_BITS = 64


class PrimeOverflowError(OverflowError):
    """Raised when the next candidate no longer fits the integer width."""

    def __init__(self, candidate: int, width_bits: int):
        self.candidate = candidate
        self.width_bits = width_bits
        super().__init__(
            f"Candidate {candidate} exceeds the {width_bits}-bit maximum "
            f"({2 ** width_bits - 1})"
        )


class BasePrimeSequence:
    """Shared production cursor and record handling for prime sequences.

    Subclasses implement ``_discover`` to append the next prime to
    ``self._primes``. Values are handed out from the record in order, so a
    rewound sequence replays what it already knows without retesting.

    Not safe for concurrent use: advancing mutates state non-atomically.
    """

    strategy = "base"

    def __init__(self, width_bits: int = DEFAULT_WIDTH_BITS):
        if width_bits < 2:
            raise ValueError(f"width_bits must be >= 2, got {width_bits}")

        self.width_bits = width_bits
        self.max_value = 2 ** width_bits - 1
        self._primes: List[int] = []
        self._produced = 0
        self.reset()

    def _reset_state(self) -> None:
        raise NotImplementedError

    def _discover(self) -> int:
        raise NotImplementedError

    def reset(self) -> None:
        """Drop every discovered prime and return to the seeded state."""
        self._produced = 0
        self._reset_state()
        logger.debug("%s sequence reset (width=%d bits)", self.strategy, self.width_bits)

    def rewind(self) -> None:
        """Restart production from the first prime, keeping the record.

        The record then holds more primes than have been produced since the
        rewind; they are handed out again without retesting.
        """
        self._produced = 0

    def advance(self) -> int:
        """Return the next prime in increasing order.

        Raises:
            PrimeOverflowError: If the next candidate exceeds ``max_value``.
        """
        if self._produced == len(self._primes):
            self._discover()

        value = self._primes[self._produced]
        self._produced += 1
        return value

    def skip(self, n: int) -> "BasePrimeSequence":
        """Discard the next n produced values.

        Args:
            n: Number of values to consume.

        Returns:
            The sequence itself, so ``seq.skip(n).advance()`` reads naturally.
        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")

        for _ in range(n):
            self.advance()
        return self

    def nth(self, n: int) -> int:
        """Skip n values and return the one after them (0-indexed)."""
        return self.skip(n).advance()

    def take(self, n: int) -> List[int]:
        """Return the next n produced values."""
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")

        return [self.advance() for _ in range(n)]

    def is_prime(self, value: int) -> bool:
        """Check membership, extending the record until it covers value.

        The production cursor does not move.
        """
        if value < 2:
            return False

        while not self._primes or self._primes[-1] < value:
            if self._covers(value):
                break
            try:
                self._discover()
            except PrimeOverflowError:
                # The search may pass value before running out of width
                if not self._covers(value):
                    raise

        index = bisect_left(self._primes, value)
        return index < len(self._primes) and self._primes[index] == value

    def _covers(self, value: int) -> bool:
        """True when every integer up to value is already classified."""
        return False

    def to_array(self) -> np.ndarray:
        """Return the discovered primes as a numpy array."""
        dtype = np.uint64 if self.width_bits <= 64 else object
        return np.array(self._primes, dtype=dtype)

    @property
    def known_primes(self) -> Tuple[int, ...]:
        return tuple(self._primes)

    @property
    def known_count(self) -> int:
        """Number of discovered primes, without copying the record."""
        return len(self._primes)

    @property
    def count(self) -> int:
        """Number of values produced since construction, reset or rewind."""
        return self._produced

    @property
    def last(self) -> Optional[int]:
        if self._produced == 0:
            return None
        return self._primes[self._produced - 1]

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.advance()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(width_bits={self.width_bits}, "
            f"produced={self._produced}, known={len(self._primes)})"
        )


class PrimeSequence(BasePrimeSequence):
    """Prime sequence seeded with 2 that tests odd candidates.

    Example:
        >>> seq = PrimeSequence()
        >>> seq.take(5)
        [2, 3, 5, 7, 11]
        >>> PrimeSequence().nth(999_999)
        15485863
    """

    strategy = "trial"

    def _reset_state(self) -> None:
        self._primes = [2]
        self._next_candidate = 3
        # primes[1:_bound] are the odd primes whose square is <= candidate
        self._bound = 1

    @property
    def next_candidate(self) -> int:
        return self._next_candidate

    def _covers(self, value: int) -> bool:
        return value < self._next_candidate

    def _discover(self) -> int:
        primes = self._primes

        while True:
            candidate = self._next_candidate
            if candidate > self.max_value:
                logger.debug("Candidate %d overflows %d bits", candidate, self.width_bits)
                raise PrimeOverflowError(candidate, self.width_bits)

            while self._bound < len(primes) and primes[self._bound] ** 2 <= candidate:
                self._bound += 1

            self._next_candidate = candidate + 2

            # 2 is skipped: candidates are odd
            if all(candidate % p for p in islice(primes, 1, self._bound)):
                primes.append(candidate)
                return candidate
