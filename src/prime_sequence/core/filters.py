"""Prime generation with one incremental multiple filter per prime.

Every discovered prime p gets a filter that walks its multiples starting
at p*p. A number is composite exactly when some filter lands on it. Since
numbers are tested in increasing order, each filter only ever moves
forward and its work is shared across all later tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from prime_sequence.core.sequence import BasePrimeSequence, PrimeOverflowError

logger = logging.getLogger(__name__)


@dataclass
class PrimeFilter:
    """Running multiple of a single prime."""

    base: int
    multiple: int = field(init=False)

    def __post_init__(self):
        self.multiple = self.base * self.base

    def step(self) -> int:
        self.multiple += self.base
        return self.multiple

    def query(self, n: int) -> bool:
        """Advance to the first multiple >= n and report whether it is n."""
        while self.multiple < n:
            self.step()
        return self.multiple == n


class FilterSequence(BasePrimeSequence):
    """Prime sequence that counts up from 2 and rejects filtered numbers.

    Example:
        >>> FilterSequence().take(6)
        [2, 3, 5, 7, 11, 13]
    """

    strategy = "filter"

    def _reset_state(self) -> None:
        self._primes = []
        self._filters: List[PrimeFilter] = []
        self._state = 1

    @property
    def filters(self) -> List[PrimeFilter]:
        return list(self._filters)

    @property
    def next_candidate(self) -> int:
        return self._state + 1

    def _covers(self, value: int) -> bool:
        return value <= self._state

    def _discover(self) -> int:
        while True:
            candidate = self._state + 1
            if candidate > self.max_value:
                logger.debug("Candidate %d overflows %d bits", candidate, self.width_bits)
                raise PrimeOverflowError(candidate, self.width_bits)
            self._state = candidate

            if not self._is_filtered(candidate):
                self._filters.append(PrimeFilter(candidate))
                self._primes.append(candidate)
                return candidate

    def _is_filtered(self, n: int) -> bool:
        for prime_filter in self._filters:
            # Filters are ordered by base; later ones start beyond n
            if prime_filter.base * prime_filter.base > n:
                return False
            if prime_filter.query(n):
                return True
        return False
