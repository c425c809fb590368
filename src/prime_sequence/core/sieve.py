"""Reference prime tables built with a NumPy Sieve of Eratosthenes.

These are used to check the incremental sequences, not to replace them:
a sieve needs its upper bound up front, while the sequences do not.
"""

from __future__ import annotations

import math

import numpy as np


def _odd_sieve(limit: int) -> np.ndarray:
    """Sieve over odd numbers only; slot i stands for 2*i + 1.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Array of prime numbers up to limit, starting with 2.
    """
    if limit < 2:
        return np.array([], dtype=np.int64)

    size = (limit + 1) // 2
    odd = np.ones(size, dtype=bool)
    odd[0] = False  # 1

    for i in range(1, (math.isqrt(limit) - 1) // 2 + 1):
        if odd[i]:
            p = 2 * i + 1
            odd[p * p // 2::p] = False

    primes = 2 * np.nonzero(odd)[0].astype(np.int64) + 1
    return np.concatenate((np.array([2], dtype=np.int64), primes))


def _upper_bound(n: int) -> int:
    """Bound on the nth prime from the prime number theorem, padded for small n."""
    return max(100, int(n * (math.log(n) + math.log(math.log(n + 1)) + 2)))


def generate_primes(limit: int) -> np.ndarray:
    """Generate all prime numbers up to and including limit.

    Raises:
        ValueError: If limit is less than 2.
    """
    if limit < 2:
        raise ValueError(f"Limit must be >= 2, got {limit}")

    return _odd_sieve(limit)


def generate_n_primes(n: int) -> np.ndarray:
    """Return the first n primes, growing the sieve bound until it holds them.

    Raises:
        ValueError: If n is less than 1.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    bound = _upper_bound(n)
    primes = _odd_sieve(bound)
    while len(primes) < n:
        bound = int(bound * 1.5)
        primes = _odd_sieve(bound)

    return primes[:n]


def is_prime(n: int) -> bool:
    """Standalone primality check by odd trial division up to isqrt(n)."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2

    return all(n % d for d in range(3, math.isqrt(n) + 1, 2))
