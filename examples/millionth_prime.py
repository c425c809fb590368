"""Find the millionth prime and report how long it took.

Run after installing the package: ``python examples/millionth_prime.py``.
"""

import time

from prime_sequence import PrimeSequence


def main():
    print("Prime Sequence - Millionth Prime")
    print("=" * 50)

    primes = PrimeSequence()

    start = time.perf_counter()
    value = primes.skip(999_999).advance()
    elapsed = time.perf_counter() - start

    print(f"   Prime #1,000,000: {value}")
    print(f"   Elapsed: {elapsed:.3f}s")
    print(f"   Primes retained: {len(primes.known_primes):,}")

    primes.rewind()
    print(f"   First 10 (replayed): {primes.take(10)}")


if __name__ == "__main__":
    main()
