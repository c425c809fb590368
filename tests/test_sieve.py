"""Tests for the reference sieve."""

import numpy as np
import pytest

from prime_sequence.core.sieve import (
    generate_primes,
    generate_n_primes,
    is_prime,
)


class TestIsPrime:
    """Tests for is_prime function."""

    def test_small_primes(self):
        """Test known small primes."""
        small_primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]
        for p in small_primes:
            assert is_prime(p), f"{p} should be prime"

    def test_small_composites(self):
        """Test known small composites."""
        composites = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 25, 49]
        for c in composites:
            assert not is_prime(c), f"{c} should not be prime"

    def test_edge_cases(self):
        """Test edge cases."""
        assert not is_prime(0)
        assert not is_prime(1)
        assert is_prime(2)
        assert not is_prime(-5)

    def test_millionth_prime_value(self):
        assert is_prime(15_485_863)
        assert not is_prime(15_485_865)


class TestGeneratePrimes:
    """Tests for generate_primes function."""

    def test_primes_up_to_10(self):
        """Test primes up to 10."""
        primes = generate_primes(10)
        expected = np.array([2, 3, 5, 7])
        np.testing.assert_array_equal(primes, expected)

    def test_primes_up_to_100(self):
        """Test primes up to 100."""
        primes = generate_primes(100)
        assert len(primes) == 25  # There are 25 primes <= 100
        assert primes[0] == 2
        assert primes[-1] == 97

    def test_invalid_limit(self):
        """Test that invalid limit raises error."""
        with pytest.raises(ValueError):
            generate_primes(1)

        with pytest.raises(ValueError):
            generate_primes(-5)


class TestGenerateNPrimes:
    """Tests for generate_n_primes function."""

    def test_first_ten(self):
        np.testing.assert_array_equal(
            generate_n_primes(10), np.array([2, 3, 5, 7, 11, 13, 17, 19, 23, 29])
        )

    def test_single(self):
        np.testing.assert_array_equal(generate_n_primes(1), np.array([2]))

    def test_exact_length(self):
        assert len(generate_n_primes(1234)) == 1234

    def test_invalid(self):
        with pytest.raises(ValueError):
            generate_n_primes(0)

    def test_millionth_prime(self):
        assert generate_n_primes(1_000_000)[-1] == 15_485_863


class TestOddSieveBoundaries:
    """Tests for small and odd/even limits of the odd-only sieve."""

    @pytest.mark.parametrize("limit, expected", [
        (2, [2]),
        (3, [2, 3]),
        (9, [2, 3, 5, 7]),
        (25, [2, 3, 5, 7, 11, 13, 17, 19, 23]),
        (29, [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]),
    ])
    def test_limits(self, limit, expected):
        np.testing.assert_array_equal(generate_primes(limit), np.array(expected))

    def test_count_up_to_1000(self):
        assert len(generate_primes(1000)) == 168

    def test_agrees_with_is_prime(self):
        primes = set(generate_primes(2000).tolist())
        for n in range(2001):
            assert (n in primes) == is_prime(n)
