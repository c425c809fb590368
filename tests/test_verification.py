"""Tests for reference verification."""

import pytest

from prime_sequence.core.filters import FilterSequence
from prime_sequence.core.sequence import PrimeSequence
from prime_sequence.verification import verify_sequence, verify_values


class TestVerifySequence:
    """Tests for verify_sequence."""

    def test_trial_passes(self):
        report = verify_sequence(PrimeSequence(), 5000)
        assert report.passed
        assert report.count == 5000
        assert report.monotonic
        assert report.mismatches == []

    def test_filter_passes(self):
        assert verify_sequence(FilterSequence(), 2000).passed

    def test_consumes_sequence(self):
        seq = PrimeSequence()
        verify_sequence(seq, 10)
        assert seq.count == 10

    def test_negative_count(self):
        with pytest.raises(ValueError):
            verify_sequence(PrimeSequence(), -1)


class TestVerifyValues:
    """Tests for verify_values."""

    def test_empty(self):
        report = verify_values([])
        assert report.passed
        assert report.count == 0

    def test_detects_composite(self):
        report = verify_values([2, 3, 5, 7, 9])
        assert not report.passed
        assert report.mismatches == [(5, 11, 9)]
        assert report.composites == [9]

    def test_prime_out_of_place_is_not_composite(self):
        report = verify_values([2, 3, 7])
        assert report.mismatches == [(3, 5, 7)]
        assert report.composites == []

    def test_detects_non_monotonic(self):
        report = verify_values([2, 5, 3])
        assert not report.monotonic
        assert not report.passed
