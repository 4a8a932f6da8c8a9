"""
Tests for the fixed-bound seed sieve.

primes_upto is the independent reference the incremental sieve is checked
against, so it gets its own small table of known primes and composites.
"""

import numpy as np

from primebag.primes import prime_flags_upto, primes_upto


# Known small primes for testing
SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


class TestPrimeFlags:

    def test_prime_flags_upto_matches_known_primes(self):
        """prime_flags_upto should correctly identify primes."""
        N = 100
        flags = prime_flags_upto(N)

        for p in SMALL_PRIMES:
            assert flags[p], f"prime_flags_upto: {p} should be prime"

        for n in SMALL_COMPOSITES:
            assert not flags[n], f"prime_flags_upto: {n} should not be prime"

        assert not flags[0]
        assert not flags[1]

    def test_flags_length_and_dtype(self):
        flags = prime_flags_upto(30)
        assert flags.dtype == bool
        assert len(flags) == 31

    def test_tiny_bounds(self):
        assert len(prime_flags_upto(-1)) == 0
        assert not prime_flags_upto(0).any()
        assert not prime_flags_upto(1).any()
        assert primes_upto(1) == []
        assert primes_upto(2) == [2]


class TestPrimesUpto:

    def test_known_primes(self):
        assert primes_upto(47) == SMALL_PRIMES

    def test_prime_count_below_1000(self):
        """There are 168 primes below 1000."""
        assert len(primes_upto(1000)) == 168

    def test_returns_python_ints(self):
        """Seed lists must multiply as unbounded Python ints, not numpy scalars."""
        primes = primes_upto(100)
        assert all(type(p) is int for p in primes)

    def test_consistent_with_flags(self):
        N = 500
        flags = prime_flags_upto(N)
        assert np.array_equal(np.flatnonzero(flags), np.array(primes_upto(N)))
