"""
Incremental segmented Sieve of Eratosthenes.

Responsibility: hand out the k-th prime on demand. Nothing is ever
recomputed: the ascending prime list only grows, one bounded segment at a
time, and each segment's bit field is discarded once it has been read.
"""

import logging
import threading
from math import isqrt
from typing import Iterable, List, Optional

import numpy as np

logger = logging.getLogger(__name__)


def _strike_multiples(flags: np.ndarray, prime: int, low: int, high: int) -> None:
    """Mark multiples of prime in [low, high] as composite, starting at prime**2."""
    start = max(prime * prime, ((low + prime - 1) // prime) * prime)
    if start <= high:
        flags[start - low::prime] = False


class SegmentedSieve:
    """
    Generates primes by index, sieving in growing segments.

    Parameters
    ----------
    primes : iterable of int, optional
        Ascending, gap-free prefix of the primes (2, 3, 5, ...) to start from.
        It is copied and trusted as-is: composite or unordered input
        silently corrupts every later result.

    Notes
    -----
    Time O(N log log N) amortised for the N-th prime, space O(sqrt(limit))
    per segment. Sieving is serialised by an internal lock because the
    registry's prefetch worker calls nth_prime from a background thread.
    """

    def __init__(self, primes: Optional[Iterable[int]] = None):
        self._primes: List[int] = [int(p) for p in primes] if primes is not None else []
        self._lock = threading.Lock()

        # 0 and 1 are known composites.
        if self._primes:
            self._highest_tested = self._primes[-1]
        else:
            self._highest_tested = 1
        self._limit = self._highest_tested

    @property
    def calculated_primes(self) -> List[int]:
        """The ascending list of primes found so far. Do not mutate."""
        return self._primes

    @property
    def num_calculated_primes(self) -> int:
        return len(self._primes)

    @property
    def highest_tested(self) -> int:
        """Every integer up to this value has been classified."""
        return self._highest_tested

    def __len__(self) -> int:
        return len(self._primes)

    def __repr__(self) -> str:
        return (f"SegmentedSieve(num_primes={len(self._primes)}, "
                f"highest_tested={self._highest_tested})")

    def nth_prime(self, index: int) -> int:
        """
        Return the prime at 0-based position index (nth_prime(0) == 2).

        Runs in constant time when the prime is already known, otherwise
        sieves forward until it is.
        """
        if index < 0:
            raise ValueError(f"index must be >= 0, got {index}")
        if index < len(self._primes):
            return self._primes[index]
        with self._lock:
            self._sieve(index + 1)
        return self._primes[index]

    def _sieve(self, num_primes: int) -> None:
        """Sieve segments until at least num_primes primes are known."""
        while len(self._primes) < num_primes:
            low = self._highest_tested + 1

            while self._limit <= low:
                self._limit *= 2
            high = min(self._limit, low + isqrt(self._limit))

            flags = np.ones(high - low + 1, dtype=bool)

            # Known primes beyond sqrt(high) have no multiples to strike here.
            for prime in self._primes:
                if prime * prime > high:
                    break
                _strike_multiples(flags, prime, low, high)

            # Primes found inside this segment sieve the rest of it.
            root = isqrt(high)
            for offset in range(max(0, min(flags.size, root - low + 1))):
                if flags[offset]:
                    _strike_multiples(flags, low + offset, low, high)

            found = (np.flatnonzero(flags) + low).tolist()
            self._primes.extend(found)
            self._highest_tested = high

            logger.debug("Sieved segment [%d, %d]: %d new primes, %d total",
                         low, high, len(found), len(self._primes))
