"""
Fixed-bound prime tables.

Responsibility: one-shot sieving up to a known bound. Used to build seed
lists for SegmentedSieve / PrimeRegistry and as an independent reference
for the incremental sieve.
"""

from typing import List

import numpy as np


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1 (empty for N < 0).
    """
    if N < 0:
        return np.zeros(0, dtype=bool)
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, int(N**0.5) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> List[int]:
    """
    Return all primes <= N in ascending order.

    The result is a list of Python ints so it can be handed straight to
    SegmentedSieve(primes=...) and multiplied into bag encodings without
    numpy overflow.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    list of int
        Ascending primes.
    """
    flags = prime_flags_upto(N)
    return np.flatnonzero(flags).tolist()
