"""
Value <-> prime registry.

Responsibility: give every distinct value its own prime, hand freed primes
back out before minting new ones, and keep the next fresh prime computed
ahead of time on a background worker.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from types import MappingProxyType
from typing import Dict, Generic, Hashable, Iterable, List, Mapping, Optional, TypeVar

from primebag.holes import HolePool
from primebag.sieve import SegmentedSieve

logger = logging.getLogger(__name__)

ValueT = TypeVar("ValueT", bound=Hashable)


class PrimeRegistry(Generic[ValueT]):
    """
    Bijective mapping between values and primes.

    Space is O(N) in the number of values currently assigned. Primes freed
    by `remove` go to a max-ordered HolePool and are reused before any new
    prime is drawn from the sieve. Every time a fresh prime is handed out,
    the following one is submitted to a single-worker executor so that the
    next insertion usually finds it ready.

    Parameters
    ----------
    primes : iterable of int, optional
        Trusted ascending prefix of the primes used to seed the sieve, e.g.
        another registry's `prime_numbers` to pool sieve work. Copied.

    Notes
    -----
    Not thread-safe: callers must serialise access to one registry. The
    only concurrency is the internal one-ahead prefetch, which `clear` and
    `close` join before touching any state.
    """

    def __init__(self, primes: Optional[Iterable[int]] = None):
        self._sieve = SegmentedSieve(primes)
        self._holes = HolePool()
        self._prime_map: Dict[ValueT, int] = {}
        self._reverse_prime_map: Dict[int, ValueT] = {}

        # Number of fresh (non-recycled) primes handed out; also the sieve
        # index of the next fresh prime.
        self._issued = 0
        self._next_prime: Optional[Future] = None
        self._executor: Optional[ThreadPoolExecutor] = None

    def __enter__(self) -> "PrimeRegistry[ValueT]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._prime_map)

    def __contains__(self, value) -> bool:
        return value in self._prime_map

    def __repr__(self) -> str:
        return (f"PrimeRegistry(values={len(self._prime_map)}, holes={len(self._holes)}, "
                f"calculated_primes={self._sieve.num_calculated_primes})")

    @property
    def sieve(self) -> SegmentedSieve:
        return self._sieve

    @property
    def holes(self) -> HolePool:
        return self._holes

    @property
    def prime_map(self) -> Mapping[ValueT, int]:
        """Read-only view of the value -> prime assignments."""
        return MappingProxyType(self._prime_map)

    @property
    def prime_numbers(self) -> List[int]:
        """All primes calculated so far, ascending (assigned or not)."""
        return self._sieve.calculated_primes

    def add(self, value: ValueT) -> int:
        """
        Assign a prime to value and return it.

        Idempotent: a value that already has a prime keeps it. Otherwise the
        largest hole is reused if there is one; failing that, the prefetched
        prime is taken (waiting for the worker if it is still sieving), or
        computed synchronously on the very first insertion.
        """
        prime = self._prime_map.get(value)
        if prime is not None:
            return prime

        if self._holes:
            prime = self._holes.pop()
            logger.debug("Reusing hole %d for %r", prime, value)
        else:
            if self._next_prime is not None:
                future, self._next_prime = self._next_prime, None
                prime = future.result()
            else:
                prime = self._sieve.nth_prime(self._issued)
            self._issued += 1
            self._prefetch(self._issued)

        self._prime_map[value] = prime
        self._reverse_prime_map[prime] = value
        return prime

    def get_prime(self, value: ValueT) -> int:
        """Return the prime assigned to value, or 0 if it has none."""
        return self._prime_map.get(value, 0)

    def remove(self, value: ValueT) -> int:
        """
        Unassign value and return its prime, or 0 if it was never assigned.

        The freed prime becomes a hole and will be handed to the next new
        value. Bags still holding the prime are not touched.
        """
        prime = self._prime_map.pop(value, 0)
        if prime:
            del self._reverse_prime_map[prime]
            self._holes.push(prime)
        return prime

    def contains_prime(self, prime: int) -> bool:
        return prime in self._reverse_prime_map

    def get_value(self, prime: int) -> ValueT:
        """Return the value assigned to prime. Raises KeyError if it is unassigned."""
        try:
            return self._reverse_prime_map[prime]
        except KeyError:
            raise KeyError(f"prime {prime} is not assigned to any value") from None

    def clear(self) -> None:
        """Forget every assignment and hole, after the pending prefetch has landed."""
        self._join_prefetch()
        self._prime_map.clear()
        self._reverse_prime_map.clear()
        self._holes.clear()
        self._issued = 0
        logger.debug("Registry cleared")

    def close(self) -> None:
        """Join the pending prefetch and stop the worker thread."""
        self._join_prefetch()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def _prefetch(self, index: int) -> None:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="primebag-prefetch")
        self._next_prime = self._executor.submit(self._sieve.nth_prime, index)
        logger.debug("Prefetching prime #%d", index)

    def _join_prefetch(self) -> None:
        if self._next_prime is not None:
            future, self._next_prime = self._next_prime, None
            future.result()
