"""
Max-ordered pool of recyclable primes.

Responsibility: remember primes freed by PrimeRegistry.remove and hand the
largest one back first, so the small primes stay available to values that
are added later and keep bag encodings short.
"""

import heapq
from typing import Iterator, List


class HolePool:
    """
    Priority pool of freed primes, largest first.

    Built on heapq (a min-heap) by storing negated primes.
    """

    def __init__(self):
        self._heap: List[int] = []

    def push(self, prime: int) -> None:
        heapq.heappush(self._heap, -prime)

    def pop(self) -> int:
        """Remove and return the largest prime. Raises IndexError when empty."""
        if not self._heap:
            raise IndexError("pop from an empty HolePool")
        return -heapq.heappop(self._heap)

    def peek(self) -> int:
        if not self._heap:
            raise IndexError("peek into an empty HolePool")
        return -self._heap[0]

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, prime) -> bool:
        return -prime in self._heap

    def __iter__(self) -> Iterator[int]:
        """Iterate over the pooled primes, largest first (does not consume)."""
        return iter(sorted((-p for p in self._heap), reverse=True))

    def __repr__(self) -> str:
        return f"HolePool({list(self)})"
