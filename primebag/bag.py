"""
Prime-product multiset.

Responsibility: store a multiset as one integer. Each distinct value owns a
prime (via PrimeRegistry) and the bag's encoding is the product of those
primes raised to each value's multiplicity, so membership, counting, union
and difference are plain integer arithmetic.
"""

from collections.abc import Collection
from typing import Generic, Iterable, Iterator, List, Optional

from primebag.cursor import BagCursor
from primebag.registry import PrimeRegistry, ValueT


class RegistryMismatchError(ValueError):
    """Raised when two bags bound to different registries are combined."""


class PrimeBag(Collection, Generic[ValueT]):
    """
    Mutable multiset encoded as a product of primes.

    encoding == prod(prime(v) ** multiplicity(v)) and size == sum of the
    multiplicities. The bag does not own its registry; several bags may
    share one, and only bags sharing a registry can be added to or removed
    from each other.

    Iteration yields values in ascending order of their primes' positions
    in the registry's prime list (not insertion order). Bags are mutable and
    therefore unhashable.
    """

    def __init__(self, registry: PrimeRegistry[ValueT], values: Optional[Iterable[ValueT]] = None) -> None:
        self._registry = registry
        self._encoding = 1
        self._size = 0
        if values is not None:
            for value in values:
                self.add(value)

    @property
    def registry(self) -> PrimeRegistry[ValueT]:
        return self._registry

    @property
    def encoding(self) -> int:
        return self._encoding

    @property
    def size(self) -> int:
        return self._size

    def add(self, item) -> None:
        """Add one occurrence of a value, or every element of another PrimeBag."""
        if isinstance(item, PrimeBag):
            self._check_registry(item)
            self._encoding *= item._encoding
            self._size += item._size
        else:
            self._encoding *= self._registry.add(item)
            self._size += 1

    def remove(self, item) -> bool:
        """
        Remove one occurrence of a value, or a whole sub-multiset.

        Returns False and leaves the bag unchanged when the value is absent
        or when the other bag is not contained in this one.
        """
        if isinstance(item, PrimeBag):
            self._check_registry(item)
            if item._size <= self._size and self._encoding % item._encoding == 0:
                self._encoding //= item._encoding
                self._size -= item._size
                return True
            return False

        prime = self._registry.get_prime(item)
        if prime and self._encoding % prime == 0:
            self._encoding //= prime
            self._size -= 1
            return True
        return False

    def contains(self, value: ValueT) -> bool:
        prime = self._registry.get_prime(value)
        return bool(prime) and self._encoding % prime == 0

    def count(self, value: ValueT) -> int:
        """Return the multiplicity of value (0 if absent or unassigned)."""
        prime = self._registry.get_prime(value)
        result = 0
        if prime:
            encoding = self._encoding
            while encoding % prime == 0:
                encoding //= prime
                result += 1
        return result

    def decode(self) -> List[ValueT]:
        """Return every element, with repetition, in prime-list order."""
        result: List[ValueT] = []
        encoding = self._encoding
        remaining = self._size

        for prime in self._registry.prime_numbers:
            if remaining == 0:
                break
            if encoding % prime:
                continue
            value = self._registry.get_value(prime)
            while encoding % prime == 0:
                encoding //= prime
                remaining -= 1
                result.append(value)
        return result

    def clear(self) -> None:
        """Empty the bag. The registry keeps its assignments."""
        self._encoding = 1
        self._size = 0

    def copy(self) -> "PrimeBag[ValueT]":
        other = PrimeBag(self._registry)
        other._encoding = self._encoding
        other._size = self._size
        return other

    def begin(self) -> BagCursor[ValueT]:
        return BagCursor.begin(self)

    def end(self) -> BagCursor[ValueT]:
        return BagCursor.end(self)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[ValueT]:
        cursor = BagCursor.begin(self)
        while not cursor.is_terminal:
            yield cursor.value
            cursor.advance()

    def __reversed__(self) -> Iterator[ValueT]:
        cursor = BagCursor.end(self)
        for _ in range(self._size):
            cursor.retreat()
            yield cursor.value

    def __iadd__(self, item) -> "PrimeBag[ValueT]":
        self.add(item)
        return self

    def __isub__(self, item) -> "PrimeBag[ValueT]":
        self.remove(item)
        return self

    def __eq__(self, other) -> bool:
        if isinstance(other, PrimeBag):
            return self._registry is other._registry and self._encoding == other._encoding
        else:
            return False

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PrimeBag({self.decode()!r})"

    def _check_registry(self, other: "PrimeBag") -> None:
        if other._registry is not self._registry:
            raise RegistryMismatchError("cannot combine bags bound to different registries")
