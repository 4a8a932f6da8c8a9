"""
Bidirectional traversal over a PrimeBag.

Responsibility: walk a bag's elements without decoding it up front. A cursor
copies the bag's (encoding, size) when it is created and only ever shrinks
or regrows that private copy, so the bag itself is never touched and later
changes to it are not seen.
"""

from typing import TYPE_CHECKING, Generic

from primebag.registry import PrimeRegistry, ValueT

if TYPE_CHECKING:
    from primebag.bag import PrimeBag


class BagCursor(Generic[ValueT]):
    """
    Position within a snapshot of a PrimeBag.

    The current element is always divided out of the snapshot, so
    `remaining` counts the elements still ahead of the cursor. A terminal
    cursor (past the last element) has an empty snapshot.

    Ordering compares progress: a cursor with fewer elements remaining is
    further along and compares greater. At equal remaining counts a terminal
    cursor ranks after a live one, so the cursor on the last element is
    still less than end().
    """

    def __init__(self, bag: "PrimeBag[ValueT]", at_end: bool = False):
        self._registry: PrimeRegistry[ValueT] = bag.registry
        self._original_encoding = bag.encoding
        self._original_size = bag.size
        self._encoding = bag.encoding
        self._size = bag.size
        self._index = 0
        self._terminal = False

        if at_end or not self._size:
            self._terminal = True
            self._encoding = 1
            self._size = 0
            self._index = len(self._registry.prime_numbers) - 1
        else:
            self.advance()

    @classmethod
    def begin(cls, bag: "PrimeBag[ValueT]") -> "BagCursor[ValueT]":
        """Cursor on the first element (terminal if the bag is empty)."""
        return cls(bag)

    @classmethod
    def end(cls, bag: "PrimeBag[ValueT]") -> "BagCursor[ValueT]":
        """Terminal cursor; retreat() from it reaches the last element."""
        return cls(bag, at_end=True)

    @property
    def is_terminal(self) -> bool:
        return self._terminal

    @property
    def remaining(self) -> int:
        return self._size

    @property
    def encoding(self) -> int:
        """Encoding of the elements still ahead of the cursor."""
        return self._encoding

    @property
    def prime(self) -> int:
        if self._terminal:
            raise IndexError("terminal BagCursor has no current prime")
        return self._registry.prime_numbers[self._index]

    @property
    def value(self) -> ValueT:
        """The current element. Raises IndexError on a terminal cursor."""
        if self._terminal:
            raise IndexError("cannot dereference a terminal BagCursor")
        return self._registry.get_value(self._registry.prime_numbers[self._index])

    def advance(self) -> None:
        """Move to the next element, or become terminal after the last one."""
        if self._terminal:
            return
        if not self._size:
            self._terminal = True
            return

        primes = self._registry.prime_numbers
        while self._encoding % primes[self._index]:
            self._index += 1
        self._encoding //= primes[self._index]
        self._size -= 1

    def retreat(self) -> None:
        """
        Move to the previous element.

        The current element is multiplied back into the snapshot and the
        prime list is scanned downwards for the latest element that was
        consumed, i.e. one whose prime still divides the original encoding
        once the snapshot is multiplied by it.
        """
        primes = self._registry.prime_numbers
        if self._terminal:
            if not self._original_size:
                raise IndexError("cannot retreat in an empty bag")
            self._terminal = False
        else:
            if self._original_size - self._size < 2:
                raise IndexError("cannot retreat past the first element")
            self._encoding *= primes[self._index]
            self._size += 1

        while self._original_encoding % (self._encoding * primes[self._index]):
            self._index -= 1

    def __eq__(self, other) -> bool:
        if not isinstance(other, BagCursor):
            return NotImplemented
        if self._registry is not other._registry:
            return False
        if self._terminal or other._terminal:
            return self._terminal and other._terminal
        return self._size == other._size and self._encoding == other._encoding

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: "BagCursor[ValueT]") -> bool:
        if not isinstance(other, BagCursor):
            return NotImplemented
        return self._progress() < other._progress()

    def __gt__(self, other: "BagCursor[ValueT]") -> bool:
        if not isinstance(other, BagCursor):
            return NotImplemented
        return self._progress() > other._progress()

    def __le__(self, other: "BagCursor[ValueT]") -> bool:
        if not isinstance(other, BagCursor):
            return NotImplemented
        return self < other or self == other

    def __ge__(self, other: "BagCursor[ValueT]") -> bool:
        if not isinstance(other, BagCursor):
            return NotImplemented
        return self > other or self == other

    def _progress(self):
        return -self._size, self._terminal

    def __repr__(self) -> str:
        if self._terminal:
            return "BagCursor(<end>)"
        return f"BagCursor(value={self.value!r}, remaining={self._size})"
