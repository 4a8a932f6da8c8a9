"""Multisets encoded as products of primes."""

from primebag.bag import PrimeBag, RegistryMismatchError
from primebag.cursor import BagCursor
from primebag.holes import HolePool
from primebag.primes import prime_flags_upto, primes_upto
from primebag.registry import PrimeRegistry
from primebag.sieve import SegmentedSieve

__all__ = [
    "BagCursor",
    "HolePool",
    "PrimeBag",
    "PrimeRegistry",
    "RegistryMismatchError",
    "SegmentedSieve",
    "prime_flags_upto",
    "primes_upto",
]
