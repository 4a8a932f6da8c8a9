#!/usr/bin/env python3
"""
Benchmark the prime bag stack.

Times:
1. SegmentedSieve: computing the n-th prime from scratch, then a cached lookup
2. PrimeRegistry: inserting fresh values (prefetch pipeline) and recycling holes
3. PrimeBag: building a bag, decode(), forward and backward cursor traversal

Usage:
    python benchmark.py
    python benchmark.py --config config/custom.yaml --num-values 1000
"""

import argparse
import time

import yaml

from primebag import PrimeBag, PrimeRegistry, SegmentedSieve, primes_upto


def benchmark_sieve(index: int):
    """Time a cold nth_prime call followed by a warm one."""
    print("-" * 60)
    print(f"SegmentedSieve: nth_prime({index:,})")
    print("-" * 60)

    sieve = SegmentedSieve()
    t0 = time.time()
    prime = sieve.nth_prime(index)
    cold = time.time() - t0

    t0 = time.time()
    sieve.nth_prime(index)
    warm = time.time() - t0

    print(f"  prime = {prime:,}")
    print(f"  cold: {cold:.3f}s, warm: {warm * 1e6:.1f}us")
    print(f"  highest tested = {sieve.highest_tested:,}")
    print()
    return sieve


def benchmark_registry(num_values: int, seed):
    """Time fresh inserts, removal of every other value, and hole reuse."""
    print("-" * 60)
    print(f"PrimeRegistry: {num_values:,} values")
    print("-" * 60)

    # Same primes, drawn synchronously: what every insert would cost without prefetch
    sieve = SegmentedSieve(primes=seed)
    t0 = time.time()
    for i in range(num_values):
        sieve.nth_prime(i)
    print(f"  synchronous sieve path: {time.time() - t0:.3f}s")

    with PrimeRegistry(primes=seed) as registry:
        t0 = time.time()
        for i in range(num_values):
            registry.add(f"v{i}")
        print(f"  fresh inserts (prefetched): {time.time() - t0:.3f}s")

        t0 = time.time()
        for i in range(0, num_values, 2):
            registry.remove(f"v{i}")
        print(f"  removals: {time.time() - t0:.3f}s ({len(registry.holes):,} holes)")

        t0 = time.time()
        for i in range(0, num_values, 2):
            registry.add(f"w{i}")
        print(f"  hole reuse inserts: {time.time() - t0:.3f}s ({len(registry.holes):,} holes left)")
    print()


def benchmark_bag(num_values: int, multiplicity: int, seed):
    """Time bag construction and the three ways of reading it back."""
    print("-" * 60)
    print(f"PrimeBag: {num_values:,} values x {multiplicity}")
    print("-" * 60)

    with PrimeRegistry(primes=seed) as registry:
        bag = PrimeBag(registry)

        t0 = time.time()
        for _ in range(multiplicity):
            for i in range(num_values):
                bag.add(i)
        print(f"  build: {time.time() - t0:.3f}s (encoding has {bag.encoding.bit_length():,} bits)")

        t0 = time.time()
        decoded = bag.decode()
        print(f"  decode: {time.time() - t0:.3f}s ({len(decoded):,} elements)")

        t0 = time.time()
        forward = sum(1 for _ in bag)
        print(f"  forward cursor: {time.time() - t0:.3f}s ({forward:,} elements)")

        t0 = time.time()
        backward = sum(1 for _ in reversed(bag))
        print(f"  backward cursor: {time.time() - t0:.3f}s ({backward:,} elements)")
    print()


def main():
    parser = argparse.ArgumentParser(description='Benchmark the prime bag stack')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--nth-prime-index', type=int, default=None,
                        help='Override nth_prime_index from config')
    parser.add_argument('--num-values', type=int, default=None,
                        help='Override num_values from config')
    args = parser.parse_args()

    with open(args.config) as f:
        config = yaml.safe_load(f)

    if args.nth_prime_index is not None:
        config['nth_prime_index'] = args.nth_prime_index
    if args.num_values is not None:
        config['num_values'] = args.num_values

    seed = primes_upto(config['seed_upto']) if config.get('seed_upto') else None

    print("=" * 60)
    print("Prime Bag Benchmark")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  nth_prime_index = {config['nth_prime_index']:,}")
    print(f"  num_values = {config['num_values']:,}")
    print(f"  multiplicity = {config['multiplicity']}")
    print(f"  seed_upto = {config.get('seed_upto', 0):,}")
    print()

    total_start = time.time()
    benchmark_sieve(config['nth_prime_index'])
    benchmark_registry(config['num_values'], seed)
    benchmark_bag(config['num_values'], config['multiplicity'], seed)

    print("=" * 60)
    print(f"Total: {time.time() - total_start:.1f}s")
    print("=" * 60)


if __name__ == "__main__":
    main()
