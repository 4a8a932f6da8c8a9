import pytest

from primebag import PrimeRegistry


@pytest.fixture
def registry():
    """Fresh registry whose prefetch worker is shut down after the test."""
    with PrimeRegistry() as reg:
        yield reg


@pytest.fixture
def abc_registry(registry):
    """Registry with a -> 2, b -> 3, c -> 5 already assigned."""
    for value in "abc":
        registry.add(value)
    return registry
