"""
Shared pytest configuration and fixtures for memory space tests.
"""

import random

import pytest

from memspace.memory import MemorySpace


@pytest.fixture
def small_space():
    """Create the 100-unit space used by most scenarios"""
    return MemorySpace(100)


@pytest.fixture
def full_space():
    """Create a space whose whole range is allocated"""
    space = MemorySpace(100)
    space.malloc(100)
    return space


@pytest.fixture
def fragmented_space():
    """
    Create a 100-unit space with 10-unit allocations at 0..90 and every other one freed.

    Free list order after setup: (0, 10), (20, 10), (40, 10), (60, 10), (80, 10).
    """
    space = MemorySpace(100)
    addresses = [space.malloc(10) for _ in range(10)]
    for address in addresses[::2]:
        space.free(address)
    return space


@pytest.fixture
def random_operations():
    """Generate a random malloc/free pattern for stress testing"""
    rng = random.Random(42)  # Deterministic for reproducible tests

    operations = []
    for _ in range(300):
        if rng.random() < 0.4:
            operations.append(("free", rng.random()))
        else:
            operations.append(("malloc", rng.randint(1, 40)))
    return operations


def collect_coverage(space: MemorySpace):
    """Count how many regions cover each address of the space"""
    coverage = [0] * space.max_size
    for region in list(space.allocated_list) + list(space.free_list):
        for addr in range(region.start, region.end):
            coverage[addr] += 1
    return coverage


@pytest.fixture
def assert_partition():
    """Assert that allocated and free regions partition [0, max_size) exactly"""

    def check(space: MemorySpace):
        regions = list(space.allocated_list) + list(space.free_list)
        assert all(0 <= r.start and r.end <= space.max_size for r in regions)
        assert collect_coverage(space) == [1] * space.max_size
        assert space.allocated_bytes + space.free_bytes == space.max_size
        allocated_ids = {id(r) for r in space.allocated_list}
        assert not any(id(r) in allocated_ids for r in space.free_list)

    return check


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "scenario: end-to-end allocation scenario")
