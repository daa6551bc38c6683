import pytest

from fleetops.store import MemoryStore


@pytest.fixture
def store():
    return MemoryStore()
