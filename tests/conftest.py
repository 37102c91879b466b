"""Common test fixtures for provisioning tests."""

import pytest

from resource_provisioner.provisioner import RetryPolicy
from resource_provisioner.store import MemoryResourceStore, set_resource_store


@pytest.fixture(autouse=True)
def _reset_store():
    """Reset the resource store singleton after each test."""
    yield
    set_resource_store(None)


@pytest.fixture
def store() -> MemoryResourceStore:
    return MemoryResourceStore()


@pytest.fixture
def policy() -> RetryPolicy:
    """Five attempts without any sleeping, for deterministic tests."""
    return RetryPolicy(attempts=5, base_delay=0.0)
