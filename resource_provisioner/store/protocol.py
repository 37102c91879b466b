"""Resource store protocol and singleton management.

Defines the ResourceStore protocol that hierarchical store adapters must
implement, along with get/set helpers for the process-global default store.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from resource_provisioner.paths import ResourcePath
from resource_provisioner.store._models import Resource


@runtime_checkable
class ResourceStore(Protocol):
    """Protocol for hierarchical, path-addressed resource stores.

    Implementations: MemoryResourceStore (testing). Production stores are
    adapters over an external repository and live outside this package.
    """

    def resolve(self, path: ResourcePath) -> Resource | None:
        """Return the resource at ``path`` or None if absent."""
        ...

    def create_or_get(
        self,
        path: ResourcePath,
        resource_type: str,
        properties: Mapping[str, Any] | None,
        intermediate_type: str,
    ) -> Resource:
        """Return the resource at ``path``, creating it and missing ancestors if absent.

        Not required to be atomic. Raises a PersistenceError subclass when a
        create fails, typically because a concurrent writer created the same
        path first.
        """
        ...


_resource_store: ResourceStore | None = None


def get_resource_store() -> ResourceStore | None:
    """Get the process-global resource store singleton."""
    return _resource_store


def set_resource_store(store: ResourceStore | None) -> None:
    """Set the process-global resource store singleton."""
    global _resource_store
    _resource_store = store
