"""In-memory resource store for testing.

Simple dict-based storage implementing the ResourceStore protocol.
Not for production use: all data is lost when the process exits.
"""

import threading
from collections.abc import Mapping
from typing import Any

from resource_provisioner.exceptions import ResourceConflictError
from resource_provisioner.logging import get_pipeline_logger
from resource_provisioner.paths import ResourcePath, parent_paths, path_to_string
from resource_provisioner.properties import RESOURCE_TYPE_FOLDER
from resource_provisioner.store._models import Resource

logger = get_pipeline_logger(__name__)


class MemoryResourceStore:
    """Dict-based resource store for unit tests.

    Each single read or write is atomic, but create_or_get is not: it
    resolves first and creates afterwards, like the repository
    get-or-create helpers it stands in for. Two writers that both see a path
    as absent race on the create and the loser gets ResourceConflictError.
    Override ``_before_create`` to interleave writers deterministically.
    """

    def __init__(self, *, root_type: str = RESOURCE_TYPE_FOLDER) -> None:
        self._nodes: dict[ResourcePath, Resource] = {(): Resource(path=(), resource_type=root_type)}
        self._lock = threading.Lock()
        self.create_calls = 0
        self.conflicts = 0

    def resolve(self, path: ResourcePath) -> Resource | None:
        """Return the resource stored at ``path``."""
        with self._lock:
            return self._nodes.get(tuple(path))

    def create_or_get(
        self,
        path: ResourcePath,
        resource_type: str,
        properties: Mapping[str, Any] | None,
        intermediate_type: str,
    ) -> Resource:
        """Resolve ``path``; when absent create missing ancestors, then the leaf."""
        path = tuple(path)
        existing = self.resolve(path)
        if existing is not None:
            return existing

        for parent in parent_paths(path):
            if self.resolve(parent) is None:
                self._before_create(parent)
                self._create(Resource(path=parent, resource_type=intermediate_type))

        self._before_create(path)
        return self._create(Resource(path=path, resource_type=resource_type, properties=properties or {}))

    def _before_create(self, path: ResourcePath) -> None:
        """Hook called between the absence check and the create. No-op by default."""

    def _create(self, resource: Resource) -> Resource:
        with self._lock:
            self.create_calls += 1
            if resource.path in self._nodes:
                self.conflicts += 1
                raise ResourceConflictError(f"Resource already exists at {path_to_string(resource.path)}")
            if resource.path[:-1] not in self._nodes:
                raise ResourceConflictError(f"Parent of {path_to_string(resource.path)} disappeared")
            self._nodes[resource.path] = resource
        logger.debug(f"Created {resource.resource_type} at {resource.path_string}")
        return resource

    def paths(self) -> list[str]:
        """All stored paths in slash form, sorted, root excluded."""
        with self._lock:
            return sorted(path_to_string(p) for p in self._nodes if p)
