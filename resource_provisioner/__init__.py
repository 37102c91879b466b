"""Resource Provisioner - race-tolerant provisioning helpers for hierarchical resource stores.

Callers persisting jobs or events into a path-addressed store use this
package to:

    - turn arbitrary identifiers into legal path segments (filter_name)
    - drop transport/control metadata from property maps (ignore_property)
    - snapshot property views holding single-read streams (clone_value_map)
    - ensure folders and resources exist despite concurrent writers
      (ensure_folder_path, ensure_resource)

Quick Start:
    >>> from resource_provisioner import build_path, clone_value_map, ensure_resource
    >>> from resource_provisioner.store import MemoryResourceStore
    >>>
    >>> store = MemoryResourceStore()
    >>> path = build_path("/var/eventing/jobs", "org/apache/sling/job", "2024-05-01")
    >>> resource = ensure_resource(store, path, clone_value_map({"title": "nightly"}))
"""

from .exceptions import (
    ConflictRetryExhausted,
    InvalidPathError,
    PersistenceError,
    ProvisionFailed,
    ResourceConflictError,
    ResourceCoreError,
)
from .logging import get_pipeline_logger, setup_logging
from .logging import get_pipeline_logger as get_logger
from .naming import filter_name
from .paths import ResourcePath, build_path, normalize_path, path_to_string
from .properties import (
    IGNORED_PROPERTIES,
    RESOURCE_TYPE_EVENT,
    RESOURCE_TYPE_FOLDER,
    RESOURCE_TYPE_JOB,
    RESOURCE_TYPE_PROPERTY,
    filter_properties,
    ignore_property,
)
from .provisioner import RetryPolicy, ensure_folder_path, ensure_resource
from .settings import settings
from .snapshot import READ_ERROR_MARKER, PropertyBag, PropertySnapshot, ValueMap, clone_value_map
from .store import MemoryResourceStore, Resource, ResourceStore, get_resource_store, set_resource_store

__version__ = "0.1.0"

__all__ = [
    # Config/Settings
    "settings",
    # Logging
    "get_logger",
    "get_pipeline_logger",
    "setup_logging",
    # Errors
    "ResourceCoreError",
    "InvalidPathError",
    "PersistenceError",
    "ResourceConflictError",
    "ProvisionFailed",
    "ConflictRetryExhausted",
    # Names and paths
    "filter_name",
    "ResourcePath",
    "build_path",
    "normalize_path",
    "path_to_string",
    # Properties
    "IGNORED_PROPERTIES",
    "RESOURCE_TYPE_EVENT",
    "RESOURCE_TYPE_FOLDER",
    "RESOURCE_TYPE_JOB",
    "RESOURCE_TYPE_PROPERTY",
    "filter_properties",
    "ignore_property",
    # Snapshots
    "READ_ERROR_MARKER",
    "PropertyBag",
    "PropertySnapshot",
    "ValueMap",
    "clone_value_map",
    # Store
    "MemoryResourceStore",
    "Resource",
    "ResourceStore",
    "get_resource_store",
    "set_resource_store",
    # Provisioning
    "RetryPolicy",
    "ensure_folder_path",
    "ensure_resource",
]
