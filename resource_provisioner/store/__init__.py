"""Resource store protocol and the in-memory test backend."""

from ._models import Resource
from .memory import MemoryResourceStore
from .protocol import ResourceStore, get_resource_store, set_resource_store

__all__ = [
    "MemoryResourceStore",
    "Resource",
    "ResourceStore",
    "get_resource_store",
    "set_resource_store",
]
