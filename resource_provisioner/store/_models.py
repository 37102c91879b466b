"""Resource record returned by stores."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from resource_provisioner.paths import ResourcePath

__all__ = ["Resource"]


@dataclass(frozen=True, slots=True)
class Resource:
    """A node of the hierarchical store as seen at the time of the call.

    Instances are never cached between provisioning calls.
    """

    path: ResourcePath
    resource_type: str
    properties: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @property
    def name(self) -> str:
        """Last path segment, empty for the root."""
        return self.path[-1] if self.path else ""

    @property
    def path_string(self) -> str:
        return "/" + "/".join(self.path)
