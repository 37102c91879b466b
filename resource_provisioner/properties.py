"""Reserved property keys and resource type constants.

Control metadata used by the messaging/job layer travels in the same
property maps as content. Keys listed in IGNORED_PROPERTIES are meaningful
only to that layer and must never be written to a resource.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

__all__ = [
    "IGNORED_PROPERTIES",
    "RESOURCE_TYPE_EVENT",
    "RESOURCE_TYPE_FOLDER",
    "RESOURCE_TYPE_JOB",
    "RESOURCE_TYPE_PROPERTY",
    "filter_properties",
    "ignore_property",
]

RESOURCE_TYPE_FOLDER = "sling:Folder"
RESOURCE_TYPE_JOB = "slingevent:Job"
RESOURCE_TYPE_EVENT = "slingevent:Event"

# Property a leaf resource's type is read from
RESOURCE_TYPE_PROPERTY = "sling:resourceType"

IGNORED_PROPERTIES: Mapping[str, str] = MappingProxyType({
    "event.distribute": "distribution flag, consumed by the event admin",
    "event.application": "id of the instance the event originated from",
    "event.topics": "event topic, already encoded in the resource path",
    "event.job.id": "job id, already encoded in the resource name",
    "event.job.parallel": "queue scheduling flag",
    "event.job.run.local": "queue scheduling flag",
    "event.job.queueordered": "queue scheduling flag",
    "event.notification.job": "job notification payload, transient",
    "org.apache.sling.event.impl.jobs.deprecated.JobStatusNotifier": "in-memory status notifier context",
})


def ignore_property(name: str) -> bool:
    """Check if this property should be ignored when writing to the store."""
    return name in IGNORED_PROPERTIES


def filter_properties(props: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``props`` without the reserved control keys."""
    return {k: v for k, v in props.items() if not ignore_property(k)}
