"""Idempotent provisioning of folder paths and leaf resources.

A store's get-or-create is not atomic under concurrent first-time creation:
two writers may both see a path as absent, both create, and the loser's
create fails. Retrying re-resolves the path, which by then exists, so a
small bounded loop turns the lost race into success without locks or any
coordination between writers.

The first successful creator's properties win. Later callers get the
existing resource back unchanged; properties are never merged.
"""

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from resource_provisioner.exceptions import (
    ConflictRetryExhausted,
    InvalidPathError,
    PersistenceError,
    ResourceCoreError,
)
from resource_provisioner.logging import get_pipeline_logger
from resource_provisioner.paths import PathLike, ResourcePath, normalize_path, path_to_string
from resource_provisioner.properties import RESOURCE_TYPE_FOLDER, RESOURCE_TYPE_PROPERTY
from resource_provisioner.settings import Settings, settings
from resource_provisioner.store import Resource, ResourceStore, get_resource_store

logger = get_pipeline_logger(__name__)

T = TypeVar("T")

__all__ = [
    "RetryPolicy",
    "ensure_folder_path",
    "ensure_resource",
]


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retry policy with optional exponential backoff.

    Args:
        attempts: Maximum number of attempts (default 5)
        base_delay: Delay before the second attempt in seconds (default 0, no sleeping)
        max_delay: Maximum delay between attempts (default 1.0)
    """

    attempts: int = 5
    base_delay: float = 0.0
    max_delay: float = 1.0

    def __post_init__(self) -> None:
        if self.attempts < 1:
            raise ValueError(f"attempts must be at least 1, got {self.attempts}")

    def delay_for(self, attempt: int) -> float:
        """Delay to wait after the zero-based ``attempt`` failed."""
        return min(self.base_delay * (2**attempt), self.max_delay)

    @classmethod
    def from_settings(cls, config: Settings) -> "RetryPolicy":
        return cls(
            attempts=config.provision_attempts,
            base_delay=config.provision_base_delay,
            max_delay=config.provision_max_delay,
        )


def _retry_on_conflict(
    path: ResourcePath,
    operation: Callable[[], T],
    policy: RetryPolicy,
    sleep: Callable[[float], Any],
) -> T:
    last_exception: PersistenceError | None = None

    for attempt in range(policy.attempts):
        try:
            return operation()
        except PersistenceError as e:
            last_exception = e
            if attempt < policy.attempts - 1:
                delay = policy.delay_for(attempt)
                logger.debug(
                    f"Provisioning {path_to_string(path)} failed: {e}. Retrying "
                    f"(attempt {attempt + 1}/{policy.attempts})"
                )
                if delay > 0:
                    sleep(delay)

    logger.error(f"Provisioning {path_to_string(path)} failed after {policy.attempts} attempts: {last_exception}")
    raise ConflictRetryExhausted(path_to_string(path), policy.attempts) from last_exception


def _prepare(
    store: ResourceStore | None,
    path: PathLike,
    policy: RetryPolicy | None,
) -> tuple[ResourceStore, ResourcePath, RetryPolicy]:
    resolved_store = store if store is not None else get_resource_store()
    if resolved_store is None:
        raise ResourceCoreError("No resource store given and no default store configured")
    segments = normalize_path(path)
    if not segments:
        raise InvalidPathError("Cannot provision the root path")
    return resolved_store, segments, policy or RetryPolicy.from_settings(settings)


def ensure_folder_path(
    store: ResourceStore | None,
    path: PathLike,
    *,
    policy: RetryPolicy | None = None,
    sleep: Callable[[float], Any] = time.sleep,
) -> None:
    """Make sure a folder exists at ``path``, creating missing folders on the way.

    Args:
        store: Store to provision in, or None for the process-global default.
        path: Slash-separated path or segment sequence. Segments must already
            be legal names; they are not sanitized here.
        policy: Retry policy, defaults to one built from settings.
        sleep: Called with the backoff delay between attempts.

    Raises:
        InvalidPathError: If ``path`` is empty (the root).
        ConflictRetryExhausted: If every attempt raised a PersistenceError.
    """
    resolved_store, segments, policy = _prepare(store, path, policy)
    _retry_on_conflict(
        segments,
        lambda: resolved_store.create_or_get(segments, RESOURCE_TYPE_FOLDER, None, RESOURCE_TYPE_FOLDER),
        policy,
        sleep,
    )


def ensure_resource(
    store: ResourceStore | None,
    path: PathLike,
    props: Mapping[str, Any],
    *,
    policy: RetryPolicy | None = None,
    sleep: Callable[[float], Any] = time.sleep,
) -> Resource:
    """Make sure a leaf resource exists at ``path`` and return it.

    The leaf gets the type found under RESOURCE_TYPE_PROPERTY in ``props``,
    or RESOURCE_TYPE_FOLDER when absent. Missing ancestors are created as
    folders. When the resource already exists it is returned as it is,
    whatever its properties.

    Raises:
        InvalidPathError: If ``path`` is empty (the root).
        ConflictRetryExhausted: If every attempt raised a PersistenceError.
    """
    resolved_store, segments, policy = _prepare(store, path, policy)
    resource_type = props.get(RESOURCE_TYPE_PROPERTY, RESOURCE_TYPE_FOLDER)
    return _retry_on_conflict(
        segments,
        lambda: resolved_store.create_or_get(segments, resource_type, props, RESOURCE_TYPE_FOLDER),
        policy,
        sleep,
    )
