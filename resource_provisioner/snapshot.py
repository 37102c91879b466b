"""Serializable snapshots of resource property maps.

Property views handed out by a store may hold stream values that can be
read only once and are bound to the session that produced them. A snapshot
materializes those streams into bytes so the copy can be persisted or passed
on safely. Streams that cannot be read are kept as they are and the
snapshot carries READ_ERROR_MARKER set to True.
"""

import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Protocol, TypeVar, runtime_checkable

from resource_provisioner.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)

__all__ = [
    "READ_ERROR_MARKER",
    "PropertyBag",
    "PropertySnapshot",
    "ValueMap",
    "clone_value_map",
    "is_stream",
]

_T = TypeVar("_T")

READ_ERROR_MARKER = "resource_provisioner.snapshot/ReadError"

_SCALAR_KINDS = (int, float, str)


def is_stream(value: Any) -> bool:
    """True for file-like values exposing a callable ``read``."""
    return callable(getattr(value, "read", None))


@runtime_checkable
class PropertyBag(Protocol):
    """Read-only property view with native and coerced access per key."""

    def __getitem__(self, key: str) -> Any: ...

    def __iter__(self) -> Iterator[str]: ...

    def __len__(self) -> int: ...

    def keys(self) -> Any: ...

    def items(self) -> Any: ...

    def get_as(self, key: str, kind: type[_T]) -> _T | None:
        """Read ``key`` coerced to ``kind``. Returns None when coercion is impossible."""
        ...


class ValueMap(Mapping[str, Any]):
    """Property view over a plain dict, the concrete PropertyBag.

    Stream values are returned as-is by item access. A coerced read of a
    stream consumes it once and caches the bytes, so later coerced reads
    return the same data. Thread-safe for concurrent coerced reads.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})
        self._materialized: dict[str, bytes | None] = {}
        self._lock = threading.Lock()

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ValueMap({self._values!r})"

    def get_as(self, key: str, kind: type[_T]) -> _T | None:
        if key not in self._values:
            return None
        value = self._values[key]
        if is_stream(value):
            value = self._read_stream(key, value)
            if value is None:
                return None
        if isinstance(value, kind):
            return value
        return self._coerce(value, kind)

    def _read_stream(self, key: str, stream: Any) -> bytes | None:
        with self._lock:
            if key not in self._materialized:
                try:
                    data = stream.read()
                except Exception as e:
                    logger.debug(f"Stream property '{key}' is not readable: {e!r}")
                    data = None
                if isinstance(data, str):
                    data = data.encode("utf-8")
                elif isinstance(data, (bytearray, memoryview)):
                    data = bytes(data)
                self._materialized[key] = data if isinstance(data, bytes) else None
            return self._materialized[key]

    @staticmethod
    def _coerce(value: Any, kind: type[_T]) -> _T | None:
        if kind is object:
            return value
        if isinstance(value, bytes) and kind is str:
            try:
                return value.decode("utf-8")  # type: ignore[return-value]
            except UnicodeDecodeError:
                return None
        if isinstance(value, str) and kind is bytes:
            return value.encode("utf-8")  # type: ignore[return-value]
        if kind in _SCALAR_KINDS and isinstance(value, (int, float, str)):
            try:
                return kind(value)  # type: ignore[call-arg]
            except (TypeError, ValueError):
                return None
        return None


class PropertySnapshot(Mapping[str, Any]):
    """Immutable point-in-time copy of a property map.

    Built by :func:`clone_value_map`; never reads from the originating store.
    """

    def __init__(self, values: Mapping[str, Any]) -> None:
        self._values = MappingProxyType(dict(values))

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PropertySnapshot({dict(self._values)!r})"

    @property
    def has_read_error(self) -> bool:
        """True if at least one stream property could not be materialized."""
        return self._values.get(READ_ERROR_MARKER) is True

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mutable copy."""
        return dict(self._values)


def clone_value_map(view: PropertyBag | Mapping[str, Any]) -> PropertySnapshot:
    """Copy a property view, materializing stream values.

    Eager values are copied as they are. Every stream value is re-read
    through ``view.get_as(key, bytes)``; a usable result replaces the stream.
    When any stream yields nothing, its original entry is kept and the
    snapshot gets READ_ERROR_MARKER set to True. Never raises: any error
    from a stream read or from the coerced read counts as unreadable.

    A plain mapping is accepted and wrapped in a :class:`ValueMap` first.
    """
    if not isinstance(view, PropertyBag):
        view = ValueMap(view)
    result = dict(view.items())
    lazy_keys = [key for key, value in result.items() if is_stream(value)]

    has_read_error = False
    for key in lazy_keys:
        try:
            value = view.get_as(key, bytes)
        except Exception as e:
            logger.debug(f"Coerced read of stream property '{key}' failed: {e!r}")
            value = None
        if value is not None:
            result[key] = value
        else:
            has_read_error = True
            logger.warning(f"Unable to read stream property '{key}', keeping unmaterialized value")

    if has_read_error:
        result[READ_ERROR_MARKER] = True
    return PropertySnapshot(result)
