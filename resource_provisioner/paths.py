"""Resource path helpers.

A ResourcePath is a tuple of segment names. Strings are accepted wherever a
path is expected and split on ``/``. Segments are not sanitized here, use
:func:`build_path` to turn raw identifiers into legal segments.
"""

from collections.abc import Sequence
from typing import TypeAlias

from resource_provisioner.exceptions import InvalidPathError
from resource_provisioner.naming import filter_name

__all__ = [
    "PathLike",
    "ResourcePath",
    "build_path",
    "normalize_path",
    "parent_paths",
    "path_to_string",
]

ResourcePath: TypeAlias = tuple[str, ...]
PathLike: TypeAlias = str | Sequence[str]


def normalize_path(path: PathLike) -> ResourcePath:
    """Normalize a slash-separated string or a segment sequence into a ResourcePath.

    Empty and ``.`` segments are dropped. The root path normalizes to ``()``.

    Raises:
        InvalidPathError: If a segment is ``..``.
    """
    parts = path.replace("\\", "/").split("/") if isinstance(path, str) else list(path)
    clean: list[str] = []
    for p in parts:
        if p in ("", "."):
            continue
        if p == "..":
            raise InvalidPathError(f"Path contains traversal segment '..': {path!r}")
        clean.append(p)
    return tuple(clean)


def path_to_string(path: PathLike) -> str:
    """Render a path in absolute slash form. The root path is ``/``."""
    return "/" + "/".join(normalize_path(path))


def build_path(base: PathLike, *identifiers: str) -> ResourcePath:
    """Compose a base path with raw identifiers, each passed through filter_name.

    Example:
        >>> build_path("/var/eventing/jobs", "org/apache/sling/job", "2024")
        ('var', 'eventing', 'jobs', 'org_apache_sling_job', '_2024')
    """
    return normalize_path(base) + tuple(filter_name(i) for i in identifiers)


def parent_paths(path: PathLike) -> list[ResourcePath]:
    """Return every proper ancestor of ``path`` except the root, shortest first."""
    segments = normalize_path(path)
    return [segments[:i] for i in range(1, len(segments))]
