"""Exception hierarchy for Resource Provisioner.

All exceptions inherit from ResourceCoreError, providing a consistent error handling interface.
"""


class ResourceCoreError(Exception):
    """Base exception for all Resource Provisioner errors."""


class InvalidPathError(ResourceCoreError, ValueError):
    """Raised when a resource path is empty or contains traversal segments."""


class PersistenceError(ResourceCoreError):
    """Raised by a resource store when a single store operation fails."""


class ResourceConflictError(PersistenceError):
    """Raised when a create lost a race against another writer creating the same path."""


class ProvisionFailed(ResourceCoreError):
    """Raised when a folder path or resource could not be brought into existence.

    Attributes:
        path: Slash-separated path that was being provisioned.
        attempts: Number of store calls made before giving up.
    """

    def __init__(self, path: str, attempts: int, message: str | None = None) -> None:
        self.path = path
        self.attempts = attempts
        super().__init__(message or f"Unable to create resource with path {path} after {attempts} attempts")


class ConflictRetryExhausted(ProvisionFailed):
    """Raised when every bounded attempt to provision a path hit a persistence error."""
