"""Exception classes for IP address reconciliation."""

from typing import Any


class IPSyncError(Exception):
    """Base exception for ipsync operations."""

    pass


class NetBoxAPIError(IPSyncError):
    """NetBox answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        method: str,
        path: str,
        detail: Any = None,
    ):
        self.status_code = status_code
        self.method = method
        self.path = path
        self.detail = detail
        super().__init__(f"{method} {path} failed with HTTP {status_code}: {detail}")


class NetBoxTransportError(IPSyncError):
    """Request never produced a usable response (connection, timeout, bad body)."""

    def __init__(self, message: str, method: str, path: str):
        self.method = method
        self.path = path
        super().__init__(f"{method} {path}: {message}")


class InvalidIdentifierError(IPSyncError):
    """Stored resource identifier is not a decimal integer id."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid IP address identifier: {value!r}")


class ResourceGoneError(IPSyncError):
    """Write succeeded but the object was absent on read-back."""

    def __init__(self, resource_id: str):
        self.resource_id = resource_id
        super().__init__(f"IP address {resource_id} disappeared after write")


class IncompleteCreateError(IPSyncError):
    """Object was created but applying the full desired state failed.

    The object exists upstream under ``resource_id``; ``cause`` is the
    original error from the update step.
    """

    def __init__(self, resource_id: str, cause: Exception):
        self.resource_id = resource_id
        self.cause = cause
        super().__init__(f"IP address {resource_id} created but not converged: {cause}")
