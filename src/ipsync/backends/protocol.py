"""Backend protocol definitions for the IPAM service and tag registry."""

from typing import Any, Protocol

from ipsync.sync.models import TagRef


class IPAddressBackend(Protocol):
    """IP address CRUD against the remote IPAM service.

    Implementations raise ``NetBoxAPIError`` for non-2xx responses so a
    missing object can be told apart from other failures.
    """

    def create_ip_address(self, payload: dict[str, Any]) -> int:
        """Create an IP address.

        Args:
            payload: Writable representation without interface binding

        Returns:
            Id assigned by the remote service
        """
        ...

    def get_ip_address(self, ip_id: int) -> dict[str, Any]:
        """Fetch the full representation of an IP address."""
        ...

    def update_ip_address(self, ip_id: int, payload: dict[str, Any]) -> dict[str, Any]:
        """Replace every mutable field of an IP address.

        Args:
            ip_id: Remote id
            payload: Full writable representation

        Returns:
            Representation returned by the remote service
        """
        ...

    def delete_ip_address(self, ip_id: int) -> None:
        """Delete an IP address."""
        ...


class TagRegistry(Protocol):
    """Idempotent tag upsert."""

    def ensure_tag(self, name: str) -> TagRef:
        """Return the reference for a tag name, creating the tag if needed."""
        ...
