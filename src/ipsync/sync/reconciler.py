"""
IP Address Reconciler - converge a NetBox IP address to a desired state.

Every write goes through the same full-replace update path: create only
obtains an id and then delegates to update, which applies the complete
desired state (including the interface binding) and reads the canonical
record back.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ipsync.backends.protocol import IPAddressBackend, TagRegistry
from ipsync.sync.errors import IncompleteCreateError, ResourceGoneError
from ipsync.sync.models import DesiredState, RemoteObject, WritableIPAddress
from ipsync.sync.reader import ReadResult, RemoteStateReader, parse_identifier
from ipsync.sync.tags import TagNormalizer

logger = logging.getLogger(__name__)


class IPAddressReconciler:
    """
    Lifecycle controller for one kind of NetBox object: IP addresses.

    Holds no state between calls; each operation re-fetches from NetBox.
    Concurrent writes to the same id must be serialized by the caller.

    Usage:
        reconciler = IPAddressReconciler(client, client)
        remote = reconciler.create({"address": "10.0.0.5/24", "status": "active"})
        reconciler.update(remote.resource_id, desired)
        reconciler.delete(remote.resource_id)
    """

    def __init__(
        self,
        backend: IPAddressBackend,
        tag_registry: TagRegistry,
    ) -> None:
        """
        Initialize IPAddressReconciler.

        Args:
            backend: IP address CRUD collaborator
            tag_registry: Tag lookup-or-create collaborator
        """
        self.backend = backend
        self.tags = TagNormalizer(tag_registry)
        self.reader = RemoteStateReader(backend)

    def create(self, desired: DesiredState | Mapping[str, Any]) -> RemoteObject:
        """
        Create the IP address and converge it to the desired state.

        The creation request omits the interface binding; the follow-up
        update applies it.

        Raises:
            pydantic.ValidationError: Desired state is invalid (nothing sent)
            IncompleteCreateError: Object was created but the update failed
        """
        desired = _coerce(desired)
        tags = self.tags.to_remote(desired.tags)
        data = WritableIPAddress.from_desired(desired, tags, include_binding=False)

        ip_id = self.backend.create_ip_address(data.to_payload())
        resource_id = str(ip_id)
        logger.info(f"Created IP address {desired.address} as {resource_id}")

        try:
            return self.update(resource_id, desired)
        except Exception as e:
            logger.error(f"IP address {resource_id} created but update failed: {e}")
            raise IncompleteCreateError(resource_id, e) from e

    def read(self, resource_id: str | int) -> ReadResult:
        """Fetch the current record; ``found`` is False when it no longer exists."""
        return self.reader.read(resource_id)

    def update(
        self,
        resource_id: str | int,
        desired: DesiredState | Mapping[str, Any],
    ) -> RemoteObject:
        """
        Full-replace the IP address and return the refreshed record.

        Without an interface id the binding fields are not sent, so an
        existing binding is left as it is. A 404 here is fatal.
        """
        ip_id = parse_identifier(resource_id)
        desired = _coerce(desired)
        tags = self.tags.to_remote(desired.tags)
        data = WritableIPAddress.from_desired(desired, tags)

        self.backend.update_ip_address(ip_id, data.to_payload())
        logger.debug(f"Updated IP address {ip_id}")

        result = self.reader.read(ip_id)
        if not result.found:
            raise ResourceGoneError(str(ip_id))
        return result.remote

    def delete(self, resource_id: str | int) -> None:
        """Delete the IP address. Any failure, including 404, propagates."""
        ip_id = parse_identifier(resource_id)
        self.backend.delete_ip_address(ip_id)
        logger.info(f"Deleted IP address {ip_id}")

    def import_resource(self, resource_id: str | int) -> DesiredState | None:
        """Desired state of an existing IP address, or None if it does not exist."""
        result = self.reader.read(resource_id)
        if not result.found:
            return None
        return result.desired

    def apply(
        self,
        desired: DesiredState | Mapping[str, Any],
        resource_id: str | int | None = None,
    ) -> RemoteObject:
        """Converge: create when no id is tracked, update otherwise."""
        if resource_id is None:
            return self.create(desired)
        return self.update(resource_id, desired)


def _coerce(desired: DesiredState | Mapping[str, Any]) -> DesiredState:
    if isinstance(desired, DesiredState):
        return desired
    return DesiredState.model_validate(desired)
