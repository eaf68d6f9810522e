"""
NetBox IP Address Reconciliation.

This module provides:
- TagNormalizer: Tag names <-> NetBox tag references
- RemoteStateReader: Read an IP address, reporting absence distinctly
- IPAddressReconciler: Create / update / delete / import lifecycle

Architecture:
    DesiredState → TagNormalizer → full-replace write → RemoteStateReader → RemoteObject

Usage:
    from ipsync.backends.netbox import NetBoxClient
    from ipsync.sync import IPAddressReconciler

    client = NetBoxClient.from_settings()
    reconciler = IPAddressReconciler(client, client)
    remote = reconciler.create({"address": "10.0.0.5/24", "status": "active"})
"""

from ipsync.sync.models import (
    VIRTUAL_INTERFACE_TYPE,
    AssignedObject,
    DesiredState,
    IPAddressStatus,
    RemoteObject,
    TagRef,
    WritableIPAddress,
)
from ipsync.sync.errors import (
    IncompleteCreateError,
    InvalidIdentifierError,
    IPSyncError,
    NetBoxAPIError,
    NetBoxTransportError,
    ResourceGoneError,
)
from ipsync.sync.classifier import ErrorKind, classify, is_not_found
from ipsync.sync.tags import TagNormalizer
from ipsync.sync.reader import ReadResult, RemoteStateReader, parse_identifier
from ipsync.sync.reconciler import IPAddressReconciler

__all__ = [
    "VIRTUAL_INTERFACE_TYPE",
    "AssignedObject",
    "DesiredState",
    "ErrorKind",
    "IPAddressReconciler",
    "IPAddressStatus",
    "IPSyncError",
    "IncompleteCreateError",
    "InvalidIdentifierError",
    "NetBoxAPIError",
    "NetBoxTransportError",
    "ReadResult",
    "RemoteObject",
    "RemoteStateReader",
    "ResourceGoneError",
    "TagNormalizer",
    "TagRef",
    "WritableIPAddress",
    "classify",
    "is_not_found",
    "parse_identifier",
]
