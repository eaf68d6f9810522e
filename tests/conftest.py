"""Pytest configuration and shared fixtures."""

from typing import Any

import pytest

from ipsync.sync.errors import NetBoxAPIError
from ipsync.sync.models import TagRef
from ipsync.sync.reconciler import IPAddressReconciler

IP_PATH = "/api/ipam/ip-addresses/"


class FakeNetBox:
    """In-memory NetBox implementing IPAddressBackend and TagRegistry.

    Records every call in ``calls`` as ``(method_name, args)``. Set
    ``failures[method_name]`` to an exception to make that call raise.
    """

    def __init__(self) -> None:
        self.records: dict[int, dict[str, Any]] = {}
        self.tags: dict[str, TagRef] = {}
        self.calls: list[tuple[str, tuple]] = []
        self.failures: dict[str, Exception] = {}
        self._next_id = 100
        self._next_tag_id = 1

    def _record_call(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if name in self.failures:
            raise self.failures[name]

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def _not_found(self, method: str, ip_id: int) -> NetBoxAPIError:
        return NetBoxAPIError(404, method, f"{IP_PATH}{ip_id}/", "Not found.")

    def _represent(self, ip_id: int) -> dict[str, Any]:
        record = self.records[ip_id]
        role = record.get("role") or None
        return {
            "id": ip_id,
            "url": f"http://netbox.local{IP_PATH}{ip_id}/",
            "address": record["address"],
            "status": {"value": record["status"], "label": record["status"].title()},
            "role": {"value": role, "label": role.upper()} if role else None,
            "description": record.get("description", ""),
            "dns_name": record.get("dns_name", ""),
            "assigned_object_type": record.get("assigned_object_type"),
            "assigned_object_id": record.get("assigned_object_id"),
            "tags": [self.tags[t["name"]].model_dump() for t in record.get("tags", [])],
        }

    # IPAddressBackend
    def create_ip_address(self, payload: dict[str, Any]) -> int:
        self._record_call("create_ip_address", payload)
        ip_id = self._next_id
        self._next_id += 1
        self.records[ip_id] = dict(payload)
        return ip_id

    def get_ip_address(self, ip_id: int) -> dict[str, Any]:
        self._record_call("get_ip_address", ip_id)
        if ip_id not in self.records:
            raise self._not_found("GET", ip_id)
        return self._represent(ip_id)

    def update_ip_address(self, ip_id: int, payload: dict[str, Any]) -> dict[str, Any]:
        self._record_call("update_ip_address", ip_id, payload)
        if ip_id not in self.records:
            raise self._not_found("PUT", ip_id)
        binding = {
            key: self.records[ip_id].get(key)
            for key in ("assigned_object_type", "assigned_object_id")
        }
        record = dict(payload)
        for key, value in binding.items():
            record.setdefault(key, value)
        self.records[ip_id] = record
        return self._represent(ip_id)

    def delete_ip_address(self, ip_id: int) -> None:
        self._record_call("delete_ip_address", ip_id)
        if ip_id not in self.records:
            raise self._not_found("DELETE", ip_id)
        del self.records[ip_id]

    # TagRegistry
    def ensure_tag(self, name: str) -> TagRef:
        self._record_call("ensure_tag", name)
        if name not in self.tags:
            self.tags[name] = TagRef(id=self._next_tag_id, name=name, slug=name.lower())
            self._next_tag_id += 1
        return self.tags[name]


@pytest.fixture
def fake_netbox() -> FakeNetBox:
    """Empty in-memory NetBox."""
    return FakeNetBox()


@pytest.fixture
def reconciler(fake_netbox: FakeNetBox) -> IPAddressReconciler:
    """Reconciler wired to the fake NetBox for both collaborators."""
    return IPAddressReconciler(backend=fake_netbox, tag_registry=fake_netbox)


@pytest.fixture
def desired_data() -> dict[str, Any]:
    """Typical desired state as a caller would declare it."""
    return {
        "address": "10.0.0.5/24",
        "status": "active",
        "role": "vip",
        "description": "web frontend",
        "dns_name": "web.example.com",
        "tags": ["prod", "core"],
    }
