"""
IP address data models.

DesiredState is the caller's declared target for one address object and is
validated once at construction. RemoteObject is NetBox's authoritative record,
and WritableIPAddress is the full-replace payload sent on every write.
"""

import ipaddress
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# The other assignable type is dcim.interface for physical devices.
VIRTUAL_INTERFACE_TYPE = "virtualization.vminterface"


class IPAddressStatus(str, Enum):
    """Statuses accepted for managed IP addresses."""

    ACTIVE = "active"
    RESERVED = "reserved"
    DEPRECATED = "deprecated"
    DHCP = "dhcp"


class TagRef(BaseModel):
    """Reference to a tag in the NetBox tag registry."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int | None = None
    name: str
    slug: str

    def to_nested(self) -> dict[str, str]:
        """Writable nested-tag form."""
        return {"name": self.name, "slug": self.slug}


class AssignedObject(BaseModel):
    """Interface an IP address is bound to."""

    model_config = ConfigDict(frozen=True)

    type: str = VIRTUAL_INTERFACE_TYPE
    id: int


class DesiredState(BaseModel):
    """
    Declared target configuration for one IP address object.

    Accepts both the short field names and the NetBox-style names used in
    desired-state files (``ip_address``, ``dns_name``, ``interface_id``).
    Invalid status or address values raise ``pydantic.ValidationError``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    address: str = Field(
        validation_alias=AliasChoices("address", "ip_address"),
        description="Address in CIDR notation, e.g. 10.0.0.5/24",
    )
    status: IPAddressStatus = Field(description="Operational status")
    role: str | None = Field(default=None, description="Role, e.g. vip or loopback")
    description: str | None = None
    dns_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("dns_name", "dnsName"),
    )
    interface_id: int | None = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("interface_id", "interfaceId"),
        description="Virtual machine interface to bind to",
    )
    tags: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("address")
    @classmethod
    def validate_cidr(cls, v: str) -> str:
        """Require an IPv4/IPv6 address with prefix length."""
        v = v.strip()
        if "/" not in v:
            raise ValueError(f"{v!r} is not in CIDR notation")
        try:
            ipaddress.ip_interface(v)
        except ValueError as e:
            raise ValueError(f"{v!r} is not a valid CIDR address") from e
        return v

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: frozenset[str]) -> frozenset[str]:
        if any(not name.strip() for name in v):
            raise ValueError("Tag names must not be blank")
        return v

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "DesiredState":
        """
        Load a desired state from a YAML file.

        Args:
            yaml_path: Path to YAML file

        Returns:
            DesiredState instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValueError: If YAML is malformed, empty or doesn't match the schema
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Desired state file not found: {yaml_path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

        if not data:
            raise ValueError(f"Empty YAML file: {yaml_path}")

        return cls.model_validate(data)


class RemoteObject(BaseModel):
    """Authoritative IP address record as held by NetBox."""

    id: int
    address: str
    status: str
    role: str | None = None
    description: str | None = None
    dns_name: str | None = None
    assigned_object: AssignedObject | None = None
    tags: list[TagRef] = Field(default_factory=list)

    @property
    def resource_id(self) -> str:
        """Opaque identifier correlating this record with a desired state."""
        return str(self.id)

    def to_desired(self) -> DesiredState:
        """Project into the caller-facing desired state.

        Blank strings map to None, and any assigned object becomes the
        interface id.
        """
        from ipsync.sync.tags import TagNormalizer

        return DesiredState(
            address=self.address,
            status=self.status,
            role=self.role or None,
            description=self.description or None,
            dns_name=self.dns_name or None,
            interface_id=self.assigned_object.id if self.assigned_object else None,
            tags=TagNormalizer.to_local(self.tags),
        )

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "RemoteObject":
        """
        Build from a NetBox ``/api/ipam/ip-addresses/`` representation.

        Choice fields arrive either as ``{"value": ..., "label": ...}`` or as
        bare strings depending on NetBox version.
        """
        assigned = None
        if payload.get("assigned_object_id") is not None:
            assigned = AssignedObject(
                type=payload.get("assigned_object_type") or VIRTUAL_INTERFACE_TYPE,
                id=payload["assigned_object_id"],
            )

        return cls(
            id=payload["id"],
            address=payload["address"],
            status=_choice_value(payload.get("status")) or "",
            role=_choice_value(payload.get("role")),
            description=payload.get("description"),
            dns_name=payload.get("dns_name"),
            assigned_object=assigned,
            tags=[TagRef.model_validate(t) for t in payload.get("tags") or []],
        )


class WritableIPAddress(BaseModel):
    """Full-replace write payload for an IP address."""

    address: str
    status: IPAddressStatus
    role: str = ""
    description: str = ""
    dns_name: str = ""
    tags: list[TagRef] = Field(default_factory=list)
    assigned_object: AssignedObject | None = None

    @classmethod
    def from_desired(
        cls,
        desired: DesiredState,
        tags: list[TagRef],
        include_binding: bool = True,
    ) -> "WritableIPAddress":
        """
        Build the payload for a desired state.

        Args:
            desired: Validated desired state
            tags: Tag references already resolved against the registry
            include_binding: Whether to carry the interface binding (create omits it)
        """
        assigned = None
        if include_binding and desired.interface_id is not None:
            assigned = AssignedObject(type=VIRTUAL_INTERFACE_TYPE, id=desired.interface_id)

        return cls(
            address=desired.address,
            status=desired.status,
            role=desired.role or "",
            description=desired.description or "",
            dns_name=desired.dns_name or "",
            tags=tags,
            assigned_object=assigned,
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the NetBox writable representation.

        The binding fields are left out entirely when no interface is given so
        an existing binding upstream stays untouched.
        """
        payload: dict[str, Any] = {
            "address": self.address,
            "status": self.status.value,
            "role": self.role,
            "description": self.description,
            "dns_name": self.dns_name,
            "tags": [tag.to_nested() for tag in self.tags],
        }
        if self.assigned_object is not None:
            payload["assigned_object_type"] = self.assigned_object.type
            payload["assigned_object_id"] = self.assigned_object.id
        return payload


def _choice_value(field: Any) -> str | None:
    if isinstance(field, dict):
        return field.get("value")
    return field
