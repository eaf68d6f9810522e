"""
Remote State Reader - fetch an IP address from NetBox by identifier.

Reports absence (HTTP 404) distinctly from success; any other failure
propagates untouched.
"""

import logging
from dataclasses import dataclass

from ipsync.backends.protocol import IPAddressBackend
from ipsync.sync.classifier import is_not_found
from ipsync.sync.errors import InvalidIdentifierError
from ipsync.sync.models import DesiredState, RemoteObject

logger = logging.getLogger(__name__)


# NetBox ids are int64.
MAX_IDENTIFIER = 2**63 - 1


def parse_identifier(value: str | int) -> int:
    """
    Parse the decimal string form of a NetBox id.

    Raises:
        InvalidIdentifierError: If the value is not a positive decimal integer
            within the int64 range
    """
    if isinstance(value, bool):
        raise InvalidIdentifierError(value)
    if isinstance(value, int):
        ip_id = value
    else:
        text = str(value).strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidIdentifierError(value)
        ip_id = int(text)
    if ip_id <= 0 or ip_id > MAX_IDENTIFIER:
        raise InvalidIdentifierError(value)
    return ip_id


@dataclass(frozen=True)
class ReadResult:
    """Outcome of a read: the record when found, nothing when absent."""

    found: bool
    remote: RemoteObject | None = None

    @property
    def desired(self) -> DesiredState | None:
        """Desired-state projection of the record, built on access.

        Raises:
            pydantic.ValidationError: If the record holds a status this tool
                does not manage (e.g. slaac)
        """
        if self.remote is None:
            return None
        return self.remote.to_desired()


class RemoteStateReader:
    """Reads IP addresses; absence is a result, not an error."""

    def __init__(self, backend: IPAddressBackend) -> None:
        self.backend = backend

    def read(self, resource_id: str | int) -> ReadResult:
        ip_id = parse_identifier(resource_id)

        try:
            payload = self.backend.get_ip_address(ip_id)
        except Exception as e:
            if is_not_found(e):
                logger.info(f"IP address {ip_id} no longer exists in NetBox")
                return ReadResult(found=False)
            raise

        remote = RemoteObject.from_api(payload)
        return ReadResult(found=True, remote=remote)
