"""NetBox REST client implementing the IP address and tag collaborators.

Talks to ``/api/ipam/ip-addresses/`` and ``/api/extras/tags/`` with token
authentication. No retries are attempted; every failure is raised to the
caller as ``NetBoxAPIError`` (HTTP status) or ``NetBoxTransportError``.
"""

import logging
import re
from typing import Any

import requests

from ipsync.core.settings import EnvSettings, settings
from ipsync.sync.errors import IPSyncError, NetBoxAPIError, NetBoxTransportError
from ipsync.sync.models import TagRef

logger = logging.getLogger(__name__)

IP_ADDRESSES_PATH = "/api/ipam/ip-addresses/"
TAGS_PATH = "/api/extras/tags/"


def slugify(name: str) -> str:
    """NetBox-compatible slug for a tag name."""
    slug = re.sub(r"[^a-z0-9_]+", "-", name.strip().lower()).strip("-")
    return slug or "tag"


class NetBoxClient:
    """
    Synchronous NetBox API client.

    Usage:
        client = NetBoxClient("https://netbox.example.com", "token")
        ip_id = client.create_ip_address({"address": "10.0.0.5/24", "status": "active"})
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        verify_ssl: bool = True,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "NetBoxClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @classmethod
    def from_settings(cls, env: EnvSettings | None = None) -> "NetBoxClient":
        """Build a client from environment settings."""
        env = env or settings
        if not env.netbox_url or not env.netbox_token:
            raise IPSyncError("NetBox not configured (set NETBOX_URL and NETBOX_TOKEN)")
        return cls(
            base_url=env.netbox_url,
            token=env.netbox_token,
            verify_ssl=env.netbox_verify_ssl,
            timeout=env.netbox_timeout,
        )

    # ============================================
    # IP addresses
    # ============================================
    def create_ip_address(self, payload: dict[str, Any]) -> int:
        data = self._request("POST", IP_ADDRESSES_PATH, json=payload)
        try:
            return int(data["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise NetBoxTransportError(
                f"Invalid response: missing or invalid id in {data!r}", "POST", IP_ADDRESSES_PATH
            ) from e

    def get_ip_address(self, ip_id: int) -> dict[str, Any]:
        path = f"{IP_ADDRESSES_PATH}{ip_id}/"
        data = self._request("GET", path)
        if not isinstance(data, dict) or "id" not in data or "address" not in data:
            raise NetBoxTransportError(f"Invalid response: not an IP address: {data!r}", "GET", path)
        return data

    def update_ip_address(self, ip_id: int, payload: dict[str, Any]) -> dict[str, Any]:
        return self._request("PUT", f"{IP_ADDRESSES_PATH}{ip_id}/", json=payload)

    def delete_ip_address(self, ip_id: int) -> None:
        self._request("DELETE", f"{IP_ADDRESSES_PATH}{ip_id}/")

    # ============================================
    # Tags
    # ============================================
    def ensure_tag(self, name: str) -> TagRef:
        """Look up a tag by name, creating it when missing."""
        data = self._request("GET", TAGS_PATH, params={"name": name})
        for result in data.get("results", []):
            if result.get("name") == name:
                return TagRef.model_validate(result)

        logger.info(f"Creating NetBox tag {name!r}")
        created = self._request("POST", TAGS_PATH, json={"name": name, "slug": slugify(name)})
        return TagRef.model_validate(created)

    # ============================================
    # Transport
    # ============================================
    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        headers = {
            "Authorization": f"Token {self.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.RequestException as e:
            raise NetBoxTransportError(str(e), method, path) from e

        logger.debug(
            f"{method} {path} -> {response.status_code} "
            f"({response.elapsed.total_seconds():.2f}s)"
        )

        if not response.ok:
            raise NetBoxAPIError(response.status_code, method, path, _error_detail(response))

        if response.status_code == 204 or not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise NetBoxTransportError(f"Invalid JSON response: {e}", method, path) from e


def _error_detail(response: requests.Response) -> Any:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason
    if isinstance(body, dict) and "detail" in body:
        return body["detail"]
    return body
