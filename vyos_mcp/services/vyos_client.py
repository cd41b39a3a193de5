"""VyOS REST API client.

Every operation is a single multipart POST with two form fields:
``data`` (JSON operation descriptor) and ``key`` (API key). There are no
retries; one attempt per call.

Endpoints:
    /retrieve     showConfig, exists, returnValues
    /configure    set, delete
    /config-file  commit, save
    /show, /reset, /generate, /traceroute
    /reboot, /poweroff
"""

import json
import logging
from typing import Any

import httpx

from ..config import Settings
from ..exceptions import VyosAPIError, VyosHTTPError, VyosTransportError
from ..models.enums import ConfigFormat

logger = logging.getLogger(__name__)


class VyosClient:
    """Async client for the VyOS REST API."""

    def __init__(
        self,
        host: str,
        api_key: str,
        *,
        verify_ssl: bool = False,
        timeout: float = 30.0,
        connect_timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.host = host.rstrip("/")
        self._api_key = api_key
        self._http = httpx.AsyncClient(
            verify=verify_ssl,
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> "VyosClient":
        return cls(
            settings.host,
            settings.api_key,
            verify_ssl=settings.verify_ssl,
            timeout=settings.timeout,
            connect_timeout=settings.connect_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "VyosClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ============ CONFIG QUERIES → /retrieve ============

    async def show_config(
        self, path: list[str] | None = None, format: ConfigFormat = ConfigFormat.JSON
    ) -> Any:
        """Show configuration at a path. ``raw`` returns config text instead of JSON."""
        data: dict[str, Any] = {"op": "showConfig", "path": path or []}
        if format == ConfigFormat.RAW:
            data["configFormat"] = "raw"
        return await self.request("/retrieve", data)

    async def config_exists(self, path: list[str]) -> bool:
        result = await self.request("/retrieve", {"op": "exists", "path": path})
        return bool(result)

    async def return_values(self, path: list[str]) -> Any:
        """Return the values of a multi-value node (e.g. name-server)."""
        return await self.request("/retrieve", {"op": "returnValues", "path": path})

    # ============ CONFIG CHANGES → /configure ============

    async def set_config(self, path: list[str]) -> None:
        """Set a config node. The value is the last path element."""
        await self.request("/configure", {"op": "set", "path": path})

    async def delete_config(self, path: list[str]) -> None:
        await self.request("/configure", {"op": "delete", "path": path})

    # ============ PERSISTENCE → /config-file ============

    async def commit(self, comment: str | None = None, confirm_timeout: int | None = None) -> None:
        """Commit pending changes.

        Args:
            comment: Optional commit comment
            confirm_timeout: Minutes before the router rolls back unless confirmed
        """
        data: dict[str, Any] = {"op": "commit"}
        if comment is not None:
            data["comment"] = comment
        if confirm_timeout is not None:
            data["confirm"] = confirm_timeout
        await self.request("/config-file", data)

    async def save(self) -> None:
        """Save the running config to the startup config."""
        await self.request("/config-file", {"op": "save"})

    # ============ OPERATIONAL ============

    async def show(self, path: list[str]) -> Any:
        return await self.request("/show", {"op": "show", "path": path})

    async def reset(self, path: list[str]) -> Any:
        return await self.request("/reset", {"op": "reset", "path": path})

    async def generate(self, path: list[str]) -> Any:
        return await self.request("/generate", {"op": "generate", "path": path})

    async def traceroute(self, host: str) -> Any:
        """Run mtr towards a host. Reports per-hop latency including the destination."""
        return await self.request("/traceroute", {"op": "traceroute", "host": host})

    # ============ SYSTEM ============

    async def reboot(self) -> None:
        await self.request("/reboot", {"op": "reboot"})

    async def poweroff(self) -> None:
        await self.request("/poweroff", {"op": "poweroff"})

    # ============ TRANSPORT ============

    async def request(self, endpoint: str, data: dict[str, Any]) -> Any:
        """POST an operation descriptor to an endpoint and decode the response.

        Args:
            endpoint: API path, e.g. "/retrieve"
            data: Operation descriptor, must contain "op"

        Returns:
            The envelope's ``data`` field, the whole decoded body when ``data``
            is absent or null, or the raw text when the body is not JSON.

        Raises:
            VyosTransportError: No response received
            VyosHTTPError: Status code other than 200
            VyosAPIError: Response flagged ``success: false``
        """
        url = f"{self.host}{endpoint}"
        logger.debug(f"POST {url} op={data.get('op')} path={data.get('path')}")

        # (None, value) tuples force multipart/form-data without a filename
        form = {
            "data": (None, json.dumps(data)),
            "key": (None, self._api_key),
        }

        try:
            response = await self._http.post(url, files=form)
        except httpx.HTTPError as e:
            raise VyosTransportError(e) from e

        body = response.text
        if response.status_code != 200:
            raise VyosHTTPError(response.status_code, body)

        try:
            decoded = json.loads(body)
        except json.JSONDecodeError:
            # Some operational commands answer with plain text
            return body

        if not isinstance(decoded, dict):
            return decoded

        if decoded.get("success") is not None and not decoded["success"]:
            message = decoded.get("error")
            if message is None:
                message = decoded.get("data")
            if message is None:
                message = "Unknown error"
            if not isinstance(message, str):
                message = json.dumps(message, default=str)
            raise VyosAPIError(message)

        if decoded.get("data") is not None:
            return decoded["data"]
        return decoded
