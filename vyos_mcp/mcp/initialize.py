"""Initialize handler that negotiates the protocol version with the client.

The client's requested version is used when this server supports it;
anything else, including malformed values, falls back to a configured
default. An unknown version is never an error: per MCP the client decides
whether it can work with the version the server answers with.
"""

import logging
from typing import Any

from pydantic import ValidationError

from .. import __version__
from ..models import InitializeParams, ProtocolVersion, SessionState
from .jsonrpc import INVALID_PARAMS, INVALID_REQUEST, JsonRpcError

logger = logging.getLogger(__name__)

SERVER_NAME = "VyOS Router"

SERVER_CAPABILITIES: dict[str, Any] = {
    "tools": {"listChanged": False},
    "logging": {},
    "completions": {},
}


class NegotiatingInitializeHandler:
    """Handles the initialize request and records the client into session state."""

    def __init__(
        self,
        server_name: str = SERVER_NAME,
        server_version: str = __version__,
        default: ProtocolVersion = ProtocolVersion.V2025_06_18,
    ):
        self.server_info = {"name": server_name, "version": server_version}
        self.default = default
        self.supported = {v.value: v for v in ProtocolVersion}

    def negotiate(self, requested: Any) -> ProtocolVersion:
        """Return the requested version if supported, else the default."""
        if isinstance(requested, str) and requested in self.supported:
            return self.supported[requested]
        return self.default

    def handle(self, params: dict[str, Any] | None, session: SessionState) -> dict[str, Any]:
        """Handle initialize and return the InitializeResult payload.

        Raises:
            JsonRpcError: If the session is already initialized or params are unreadable
        """
        if session.initialized:
            raise JsonRpcError(INVALID_REQUEST, "Session already initialized")

        try:
            request = InitializeParams.model_validate(params or {})
        except ValidationError as e:
            raise JsonRpcError(INVALID_PARAMS, f"Invalid initialize params: {e}") from e

        version = self.negotiate(request.protocol_version)
        if version.value != request.protocol_version:
            logger.info(
                f"Client requested protocol {request.protocol_version!r}, answering with {version}"
            )

        session.client_name = request.client_info.name
        session.client_version = request.client_info.version
        session.client_capabilities = request.capabilities
        session.protocol_version = version

        logger.info(
            f"Session initialized: client={request.client_info.name} "
            f"{request.client_info.version} protocol={version}"
        )

        return {
            "protocolVersion": version.value,
            "capabilities": SERVER_CAPABILITIES,
            "serverInfo": self.server_info,
        }
