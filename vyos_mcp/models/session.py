"""Per-connection session state."""

from dataclasses import dataclass, field
from typing import Any

from .enums import ProtocolVersion


@dataclass
class SessionState:
    """State recorded by the initialize handshake.

    Written once when the client initializes, read for the rest of the
    connection. One session per process, so no locking.
    """

    protocol_version: ProtocolVersion | None = None
    client_name: str | None = None
    client_version: str | None = None
    client_capabilities: dict[str, Any] = field(default_factory=dict)
    log_level: str | None = None

    @property
    def initialized(self) -> bool:
        return self.protocol_version is not None
