"""Request parameter models for VyOS tools and the MCP handshake."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import ConfigFormat


class ToolParams(BaseModel):
    """Base for tool argument models. Unknown arguments are rejected."""

    model_config = ConfigDict(extra="forbid")


class NoParams(ToolParams):
    """Parameters for tools that take no arguments."""


class PathParams(ToolParams):
    """Parameters for tools addressing a config or command path."""

    path: list[str] = Field(..., description="Path components, root to leaf")


class ShowConfigParams(ToolParams):
    """Parameters for vyos_show_config tool."""

    path: list[str] = Field(default_factory=list, description="Configuration path components")
    format: ConfigFormat = Field(default=ConfigFormat.JSON, description="Output format")


class CommitParams(ToolParams):
    """Parameters for vyos_commit tool."""

    comment: str | None = Field(default=None, description="Commit comment")
    confirm_timeout: int | None = Field(
        default=None,
        ge=1,
        description="Minutes before auto-rollback unless confirmed",
    )


class HostParams(ToolParams):
    """Parameters for vyos_traceroute tool."""

    host: str = Field(..., min_length=1, description="Hostname or IP address")


class PingParams(HostParams):
    """Parameters for vyos_ping tool."""

    count: int = Field(default=4, ge=1, le=20, description="Number of pings")


# ============ MCP HANDSHAKE ============


class ClientInfo(BaseModel):
    """Client identity sent with initialize."""

    name: str = ""
    version: str = ""


class InitializeParams(BaseModel):
    """Params of the MCP initialize request.

    protocolVersion is kept untyped: a malformed value is not an error,
    it just falls back to the server default.
    """

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: Any = Field(default=None, alias="protocolVersion")
    capabilities: dict[str, Any] = Field(default_factory=dict)
    client_info: ClientInfo = Field(default_factory=ClientInfo, alias="clientInfo")


class CallToolParams(BaseModel):
    """Params of the MCP tools/call request."""

    name: str
    arguments: dict[str, Any] | None = None
