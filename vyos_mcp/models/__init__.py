"""Pydantic models and typed records for VyOS MCP Server.

Import from submodules directly for cleaner imports:

    from vyos_mcp.models.enums import ToolName, ProtocolVersion
    from vyos_mcp.models.requests import PathParams
"""

# ============ ENUMS ============
from .enums import ConfigFormat, LogLevel, ProtocolVersion, ToolName

# ============ REQUEST MODELS ============
from .requests import (
    CallToolParams,
    ClientInfo,
    CommitParams,
    HostParams,
    InitializeParams,
    NoParams,
    PathParams,
    PingParams,
    ShowConfigParams,
    ToolParams,
)

# ============ RESPONSE MODELS ============
from .responses import ToolResult

# ============ SESSION ============
from .session import SessionState

__all__ = [
    # Enums
    "ConfigFormat",
    "LogLevel",
    "ProtocolVersion",
    "ToolName",
    # Request models
    "CallToolParams",
    "ClientInfo",
    "CommitParams",
    "HostParams",
    "InitializeParams",
    "NoParams",
    "PathParams",
    "PingParams",
    "ShowConfigParams",
    "ToolParams",
    # Response models
    "ToolResult",
    # Session
    "SessionState",
]
