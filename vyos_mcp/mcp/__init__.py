"""MCP (Model Context Protocol) transport module.

This module contains the protocol pieces of the stdio server:
- Tool definitions for tools/list
- JSON-RPC 2.0 helpers
- Initialize handler with protocol version negotiation
"""

from .initialize import SERVER_CAPABILITIES, SERVER_NAME, NegotiatingInitializeHandler
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    JsonRpcError,
    is_notification,
    jsonrpc_error,
    jsonrpc_response,
)
from .tool_defs import TOOL_DEFINITIONS

__all__ = [
    # Tool definitions
    "TOOL_DEFINITIONS",
    # Initialize
    "NegotiatingInitializeHandler",
    "SERVER_CAPABILITIES",
    "SERVER_NAME",
    # JSON-RPC helpers
    "JsonRpcError",
    "is_notification",
    "jsonrpc_response",
    "jsonrpc_error",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
]
