"""JSON-RPC 2.0 helpers for the MCP stdio transport.

See: https://www.jsonrpc.org/specification
"""

from typing import Any

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class JsonRpcError(Exception):
    """Raised inside method handlers to answer with a JSON-RPC error object."""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Create a JSON-RPC 2.0 success response."""
    return {"jsonrpc": "2.0", "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str) -> dict:
    """Create a JSON-RPC 2.0 error response.

    Args:
        id: Request ID (None for parse errors and unreadable requests)
        code: One of the error codes above
        message: Human-readable error message
    """
    return {"jsonrpc": "2.0", "id": id, "error": {"code": code, "message": message}}


def is_notification(message: dict) -> bool:
    """Notifications carry no id and never get a response."""
    return "id" not in message
