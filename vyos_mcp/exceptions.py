"""Exception types raised by the VyOS client and tool handlers."""


class VyosError(Exception):
    """Base class for failures talking to the VyOS REST API."""


class VyosTransportError(VyosError):
    """No HTTP response was received (connect failure, timeout, TLS error)."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"VyOS API request failed: {cause}")


class VyosHTTPError(VyosError):
    """The API answered with a non-200 status code."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"VyOS API returned HTTP {status_code}: {body}")


class VyosAPIError(VyosError):
    """The API answered 200 but flagged the operation as failed (success: false)."""


class ToolCallError(Exception):
    """Uniform tool-invocation failure reported back to the MCP client."""
