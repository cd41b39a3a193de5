"""MCP stdio server for the VyOS REST API.

Reads one JSON-RPC message per line from stdin and writes one response per
line to stdout. Requests are handled strictly one at a time. Logs go to
stderr so stdout carries protocol only.
"""

import asyncio
import json
import logging
import sys
from typing import Any, BinaryIO, TextIO

from pydantic import ValidationError

from . import __version__
from .config import Settings, get_settings
from .handlers import TOOL_HANDLERS, HandlerContext, execute_tool
from .mcp import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    TOOL_DEFINITIONS,
    JsonRpcError,
    NegotiatingInitializeHandler,
    is_notification,
    jsonrpc_error,
    jsonrpc_response,
)
from .models import CallToolParams, LogLevel, ProtocolVersion, SessionState, ToolName
from .services import VyosClient

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class MCPServer:
    """JSON-RPC method dispatch for a single MCP session."""

    def __init__(
        self,
        client: VyosClient,
        default_protocol_version: ProtocolVersion = ProtocolVersion.V2025_06_18,
    ):
        self.session = SessionState()
        self.ctx = HandlerContext(client=client, session=self.session)
        self.initialize_handler = NegotiatingInitializeHandler(default=default_protocol_version)

    async def handle_line(self, line: str | bytes) -> dict | list | None:
        """Handle one line of input. Returns the response, or None for notifications.

        Raw bytes must be UTF-8; anything else is answered as a parse error.
        """
        try:
            if isinstance(line, bytes):
                line = line.decode("utf-8")
            body = json.loads(line)
        except (UnicodeDecodeError, json.JSONDecodeError):
            return jsonrpc_error(None, PARSE_ERROR, "Parse error")
        return await self.handle_message(body)

    async def handle_message(self, body: Any) -> dict | list | None:
        """Handle a decoded JSON-RPC message or batch."""
        if isinstance(body, list):
            if not body:
                return jsonrpc_error(None, INVALID_REQUEST, "Empty batch")
            responses = []
            for req in body:
                resp = await self._handle_request(req)
                if resp:  # Skip notifications
                    responses.append(resp)
            return responses or None
        return await self._handle_request(body)

    async def _handle_request(self, message: Any) -> dict | None:
        if (
            not isinstance(message, dict)
            or message.get("jsonrpc") != "2.0"
            or not isinstance(message.get("method"), str)
        ):
            id = message.get("id") if isinstance(message, dict) else None
            return jsonrpc_error(id, INVALID_REQUEST, "Invalid request")

        method = message["method"]
        params = message.get("params")

        if is_notification(message):
            logger.debug(f"Notification: {method}")
            return None

        id = message["id"]
        try:
            result = await self._dispatch(method, params)
        except JsonRpcError as e:
            return jsonrpc_error(id, e.code, e.message)
        except Exception as e:
            logger.error(f"Unhandled error in {method}: {e}", exc_info=True)
            return jsonrpc_error(id, INTERNAL_ERROR, f"Internal error: {e}")
        return jsonrpc_response(id, result)

    async def _dispatch(self, method: str, params: Any) -> Any:
        if method == "initialize":
            return self.initialize_handler.handle(params, self.session)
        elif method == "ping":
            return {}
        elif method == "tools/list":
            return {"tools": TOOL_DEFINITIONS}
        elif method == "tools/call":
            return await self._handle_call_tool(params)
        elif method == "logging/setLevel":
            return self._handle_set_level(params)
        elif method == "completion/complete":
            # No prompts or resources, so nothing to complete
            return {"completion": {"values": [], "total": 0, "hasMore": False}}
        raise JsonRpcError(METHOD_NOT_FOUND, f"Method not found: {method}")

    async def _handle_call_tool(self, params: Any) -> dict:
        """Handle MCP tools/call request."""
        try:
            call = CallToolParams.model_validate(params or {})
        except ValidationError as e:
            raise JsonRpcError(INVALID_PARAMS, f"Invalid tools/call params: {e}") from e

        try:
            spec = TOOL_HANDLERS[ToolName(call.name)]
        except ValueError:
            raise JsonRpcError(INVALID_PARAMS, f"Unknown tool: {call.name}") from None

        try:
            tool_params = spec.params_model.model_validate(call.arguments or {})
        except ValidationError as e:
            raise JsonRpcError(INVALID_PARAMS, f"Invalid arguments for {call.name}: {e}") from e

        logger.info(f"Tool call: {call.name}")
        logger.debug(f"Tool arguments: {tool_params.model_dump(exclude_none=True)}")
        result = await execute_tool(call.name, spec, tool_params, self.ctx)
        return result.to_mcp()

    def _handle_set_level(self, params: Any) -> dict:
        level = params.get("level") if isinstance(params, dict) else None
        try:
            log_level = LogLevel(level)
        except ValueError:
            raise JsonRpcError(INVALID_PARAMS, f"Invalid log level: {level}") from None
        logging.getLogger("vyos_mcp").setLevel(log_level.to_python())
        self.session.log_level = log_level.value
        logger.info(f"Log level set to {log_level}")
        return {}


async def serve_stdio(
    server: MCPServer,
    stdin: BinaryIO | TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Run the request/response loop until end of input.

    Text streams are read through their underlying byte buffer so a line that
    is not valid UTF-8 gets a parse error instead of ending the loop.
    """
    if stdin is None:
        stdin = sys.stdin
    stdin = getattr(stdin, "buffer", stdin)
    stdout = sys.stdout if stdout is None else stdout

    while True:
        line = await asyncio.to_thread(stdin.readline)
        if not line:
            logger.info("End of input, shutting down")
            return
        line = line.strip()
        if not line:
            continue

        response = await server.handle_line(line)
        if response is not None:
            stdout.write(json.dumps(response, default=str) + "\n")
            stdout.flush()


async def run(settings: Settings) -> None:
    """Build the client and serve one session over stdio."""
    async with VyosClient.from_settings(settings) as client:
        server = MCPServer(client, default_protocol_version=settings.default_protocol_version)
        logger.info(f"Starting VyOS MCP Server v{__version__} for {settings.host}")
        await serve_stdio(server)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(stream=sys.stderr, level=level, format=LOG_FORMAT)


def main() -> int:
    """Process entry point. Returns the exit status."""
    configure_logging()

    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error(f"Invalid configuration (VYOS_HOST and VYOS_API_KEY are required): {e}")
        return 1

    logging.getLogger().setLevel(settings.log_level)

    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
