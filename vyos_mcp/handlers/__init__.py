"""Tool handlers for the VyOS MCP server.

This package contains tool handlers organized by domain:
- config: Configuration queries, changes and persistence
- operational: Operational commands, reachability and health check
- system: Reboot and power off

Each handler is a standalone async function that takes:
- params: validated ToolParams model for the tool
- ctx: HandlerContext - shared client and session state

And returns a ToolResult. TOOL_HANDLERS is the static registration table
mapping each tool name to its handler and argument model.
"""

import logging

from ..exceptions import ToolCallError
from ..models import (
    CommitParams,
    HostParams,
    NoParams,
    PathParams,
    PingParams,
    ShowConfigParams,
    ToolName,
    ToolParams,
    ToolResult,
)
from .base import HandlerContext, HandlerFunc, ToolSpec, wrap_tool_errors
from .config import (
    handle_commit,
    handle_config_exists,
    handle_delete_config,
    handle_return_values,
    handle_save_config,
    handle_set_config,
    handle_show_config,
)
from .operational import (
    handle_dhcp_leases,
    handle_generate,
    handle_health_check,
    handle_interface_stats,
    handle_ping,
    handle_reset,
    handle_routing_table,
    handle_show,
    handle_system_info,
    handle_traceroute,
)
from .system import handle_poweroff, handle_reboot

logger = logging.getLogger(__name__)

TOOL_HANDLERS: dict[ToolName, ToolSpec] = {
    # Config queries
    ToolName.VYOS_SHOW_CONFIG: ToolSpec(handle_show_config, ShowConfigParams),
    ToolName.VYOS_CONFIG_EXISTS: ToolSpec(handle_config_exists, PathParams),
    ToolName.VYOS_RETURN_VALUES: ToolSpec(handle_return_values, PathParams),
    # Config changes
    ToolName.VYOS_SET_CONFIG: ToolSpec(handle_set_config, PathParams),
    ToolName.VYOS_DELETE_CONFIG: ToolSpec(handle_delete_config, PathParams),
    # Config persistence
    ToolName.VYOS_COMMIT: ToolSpec(handle_commit, CommitParams),
    ToolName.VYOS_SAVE_CONFIG: ToolSpec(handle_save_config, NoParams),
    # Operational commands
    ToolName.VYOS_SHOW: ToolSpec(handle_show, PathParams),
    ToolName.VYOS_RESET: ToolSpec(handle_reset, PathParams),
    ToolName.VYOS_GENERATE: ToolSpec(handle_generate, PathParams),
    # Convenience tools
    ToolName.VYOS_SYSTEM_INFO: ToolSpec(handle_system_info, NoParams),
    ToolName.VYOS_PING: ToolSpec(handle_ping, PingParams),
    ToolName.VYOS_TRACEROUTE: ToolSpec(handle_traceroute, HostParams),
    ToolName.VYOS_INTERFACE_STATS: ToolSpec(handle_interface_stats, NoParams),
    ToolName.VYOS_ROUTING_TABLE: ToolSpec(handle_routing_table, NoParams),
    ToolName.VYOS_DHCP_LEASES: ToolSpec(handle_dhcp_leases, NoParams),
    ToolName.VYOS_HEALTH_CHECK: ToolSpec(handle_health_check, NoParams),
    # Power
    ToolName.VYOS_REBOOT: ToolSpec(handle_reboot, NoParams),
    ToolName.VYOS_POWEROFF: ToolSpec(handle_poweroff, NoParams),
}


async def execute_tool(
    name: str, spec: ToolSpec, params: ToolParams, ctx: HandlerContext
) -> ToolResult:
    """Run a handler and turn any failure into an error ToolResult."""
    try:
        with wrap_tool_errors():
            return await spec.handler(params, ctx)
    except ToolCallError as e:
        logger.warning(f"Tool {name} failed: {e}")
        return ToolResult.failure(str(e))


__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    "ToolSpec",
    "wrap_tool_errors",
    # Registry
    "TOOL_HANDLERS",
    "execute_tool",
    # Config handlers
    "handle_show_config",
    "handle_config_exists",
    "handle_return_values",
    "handle_set_config",
    "handle_delete_config",
    "handle_commit",
    "handle_save_config",
    # Operational handlers
    "handle_show",
    "handle_reset",
    "handle_generate",
    "handle_system_info",
    "handle_ping",
    "handle_traceroute",
    "handle_interface_stats",
    "handle_routing_table",
    "handle_dhcp_leases",
    "handle_health_check",
    # System handlers
    "handle_reboot",
    "handle_poweroff",
]
