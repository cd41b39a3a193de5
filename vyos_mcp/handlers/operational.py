"""Operational tool handlers.

Handles:
- vyos_show, vyos_reset, vyos_generate: Raw operational commands
- vyos_system_info, vyos_interface_stats, vyos_routing_table, vyos_dhcp_leases:
  Fixed show commands
- vyos_ping, vyos_traceroute: Reachability from the router
- vyos_health_check: Multi-command system report
"""

import logging
from typing import Any

from ..models import HostParams, NoParams, PathParams, PingParams, ToolResult
from .base import HandlerContext

logger = logging.getLogger(__name__)

# Health check label -> show command path, run in this order
HEALTH_CHECKS: dict[str, list[str]] = {
    "version": ["version"],
    "uptime": ["system", "uptime"],
    "cpu": ["system", "cpu"],
    "memory": ["system", "memory"],
    "storage": ["system", "storage"],
}


async def handle_show(params: PathParams, ctx: HandlerContext) -> ToolResult:
    """Run an operational show command, e.g. ["ip", "route"]."""
    return ToolResult(data=await ctx.client.show(params.path))


async def handle_reset(params: PathParams, ctx: HandlerContext) -> ToolResult:
    return ToolResult(data=await ctx.client.reset(params.path))


async def handle_generate(params: PathParams, ctx: HandlerContext) -> ToolResult:
    return ToolResult(data=await ctx.client.generate(params.path))


async def handle_system_info(params: NoParams, ctx: HandlerContext) -> ToolResult:
    return ToolResult(data=await ctx.client.show(["version"]))


async def handle_interface_stats(params: NoParams, ctx: HandlerContext) -> ToolResult:
    return ToolResult(data=await ctx.client.show(["interfaces"]))


async def handle_routing_table(params: NoParams, ctx: HandlerContext) -> ToolResult:
    return ToolResult(data=await ctx.client.show(["ip", "route"]))


async def handle_dhcp_leases(params: NoParams, ctx: HandlerContext) -> ToolResult:
    return ToolResult(data=await ctx.client.show(["dhcp", "server", "leases"]))


async def handle_ping(params: PingParams, ctx: HandlerContext) -> ToolResult:
    """Ping a host from the router.

    The REST API has no ping endpoint, so this runs the traceroute (mtr)
    operation instead; its report includes latency for every hop, the
    destination among them. count is accepted for compatibility but mtr
    report cycles are fixed by the router.
    """
    return ToolResult(data=await ctx.client.traceroute(params.host))


async def handle_traceroute(params: HostParams, ctx: HandlerContext) -> ToolResult:
    return ToolResult(data=await ctx.client.traceroute(params.host))


async def handle_health_check(params: NoParams, ctx: HandlerContext) -> ToolResult:
    """Run a system health check: version, uptime, CPU, memory, storage.

    Checks run one after another. A failing check is reported inline as
    "Error: <message>" and does not stop the others.

    Returns:
        ToolResult with a mapping of check name to result or error string
    """
    results: dict[str, Any] = {}
    for label, path in HEALTH_CHECKS.items():
        try:
            results[label] = await ctx.client.show(path)
        except Exception as e:
            logger.warning(f"Health check '{label}' failed: {e}")
            results[label] = f"Error: {e}"
    return ToolResult(data=results)
