"""Configuration tool handlers.

Handles:
- vyos_show_config: Retrieve configuration at a path
- vyos_config_exists: Check whether a path exists
- vyos_return_values: Values of a multi-value node
- vyos_set_config: Set a configuration value
- vyos_delete_config: Delete a configuration node
- vyos_commit: Commit pending changes
- vyos_save_config: Save running config to startup config
"""

from ..models import CommitParams, NoParams, PathParams, ShowConfigParams, ToolResult
from .base import HandlerContext


async def handle_show_config(params: ShowConfigParams, ctx: HandlerContext) -> ToolResult:
    """Retrieve configuration at a path.

    Returns:
        ToolResult with the config tree (json) or config text (raw)
    """
    return ToolResult(data=await ctx.client.show_config(params.path, params.format))


async def handle_config_exists(params: PathParams, ctx: HandlerContext) -> ToolResult:
    exists = await ctx.client.config_exists(params.path)
    return ToolResult(data={"exists": exists})


async def handle_return_values(params: PathParams, ctx: HandlerContext) -> ToolResult:
    return ToolResult(data=await ctx.client.return_values(params.path))


async def handle_set_config(params: PathParams, ctx: HandlerContext) -> ToolResult:
    """Set a configuration value.

    The value is the last path element, e.g.
    ["interfaces", "ethernet", "eth0", "description", "LAN"].
    Changes are staged until vyos_commit.
    """
    await ctx.client.set_config(params.path)
    return ToolResult(data="Configuration set successfully")


async def handle_delete_config(params: PathParams, ctx: HandlerContext) -> ToolResult:
    await ctx.client.delete_config(params.path)
    return ToolResult(data="Configuration deleted successfully")


async def handle_commit(params: CommitParams, ctx: HandlerContext) -> ToolResult:
    """Commit pending configuration changes.

    With confirm_timeout set, the router rolls back after that many minutes
    unless the commit is confirmed.
    """
    await ctx.client.commit(params.comment, params.confirm_timeout)
    return ToolResult(data="Configuration committed successfully")


async def handle_save_config(params: NoParams, ctx: HandlerContext) -> ToolResult:
    await ctx.client.save()
    return ToolResult(data="Configuration saved successfully")
