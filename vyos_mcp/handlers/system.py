"""Power tool handlers: vyos_reboot, vyos_poweroff."""

import logging

from ..models import NoParams, ToolResult
from .base import HandlerContext

logger = logging.getLogger(__name__)


async def handle_reboot(params: NoParams, ctx: HandlerContext) -> ToolResult:
    logger.warning(f"Reboot requested for {ctx.client.host}")
    await ctx.client.reboot()
    return ToolResult(data="Reboot initiated")


async def handle_poweroff(params: NoParams, ctx: HandlerContext) -> ToolResult:
    logger.warning(f"Power off requested for {ctx.client.host}")
    await ctx.client.poweroff()
    return ToolResult(data="Power off initiated")
