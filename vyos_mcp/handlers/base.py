"""Base infrastructure for tool handlers.

This module provides the common types and utilities used by all handler modules.
Each handler receives validated params and a HandlerContext, and returns a ToolResult.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Coroutine

from ..exceptions import ToolCallError

if TYPE_CHECKING:
    from ..models import SessionState, ToolParams, ToolResult
    from ..services import VyosClient


@dataclass
class HandlerContext:
    """Context object passed to all handlers.

    Carries the shared client and the session record, constructed once in
    the server and passed explicitly rather than pulled from a global.
    """

    client: "VyosClient"
    session: "SessionState"


# Type alias for handler functions
HandlerFunc = Callable[
    [Any, HandlerContext],
    Coroutine[Any, Any, "ToolResult"],
]


@dataclass(frozen=True)
class ToolSpec:
    """Registration entry: handler plus the model its arguments validate against."""

    handler: HandlerFunc
    params_model: type["ToolParams"]


@contextmanager
def wrap_tool_errors() -> Iterator[None]:
    """Normalize any failure into ToolCallError, keeping the original message.

    A ToolCallError raised inside passes through unchanged.
    """
    try:
        yield
    except ToolCallError:
        raise
    except Exception as e:
        raise ToolCallError(str(e)) from e
