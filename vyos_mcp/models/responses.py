"""Response models for VyOS MCP Server."""

import json
from typing import Any

from pydantic import BaseModel, Field


class ToolResult(BaseModel):
    """Outcome of a tool handler, translated once into an MCP tools/call result."""

    data: Any = Field(default=None, description="Decoded API result or confirmation text")
    is_error: bool = Field(default=False, description="True when data is an error message")

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(data=message, is_error=True)

    def to_text(self) -> str:
        """Render data as text content. Strings pass through unchanged."""
        if isinstance(self.data, str):
            return self.data
        return json.dumps(self.data, indent=2, default=str)

    def to_mcp(self) -> dict[str, Any]:
        """Build the tools/call result payload."""
        return {
            "content": [{"type": "text", "text": self.to_text()}],
            "isError": self.is_error,
        }
