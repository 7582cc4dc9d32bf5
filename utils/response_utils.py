"""Tool results and their rendering as MCP text content.

Remote call functions return one of two tagged results:
- JsonResult: a parsed JSON body, pretty-printed verbatim
- DeleteResult: the boolean outcome of a delete (204 or not)
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List, Union

from mcp.types import TextContent


@dataclass(frozen=True)
class JsonResult:
    value: Any


@dataclass(frozen=True)
class DeleteResult:
    subject: str
    success: bool

    @property
    def message(self) -> str:
        if self.success:
            return f"{self.subject} successfully deleted."
        return f"Failed to delete {self.subject.lower()}."


ToolResult = Union[JsonResult, DeleteResult]


def format_result(result: ToolResult) -> List[TextContent]:
    """Render a tool result as a single text block."""
    if isinstance(result, DeleteResult):
        return [TextContent(type="text", text=result.message)]
    if isinstance(result, JsonResult):
        return [TextContent(type="text", text=json.dumps(result.value, indent=2, ensure_ascii=False))]
    raise TypeError(f"Unsupported tool result: {type(result).__name__}")
