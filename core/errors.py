"""Exception taxonomy for the Gridly MCP server.

Only ConfigurationError is fatal (startup). Everything else is local to a
single tool invocation and surfaces to the MCP client as an error result.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional


class GridlyMcpError(Exception):
    """Base class for errors raised by this server."""


class ConfigurationError(GridlyMcpError):
    """Required configuration is missing or malformed."""


class SchemaDefinitionError(GridlyMcpError, TypeError):
    """Two merged schemas declare the same field with different types."""


class UnknownToolError(GridlyMcpError):
    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class InvalidInputError(GridlyMcpError):
    """Tool arguments failed validation.

    `violations` holds every problem found, one dict per field:
    {"field": "viewId", "reason": "Field required", "type": "missing"}.
    """

    def __init__(self, tool_name: str, violations: List[Dict[str, Any]]):
        self.tool_name = tool_name
        self.violations = violations
        super().__init__(f"Invalid input for {tool_name}: {json.dumps(violations)}")


class RemoteApiError(GridlyMcpError):
    """The Gridly API answered a non-delete call with a non-success status."""

    def __init__(self, status_code: int, body: str, method: str = "", url: str = ""):
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        super().__init__(f"{method} {url} failed with HTTP {status_code}: {body}".strip())

    def json(self) -> Optional[Any]:
        try:
            return json.loads(self.body)
        except ValueError:
            return None
