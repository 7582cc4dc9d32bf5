# tools package for MCP server tools
# Each module exposes `get_tools() -> dict[str, dict]` mapping a tool name to
# {"func": async (client, args) -> ToolResult, "schema": ToolInput subclass, "title": str, "description": str}.
# The registry imports the modules in this order, which is also the order of list_tools.
TOOL_MODULES = (
    "projects",
    "databases",
    "grids",
    "views",
    "columns",
    "dependencies",
    "records",
)

__all__ = ["TOOL_MODULES"]
