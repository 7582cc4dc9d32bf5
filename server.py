#!/usr/bin/env python3
"""Gridly MCP server: exposes the Gridly REST API as MCP tools over stdio."""
from __future__ import annotations

import asyncio
import sys
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from core.client import GridlyClient
from core.config import Settings, load_settings
from core.errors import ConfigurationError
from core.logging_config import get_logger, setup_logging
from core.registry import ToolRegistry

SERVER_NAME = "gridly-mcp-server"
SERVER_VERSION = "0.2.0"

logger = get_logger(__name__)


def create_server(registry: ToolRegistry) -> Server:
    """Wire the registry behind the MCP list_tools / call_tool handlers."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                title=tool.title,
                description=tool.description,
                inputSchema=tool.input_schema,
            )
            for tool in registry.list_tools()
        ]

    # The registry reports every violation; the SDK's own jsonschema check stops at the first.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        return await registry.call_tool(name, arguments)

    return server


async def serve(settings: Settings) -> None:
    registry = ToolRegistry(GridlyClient(settings))
    server = create_server(registry)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Gridly MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        setup_logging()
        logger.error(f"Configuration error: {e}")
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(settings.logs_dir)
    logger.info(f"Starting MCP server against {settings.api_base_url}...")
    try:
        asyncio.run(serve(settings))
        logger.info("MCP server shut down.")
    except KeyboardInterrupt:
        logger.info("MCP server interrupted.")
    except Exception as e:
        logger.exception("Unhandled exception running MCP server")
        print(f"Fatal error in main(): {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
