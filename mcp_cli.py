#!/usr/bin/env python3
"""gridly-mcp-cli: run Gridly tools from a terminal, without an MCP client.

Features:
- List tools and their input schemas: list [--schemas]
- Call one tool: call <tool> --args '{"gridId": "..."}'
- Interactive REPL: chat (/tools, /tool <name> <json>, /quit)
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

import httpx

from core.client import GridlyClient
from core.config import load_settings
from core.errors import ConfigurationError, GridlyMcpError
from core.logging_config import setup_logging
from core.registry import ToolRegistry


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="gridly-mcp-cli", description="Call Gridly MCP tools directly")
    p.add_argument("--config", help="Path to config.yaml (defaults to GRIDLY_MCP_CONFIG or ./config.yaml)")
    sub = p.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List available tools")
    p_list.add_argument("--schemas", action="store_true", help="Also print each tool's input schema")

    p_call = sub.add_parser("call", help="Call a single tool")
    p_call.add_argument("tool", help="Tool name, e.g. retrieve_grid")
    p_call.add_argument("--args", dest="tool_args", default="{}", help="Tool arguments as a JSON object")

    sub.add_parser("chat", help="Interactive REPL")
    return p.parse_args(argv)


def print_json(obj: Any) -> None:
    print(json.dumps(obj, indent=2, ensure_ascii=False))


def display(msg: Any) -> None:
    """Print a message with a blank line before and after.
    If msg is not a string, pretty-print JSON via print_json.
    """
    print()
    if isinstance(msg, str):
        print(msg)
    else:
        print_json(msg)
    print()


def parse_tool_args(raw: str) -> dict[str, Any]:
    raw = (raw or "").strip()
    if not raw:
        return {}
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("Tool arguments must be a JSON object")
    return data


def list_tools(registry: ToolRegistry, schemas: bool = False) -> int:
    for tool in registry.list_tools():
        print(f"{tool.name}: {tool.description}")
        if schemas:
            print_json(tool.input_schema)
    return 0


async def call_tool(registry: ToolRegistry, tool_name: str, arguments: dict[str, Any]) -> int:
    try:
        content = await registry.call_tool(tool_name, arguments)
    except (GridlyMcpError, httpx.HTTPError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    for item in content:
        print(item.text)
    return 0


def chat(registry: ToolRegistry) -> int:
    print("Options:")
    print("- /quit or Ctrl-C to exit.")
    print("- /tools to get all available tools")
    print('- /tool <name> <json args>, e.g. /tool retrieve_grid {"gridId": "abc"}')
    while True:
        try:
            print()
            line = input("You: ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\nBye")
            break
        if not line:
            continue
        if line in ("/quit", "/exit"):
            break
        if line == "/tools":
            display("Available tools:\n" + "\n".join(f"{t.name}: {t.description}" for t in registry.list_tools()))
            continue
        if line.startswith("/tool "):
            parts = line.split(maxsplit=2)
            if len(parts) < 2:
                print("Usage: /tool <tool_name> <json args>")
                continue
            try:
                arguments = parse_tool_args(parts[2] if len(parts) == 3 else "")
            except ValueError as e:
                print(f"Invalid arguments: {e}")
                continue
            asyncio.run(call_tool(registry, parts[1], arguments))
            continue
        print("Unknown command. Use /tools, /tool or /quit.")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(args.config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(settings.logs_dir, log_file_name="cli.log")
    registry = ToolRegistry(GridlyClient(settings))

    if args.command == "list":
        return list_tools(registry, args.schemas)
    if args.command == "call":
        try:
            arguments = parse_tool_args(args.tool_args)
        except ValueError as e:
            print(f"Invalid --args: {e}", file=sys.stderr)
            return 2
        return asyncio.run(call_tool(registry, args.tool, arguments))
    return chat(registry)


if __name__ == "__main__":
    raise SystemExit(main())
