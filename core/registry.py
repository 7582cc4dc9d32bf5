"""Tool registry and dispatcher.

The registry is the single source of truth for what the server exposes: tool
name, description, input schema and the remote call behind it. `list_tools`
never touches the network; `call_tool` validates, calls and formats.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import import_module
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Type

from mcp.types import TextContent

from core.client import GridlyClient
from core.errors import InvalidInputError, UnknownToolError
from core.schemas import ToolInput, input_schema, validate_arguments
from utils.response_utils import ToolResult, format_result

logger = logging.getLogger(__name__)

ToolFunc = Callable[[GridlyClient, Any], Awaitable[ToolResult]]

TOOLS_PACKAGE = "tools"


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    title: Optional[str]
    description: str
    input_schema: Dict[str, Any]


@dataclass(frozen=True)
class ToolSpec:
    name: str
    func: ToolFunc
    schema: Type[ToolInput]
    description: str
    title: Optional[str] = None

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(self.name, self.title, self.description, input_schema(self.schema))


def load_tool_specs(module_names: Optional[Iterable[str]] = None) -> List[ToolSpec]:
    """Collect ToolSpecs from the `get_tools()` mapping of each tools module, in order."""
    if module_names is None:
        module_names = import_module(TOOLS_PACKAGE).TOOL_MODULES

    specs: List[ToolSpec] = []
    for name in module_names:
        module_name = f"{TOOLS_PACKAGE}.{name}"
        mod = import_module(module_name)
        for tool_name, meta in mod.get_tools().items():
            func = meta.get("func")
            schema = meta.get("schema")
            if func is None or schema is None:
                raise TypeError(f"Tool {tool_name} in {module_name} must provide 'func' and 'schema'")
            specs.append(
                ToolSpec(
                    name=tool_name,
                    func=func,
                    schema=schema,
                    description=meta.get("description") or "",
                    title=meta.get("title"),
                )
            )
        logger.debug(f"Imported tools module: {module_name}")
    return specs


class ToolRegistry:
    def __init__(self, client: GridlyClient, specs: Optional[Iterable[ToolSpec]] = None):
        self.client = client
        self._tools: Dict[str, ToolSpec] = {}
        for spec in load_tool_specs() if specs is None else specs:
            if spec.name in self._tools:
                raise ValueError(f"Duplicate tool name: {spec.name}")
            self._tools[spec.name] = spec
        # Descriptors are static; build them once
        self._descriptors = [spec.descriptor() for spec in self._tools.values()]
        logger.info(f"Total tools registered: {len(self._tools)}, tool names: {list(self._tools)}")

    def get(self, name: str) -> ToolSpec:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def list_tools(self) -> List[ToolDescriptor]:
        return list(self._descriptors)

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> List[TextContent]:
        """Validate `arguments` for tool `name`, run it and format the result.

        Raises UnknownToolError or InvalidInputError. Errors from the remote call
        (RemoteApiError, httpx errors, JSON decoding errors) propagate unchanged.
        """
        try:
            spec = self.get(name)
        except UnknownToolError:
            logger.warning(f"Unknown tool requested: {name}")
            raise

        logger.info(f"Tool invocation started: {name} args_keys={sorted((arguments or {}).keys())}")
        try:
            args = validate_arguments(name, spec.schema, arguments)
        except InvalidInputError as exc:
            logger.warning(f"Validation failed for {name}: {len(exc.violations)} violation(s)")
            raise

        result = await spec.func(self.client, args)
        logger.info(f"Tool completed: {name}")
        return format_result(result)
