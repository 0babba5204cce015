"""
Tool Registry.

Holds the tools the MCP server exposes, in registration order:
- Registration with validation
- Lookup by name
- Schema export for MCP ``tools/list``

Tools are registered once at startup and not changed afterwards.

Usage:
    registry = ToolRegistry()
    register_tools(registry, build_catalog(client))

    tool = registry.get_required("get_topic")
    result = await tool.execute({"cluster": "local"})
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .base import Tool

logger = logging.getLogger(__name__)


class ToolRegistryError(Exception):
    """Error in tool registry operations."""

    pass


class ToolRegistry:
    """
    Ordered registry of available tools.

    Example:
        registry = ToolRegistry()
        registry.register(SetBaseUrlTool(client.base_url))

        tool = registry.get("set_base_url")
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """
        Register a tool.

        Args:
            tool: Tool instance to register

        Raises:
            ToolRegistryError: If the name is taken or the tool is malformed
        """
        self._validate_tool(tool)

        if tool.name in self._tools:
            raise ToolRegistryError(f"Tool '{tool.name}' already registered")

        self._tools[tool.name] = tool
        logger.debug(f"[tool_registry] Registered tool: {tool.name}")

    def get(self, name: str) -> Tool | None:
        """Get a tool by name, or None if not found."""
        return self._tools.get(name)

    def get_required(self, name: str) -> Tool:
        """
        Get a tool by name, raising if not found.

        Raises:
            ToolRegistryError: If tool not found
        """
        tool = self._tools.get(name)
        if tool is None:
            raise ToolRegistryError(f"Unknown tool: '{name}'")
        return tool

    def list_tools(self) -> list[Tool]:
        """List all registered tools in registration order."""
        return list(self._tools.values())

    def list_names(self) -> list[str]:
        """List all registered tool names in registration order."""
        return list(self._tools.keys())

    def to_mcp_schemas(self) -> list[dict[str, Any]]:
        """Get all tool schemas in MCP format."""
        return [tool.to_mcp_schema() for tool in self._tools.values()]

    def _validate_tool(self, tool: Tool) -> None:
        """
        Validate tool has required properties.

        Raises:
            ToolRegistryError: If tool is invalid
        """
        if not tool.name or not isinstance(tool.name, str):
            raise ToolRegistryError(f"Tool must have a valid name: {tool}")

        if not tool.description or not isinstance(tool.description, str):
            raise ToolRegistryError(f"Tool '{tool.name}' must have a description")

        schema = tool.input_schema
        if not isinstance(schema, dict):
            raise ToolRegistryError(f"Tool '{tool.name}' input_schema must be a dict")

        if schema.get("type") != "object":
            raise ToolRegistryError(f"Tool '{tool.name}' input_schema must have type: 'object'")

        if "properties" not in schema:
            raise ToolRegistryError(f"Tool '{tool.name}' input_schema must have 'properties'")

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __repr__(self) -> str:
        return f"<ToolRegistry tools={len(self._tools)}>"


def register_tools(registry: ToolRegistry, tools: Iterable[Tool]) -> int:
    """
    Register every tool in ``tools``, skipping the ones that fail.

    A tool that cannot be registered is logged and left out so one bad
    definition does not take the whole server down.

    Returns:
        Number of tools registered
    """
    count = 0
    for tool in tools:
        try:
            registry.register(tool)
        except ToolRegistryError as e:
            logger.error(f"[tool_registry] Failed to register tool: {e}")
            continue
        count += 1

    logger.info(f"[tool_registry] Registered {count} tool(s)")
    return count
