"""
AKHQ MCP Tools.

MCP-aligned tool abstractions plus the generic endpoint tool that every AKHQ
operation is built from.

Usage:
    registry = ToolRegistry()
    registry.register(EndpointTool(operation, client))

    result = await registry.get_required(operation.name).execute({...})
"""

from .base import (
    ContentBlock,
    ContentType,
    Tool,
    ToolAnnotations,
    ToolResult,
)
from .endpoint import EndpointOperation, EndpointTool
from .registry import ToolRegistry, ToolRegistryError, register_tools

__all__ = [
    # Core Tool Protocol
    "Tool",
    "ToolResult",
    "ToolAnnotations",
    "ContentBlock",
    "ContentType",
    "ToolRegistry",
    "ToolRegistryError",
    "register_tools",
    # Endpoint tools
    "EndpointOperation",
    "EndpointTool",
]
