"""
AKHQ MCP Server.

Binds the tool registry to the Model Context Protocol over stdio:
- tools/list returns every registered tool with its input schema
- tools/call runs the named tool and returns its text content

Running:
    akhq-mcp --base-url http://akhq.internal:8080
    python -m akhq_mcp

stdout carries the MCP stream, so logs go to stderr.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from akhq_mcp.akhq.catalog import build_tools
from akhq_mcp.client import AkhqClient, BaseUrl
from akhq_mcp.config import AppSettings, get_settings
from akhq_mcp.tools.admin import GetServersTool, SetBaseUrlTool
from akhq_mcp.tools.base import Tool
from akhq_mcp.tools.registry import ToolRegistry, ToolRegistryError, register_tools

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ToolCallError(Exception):
    """A tool call that finished with an error result."""


# =============================================================================
# Registry Assembly
# =============================================================================


def build_registry(client: AkhqClient) -> ToolRegistry:
    """
    Build the registry with the administrative tools first, then the catalog.

    Args:
        client: Shared dispatcher; its base URL register backs set_base_url
    """
    registry = ToolRegistry()
    register_tools(registry, [GetServersTool(), SetBaseUrlTool(client.base_url)])
    register_tools(registry, build_tools(client))
    return registry


# =============================================================================
# MCP Binding
# =============================================================================


def to_mcp_tool(tool: Tool) -> types.Tool:
    """Convert a registry tool to the MCP SDK's Tool type."""
    schema = tool.to_mcp_schema()
    annotations = schema.get("annotations")
    return types.Tool(
        name=schema["name"],
        description=schema["description"],
        inputSchema=schema["inputSchema"],
        annotations=types.ToolAnnotations(**annotations) if annotations else None,
    )


async def dispatch_tool_call(
    registry: ToolRegistry,
    name: str,
    arguments: dict[str, Any] | None,
) -> list[types.TextContent]:
    """
    Run a tool and convert its result to MCP content.

    Raises:
        ToolCallError: If the tool is unknown or reports an error; the
            server turns this into an ``isError`` call result
    """
    try:
        tool = registry.get_required(name)
    except ToolRegistryError as e:
        raise ToolCallError(str(e)) from e

    result = await tool.execute(arguments or {})
    if result.is_error:
        raise ToolCallError(result.text)

    return [
        types.TextContent(type="text", text=block.text_content or "")
        for block in result.content
    ]


def create_server(registry: ToolRegistry, settings: AppSettings) -> Server:
    """Create the low-level MCP server and register its handlers."""
    server = Server(settings.server_name, version=settings.server_version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [to_mcp_tool(tool) for tool in registry.list_tools()]

    # Tools validate their own arguments and report problems in the result
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return await dispatch_tool_call(registry, name, arguments)

    return server


async def serve(settings: AppSettings) -> None:
    """Serve MCP over stdio until the client disconnects."""
    client = AkhqClient(BaseUrl(settings.base_url), timeout=settings.timeout)
    registry = build_registry(client)
    server = create_server(registry, settings)

    logger.info(
        f"Starting {settings.server_name} MCP server with {len(registry)} tools "
        f"(base URL {settings.base_url})"
    )

    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await client.close()
        logger.info("MCP server stopped")


# =============================================================================
# Entry Point
# =============================================================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="akhq-mcp",
        description="Expose the AKHQ API as MCP tools over stdio.",
    )
    parser.add_argument("--base-url", help="AKHQ base URL (env: AKHQ_MCP_BASE_URL)")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds (env: AKHQ_MCP_TIMEOUT)")
    parser.add_argument("--log-level", help="Log level (env: AKHQ_MCP_LOG_LEVEL)")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> AppSettings:
    """Environment settings with command-line overrides applied."""
    overrides: dict[str, Any] = {}
    if args.base_url is not None:
        overrides["base_url"] = args.base_url
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()

    return get_settings().model_copy(update=overrides)


def main(argv: list[str] | None = None) -> None:
    settings = resolve_settings(parse_args(argv))

    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
