"""
Tool Base Classes (MCP-Aligned).

This module defines the core abstractions shared by every AKHQ tool:
- Tool: Base class for all tools
- ToolResult: Result from tool execution
- ToolAnnotations: Behavioral hints for tools
- ContentBlock: Content blocks in tool results

MCP Alignment:
    This interface follows Model Context Protocol standards:
    - Tool has name, description, input_schema
    - ToolResult has content blocks and is_error flag
    - Annotations are advisory hints only

Usage:
    class PingTool(Tool):
        @property
        def name(self) -> str:
            return "ping"

        @property
        def description(self) -> str:
            return "Check that the adapter is alive"

        @property
        def input_schema(self) -> dict:
            return {"type": "object", "properties": {}}

        async def execute(self, arguments: dict) -> ToolResult:
            return ToolResult.success("pong")
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ContentType(Enum):
    """Type of content in a tool result (MCP-aligned)."""

    TEXT = "text"


@dataclass(frozen=True, slots=True)
class ContentBlock:
    """
    Content block in tool result (MCP-aligned).

    AKHQ responses are JSON, so every block is text.
    """

    type: ContentType
    text_content: str | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_text(
        cls,
        content: str,
        *,
        annotations: dict[str, Any] | None = None,
    ) -> ContentBlock:
        """Create a text content block."""
        return cls(
            type=ContentType.TEXT,
            text_content=content,
            annotations=annotations or {},
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {"type": self.type.value}

        if self.text_content is not None:
            result["text"] = self.text_content
        if self.annotations:
            result["annotations"] = self.annotations

        return result


@dataclass(frozen=True, slots=True)
class ToolAnnotations:
    """
    Behavioral hints for tools (MCP-aligned).

    These are ADVISORY only - they do not enforce behavior and should
    not be relied upon for security decisions.

    Attributes:
        title: Human-readable title for display
        read_only_hint: If True, tool does not modify environment
        destructive_hint: For non-read-only tools, may destroy data
        idempotent_hint: Repeated calls with same args have no additional effect
        open_world_hint: Tool interacts with external entities

    Example:
        # Listing topics
        ToolAnnotations(
            title="List all topics",
            read_only_hint=True,
            destructive_hint=False,
            idempotent_hint=True,
            open_world_hint=True,
        )
    """

    title: str | None = None
    read_only_hint: bool = False
    destructive_hint: bool = True
    idempotent_hint: bool = False
    open_world_hint: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using MCP field names."""
        result: dict[str, Any] = {}

        if self.title is not None:
            result["title"] = self.title
        if self.read_only_hint:
            result["readOnlyHint"] = True
        if not self.destructive_hint:
            result["destructiveHint"] = False
        if self.idempotent_hint:
            result["idempotentHint"] = True
        if self.open_world_hint:
            result["openWorldHint"] = True

        return result


@dataclass(frozen=True, slots=True)
class ToolResult:
    """
    Result from tool execution (MCP-aligned).

    Error Handling:
        Expected failures (bad arguments, a missing path parameter, an
        unreachable AKHQ) are reported IN the result, not as exceptions.

    Example:
        ToolResult.success('[{"id":"local"}]', structured=None)
        ToolResult.error("Missing required parameter: cluster")
    """

    content: tuple[ContentBlock, ...]
    is_error: bool = False
    structured_content: dict[str, Any] | None = None

    @classmethod
    def success(
        cls,
        text: str,
        *,
        structured: dict[str, Any] | None = None,
    ) -> ToolResult:
        """
        Create a successful result.

        Args:
            text: Result text (the JSON response for endpoint tools)
            structured: Optional structured data for programmatic use

        Returns:
            ToolResult with is_error=False
        """
        return cls(
            content=(ContentBlock.from_text(text),),
            is_error=False,
            structured_content=structured,
        )

    @classmethod
    def error(
        cls,
        message: str,
        *,
        structured: dict[str, Any] | None = None,
    ) -> ToolResult:
        """
        Create an error result.

        Args:
            message: Error description
            structured: Optional structured error data

        Returns:
            ToolResult with is_error=True
        """
        return cls(
            content=(ContentBlock.from_text(message),),
            is_error=True,
            structured_content=structured,
        )

    @property
    def text(self) -> str:
        """Get the primary text content (convenience accessor)."""
        for block in self.content:
            if block.type == ContentType.TEXT and block.text_content:
                return block.text_content
        return ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {
            "content": [block.to_dict() for block in self.content],
        }

        if self.is_error:
            result["isError"] = True
        if self.structured_content is not None:
            result["structuredContent"] = self.structured_content

        return result


class Tool(ABC):
    """
    Base class for all tools (MCP-aligned).

    Contract:
        - name: Unique identifier
        - description: Clear description for the assistant
        - input_schema: JSON Schema for arguments
        - execute: Async method that performs the action
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for the tool."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        ...

    @property
    @abstractmethod
    def input_schema(self) -> dict[str, Any]:
        """
        JSON Schema defining expected input arguments.

        Must be a JSON Schema object with ``type: "object"`` and
        ``properties``.
        """
        ...

    @property
    def annotations(self) -> ToolAnnotations:
        """Behavioral hints for the tool."""
        return ToolAnnotations()

    @abstractmethod
    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        """
        Execute the tool with the given arguments.

        Args:
            arguments: Dict matching input_schema

        Returns:
            ToolResult with execution outcome
        """
        ...

    def to_mcp_schema(self) -> dict[str, Any]:
        """Convert to MCP tool schema, including annotations."""
        schema: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }

        annotations = self.annotations.to_dict()
        if annotations:
            schema["annotations"] = annotations

        return schema

    def __repr__(self) -> str:
        return f"<Tool {self.name}>"
