"""
Tests for the tool registry.
"""

import pytest

from akhq_mcp.tools.base import Tool, ToolResult
from akhq_mcp.tools.registry import ToolRegistry, ToolRegistryError, register_tools


class MockTool(Tool):
    """Mock tool for registry tests."""

    def __init__(self, name: str = "mock_tool", schema: dict | None = None):
        self._name = name
        self._schema = schema if schema is not None else {"type": "object", "properties": {}}

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return "A mock tool"

    @property
    def input_schema(self) -> dict:
        return self._schema

    async def execute(self, arguments: dict) -> ToolResult:
        return ToolResult.success("Mock executed")


class TestToolRegistry:
    """Tests for ToolRegistry."""

    def test_register_and_get(self):
        registry = ToolRegistry()
        tool = MockTool()
        registry.register(tool)

        assert registry.get("mock_tool") is tool
        assert "mock_tool" in registry
        assert len(registry) == 1

    def test_get_missing_returns_none(self):
        assert ToolRegistry().get("nope") is None

    def test_get_required_missing_raises(self):
        with pytest.raises(ToolRegistryError, match="Unknown tool"):
            ToolRegistry().get_required("nope")

    def test_duplicate_name_rejected(self):
        registry = ToolRegistry()
        registry.register(MockTool())

        with pytest.raises(ToolRegistryError, match="already registered"):
            registry.register(MockTool())

    def test_schema_must_be_object(self):
        with pytest.raises(ToolRegistryError, match="type: 'object'"):
            ToolRegistry().register(MockTool(schema={"type": "array"}))

    def test_schema_needs_properties(self):
        with pytest.raises(ToolRegistryError, match="properties"):
            ToolRegistry().register(MockTool(schema={"type": "object"}))

    def test_registration_order_kept(self):
        registry = ToolRegistry()
        for name in ("c", "a", "b"):
            registry.register(MockTool(name))

        assert registry.list_names() == ["c", "a", "b"]
        assert [s["name"] for s in registry.to_mcp_schemas()] == ["c", "a", "b"]


class TestRegisterTools:
    """Tests for bulk registration."""

    def test_failures_are_skipped(self):
        registry = ToolRegistry()

        count = register_tools(registry, [
            MockTool("first"),
            MockTool("first"),
            MockTool("broken", schema={"type": "string"}),
            MockTool("second"),
        ])

        assert count == 2
        assert registry.list_names() == ["first", "second"]
