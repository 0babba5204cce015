"""
Tests for the AKHQ endpoint catalog.

These check the catalog as a whole: names, templates and parameter models
must line up for every entry.
"""

from unittest.mock import AsyncMock

import pytest

from akhq_mcp.akhq.catalog import AKHQ_OPERATIONS, build_tools
from akhq_mcp.templating import placeholders
from akhq_mcp.tools.registry import ToolRegistry, register_tools


def _required_fields(model) -> set[str]:
    return {
        field.alias or name
        for name, field in model.model_fields.items()
        if field.is_required()
    }


class TestCatalogShape:
    """Structural checks over every operation."""

    def test_operation_count(self):
        assert len(AKHQ_OPERATIONS) == 76

    def test_names_unique(self):
        names = [op.name for op in AKHQ_OPERATIONS]
        assert len(names) == len(set(names))

    def test_methods_known(self):
        assert {op.method for op in AKHQ_OPERATIONS} <= {"GET", "POST", "PUT", "DELETE"}

    @pytest.mark.parametrize("operation", AKHQ_OPERATIONS, ids=lambda op: op.name)
    def test_placeholders_are_required_fields(self, operation):
        """Every placeholder must be a required parameter of its model."""
        assert set(placeholders(operation.path)) <= _required_fields(operation.params_model)

    @pytest.mark.parametrize(
        "operation",
        [op for op in AKHQ_OPERATIONS if op.method in ("POST", "PUT")],
        ids=lambda op: op.name,
    )
    def test_write_operations_carry_body(self, operation):
        assert operation.sends_body is True

    def test_all_tools_register(self, mock_client):
        registry = ToolRegistry()

        assert register_tools(registry, build_tools(mock_client)) == 76


class TestCatalogEntries:
    """Spot checks of individual endpoints end to end."""

    def _tool(self, client, name):
        return next(tool for tool in build_tools(client) if tool.name == name)

    @pytest.mark.asyncio
    async def test_group_topics_expands_array(self, mock_client):
        tool = self._tool(mock_client, "get_group_topics")

        await tool.execute({"cluster": "c1", "topics": ["a", "b"]})

        assert mock_client.call.await_args.args == ("/api/c1/group/topics?topics=a&topics=b", "GET")

    @pytest.mark.asyncio
    async def test_record_by_partition_offset(self, mock_client):
        tool = self._tool(mock_client, "get_topic_data_record_by_partition_offset")

        await tool.execute({"cluster": "local", "topicName": "t", "partition": 0, "offset": 42})

        assert mock_client.call.await_args.args == ("/api/local/topic/t/data/record/0/42", "GET")

    @pytest.mark.asyncio
    async def test_copy_topic_sends_offsets(self, mock_client):
        tool = self._tool(mock_client, "post_topic_copy_topic_by_toTopicName")

        await tool.execute({
            "fromCluster": "c1",
            "fromTopicName": "src",
            "toCluster": "c2",
            "toTopicName": "dst",
            "body": [{"partition": 0, "offset": 10}],
        })

        call = mock_client.call.await_args
        assert call.args == ("/api/c1/topic/src/copy/c2/topic/dst", "POST")
        assert call.kwargs["body"] == [{"partition": 0, "offset": 10}]
        assert call.kwargs["content_type"] == "application/json"

    @pytest.mark.asyncio
    async def test_schema_by_id_optional_topic(self, mock_client):
        tool = self._tool(mock_client, "get_schema_id_by_id")

        await tool.execute({"cluster": "local", "id": 7, "topic": "orders"})

        assert mock_client.call.await_args.args == ("/api/local/schema/id/7?topic=orders", "GET")

    @pytest.mark.asyncio
    async def test_tail_requires_topics(self, mock_client):
        tool = self._tool(mock_client, "get_tail_sse")

        result = await tool.execute({"cluster": "local"})

        assert result.is_error is True
        mock_client.call.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_instance_level_endpoint(self, mock_client):
        mock_client.call = AsyncMock(return_value={"logged": True})
        tool = self._tool(mock_client, "get_me")

        result = await tool.execute({})

        assert mock_client.call.await_args.args == ("/api/me", "GET")
        assert result.text == '{"logged":true}'
