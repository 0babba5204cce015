"""
Tests for EndpointTool.

Tests cover:
- Schema and annotation generation from the operation
- Validation, templating and dispatch sequencing
- Body handling per HTTP method
- Error results for bad input, missing parameters and transport failures
"""

import json
from unittest.mock import AsyncMock

import pytest

from akhq_mcp.akhq.schemas import (
    ClusterParams,
    NoParams,
    TopicCreateParams,
    TopicDataDeleteParams,
    TopicDataQueryParams,
    TopicParams,
)
from akhq_mcp.client import DispatchError
from akhq_mcp.tools.endpoint import EndpointOperation, EndpointTool, to_json_text


def make_operation(method="GET", path="/api/{cluster}/topic/{topicName}", model=TopicParams):
    return EndpointOperation(
        name="test_op",
        description="Test operation",
        method=method,
        path=path,
        params_model=model,
    )


# =============================================================================
# EndpointOperation Tests
# =============================================================================


class TestEndpointOperation:
    """Tests for EndpointOperation."""

    def test_get_never_sends_body(self):
        assert make_operation("GET", model=TopicCreateParams).sends_body is False

    def test_post_with_body_field(self):
        assert make_operation("POST", model=TopicCreateParams).sends_body is True

    def test_delete_without_body_field(self):
        assert make_operation("DELETE", model=TopicParams).sends_body is False

    def test_delete_with_body_field(self):
        assert make_operation("DELETE", model=TopicDataDeleteParams).sends_body is True


# =============================================================================
# Schema and Annotations
# =============================================================================


class TestEndpointToolSchema:
    """Tests for generated schemas and annotations."""

    def test_name_and_description(self, mock_client):
        tool = EndpointTool(make_operation(), mock_client)

        assert tool.name == "test_op"
        assert tool.description == "Test operation"

    def test_input_schema_from_model(self, mock_client):
        tool = EndpointTool(make_operation(model=TopicDataQueryParams), mock_client)

        schema = tool.input_schema
        assert schema["type"] == "object"
        assert set(schema["required"]) == {"cluster", "topicName"}
        assert "searchByKey" in schema["properties"]

    def test_empty_model_has_properties(self, mock_client):
        tool = EndpointTool(make_operation(path="/api/me", model=NoParams), mock_client)

        assert tool.input_schema["properties"] == {}

    def test_annotations_for_get(self, mock_client):
        annotations = EndpointTool(make_operation("GET"), mock_client).annotations

        assert annotations.read_only_hint is True
        assert annotations.destructive_hint is False
        assert annotations.idempotent_hint is True
        assert annotations.open_world_hint is True

    def test_annotations_for_delete(self, mock_client):
        annotations = EndpointTool(make_operation("DELETE"), mock_client).annotations

        assert annotations.read_only_hint is False
        assert annotations.destructive_hint is True
        assert annotations.idempotent_hint is True

    def test_annotations_for_post(self, mock_client):
        annotations = EndpointTool(make_operation("POST"), mock_client).annotations

        assert annotations.read_only_hint is False
        assert annotations.destructive_hint is False
        assert annotations.idempotent_hint is False


# =============================================================================
# Execution
# =============================================================================


class TestEndpointToolExecute:
    """Tests for EndpointTool.execute."""

    @pytest.mark.asyncio
    async def test_get_resolves_path_and_query(self, mock_client, sample_topics):
        mock_client.call = AsyncMock(return_value=sample_topics)
        tool = EndpointTool(
            make_operation(path="/api/{cluster}/topic/{topicName}/data", model=TopicDataQueryParams),
            mock_client,
        )

        result = await tool.execute({
            "cluster": "local",
            "topicName": "orders",
            "after": "abc",
            "partition": 0,
            "searchByKey": None,
        })

        mock_client.call.assert_awaited_once_with(
            "/api/local/topic/orders/data?after=abc&partition=0",
            "GET",
            body=None,
            content_type=None,
        )
        assert result.is_error is False
        assert json.loads(result.text) == sample_topics
        assert result.structured_content == sample_topics

    @pytest.mark.asyncio
    async def test_post_sends_body_as_json(self, mock_client):
        mock_client.call = AsyncMock(return_value={"name": "orders"})
        tool = EndpointTool(
            make_operation("POST", path="/api/{cluster}/topic", model=TopicCreateParams),
            mock_client,
        )

        await tool.execute({
            "cluster": "local",
            "body": {"name": "orders", "partition": 3},
        })

        mock_client.call.assert_awaited_once_with(
            "/api/local/topic",
            "POST",
            body={"name": "orders", "partition": 3},
            content_type="application/json",
        )

    @pytest.mark.asyncio
    async def test_response_text_is_compact_json(self, mock_client):
        mock_client.call = AsyncMock(return_value=[{"id": "local", "registry": True}])
        tool = EndpointTool(make_operation(path="/api/cluster", model=NoParams), mock_client)

        result = await tool.execute({})

        assert result.text == '[{"id":"local","registry":true}]'
        assert result.structured_content is None

    @pytest.mark.asyncio
    async def test_validation_error_result(self, mock_client):
        tool = EndpointTool(make_operation(), mock_client)

        result = await tool.execute({"cluster": "local"})

        assert result.is_error is True
        payload = json.loads(result.text)
        assert payload["error"] == "Validation error"
        assert payload["details"][0]["path"] == ["topicName"]
        mock_client.call.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_path_parameter_result(self, mock_client):
        """A template placeholder the model does not declare cannot be filled."""
        tool = EndpointTool(
            make_operation(path="/api/{cluster}/node/{nodeId}", model=ClusterParams),
            mock_client,
        )

        result = await tool.execute({"cluster": "local"})

        assert result.is_error is True
        assert "Missing required parameter: nodeId" in result.text
        mock_client.call.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_dispatch_error_result(self, mock_client):
        mock_client.call = AsyncMock(
            side_effect=DispatchError("Request failed: refused", method="GET", path="/api/local")
        )
        tool = EndpointTool(make_operation(), mock_client)

        result = await tool.execute({"cluster": "local", "topicName": "orders"})

        assert result.is_error is True
        assert "Request failed" in result.text
        assert result.structured_content["status_code"] is None


def test_to_json_text_keeps_unicode():
    assert to_json_text({"name": "über"}) == '{"name":"über"}'
