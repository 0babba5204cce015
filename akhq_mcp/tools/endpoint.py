"""
Endpoint Tool - one AKHQ endpoint as one tool.

Every AKHQ operation is the same three steps, so a single tool class covers
all of them:

    1. Validate the arguments against the operation's pydantic model
    2. Resolve the endpoint template into a request path
    3. Dispatch the request and return the JSON response as text

Architecture:
    EndpointTool (validates, resolves, dispatches)
        ├── EndpointOperation (name, method, template, parameter model)
        └── AkhqClient (shared request dispatcher)

Usage:
    op = EndpointOperation(
        name="get_topic",
        description="List all topics",
        method="GET",
        path="/api/{cluster}/topic",
        params_model=TopicListParams,
    )
    tool = EndpointTool(op, client)

    result = await tool.execute({"cluster": "local", "search": "orders"})
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from akhq_mcp.client import AkhqClient, DispatchError
from akhq_mcp.templating import BODY_KEY, TemplatingError, parameterize_endpoint
from akhq_mcp.tools.base import Tool, ToolAnnotations, ToolResult
from akhq_mcp.validation import validate_arguments

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def to_json_text(data: Any) -> str:
    """Compact JSON text, the form AKHQ responses are handed back in."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True, slots=True)
class EndpointOperation:
    """
    Descriptor of a single AKHQ endpoint.

    Attributes:
        name: Tool name exposed over MCP
        description: Description shown to the assistant
        method: HTTP method (GET, POST, PUT, DELETE)
        path: Endpoint template with {placeholders}
        params_model: Pydantic model of the accepted parameters
    """

    name: str
    description: str
    method: str
    path: str
    params_model: type[BaseModel]

    @property
    def sends_body(self) -> bool:
        """True when the operation carries a request body."""
        return (
            self.method.upper() != "GET"
            and BODY_KEY in self.params_model.model_fields
        )


# =============================================================================
# Endpoint Tool
# =============================================================================


class EndpointTool(Tool):
    """
    A Tool generated from a single EndpointOperation.

    Validation failures, missing path parameters and transport errors all
    come back as error results; AKHQ's own error payloads come back as
    ordinary results since status codes are passed through.
    """

    def __init__(self, operation: EndpointOperation, client: AkhqClient):
        """
        Initialize the tool.

        Args:
            operation: Endpoint descriptor
            client: Shared request dispatcher
        """
        self._operation = operation
        self._client = client

    @property
    def operation(self) -> EndpointOperation:
        return self._operation

    @property
    def name(self) -> str:
        return self._operation.name

    @property
    def description(self) -> str:
        return self._operation.description

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON Schema generated from the parameter model."""
        schema = self._operation.params_model.model_json_schema(by_alias=True)
        schema.setdefault("properties", {})
        return schema

    @property
    def annotations(self) -> ToolAnnotations:
        """Tool annotations based on HTTP method."""
        method = self._operation.method.upper()
        return ToolAnnotations(
            title=self._operation.description,
            read_only_hint=method == "GET",
            destructive_hint=method == "DELETE",
            idempotent_hint=method in ("GET", "PUT", "DELETE"),
            open_world_hint=True,
        )

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        """
        Execute the API call.

        Args:
            arguments: Raw tool arguments

        Returns:
            ToolResult with the JSON response text, or an error
        """
        validation = validate_arguments(self._operation.params_model, arguments)
        if not validation.valid:
            payload = validation.to_error_payload()
            logger.warning(
                f"[endpoint_tool:{self.name}] Invalid arguments: "
                f"{[issue.to_dict() for issue in validation.issues]}"
            )
            return ToolResult.error(to_json_text(payload), structured=payload)

        params = validation.params

        try:
            path = parameterize_endpoint(self._operation.path, params)
        except TemplatingError as e:
            logger.warning(f"[endpoint_tool:{self.name}] {e}")
            return ToolResult.error(str(e), structured={"error": str(e)})

        body = None
        content_type = None
        if self._operation.sends_body:
            body = params.get(BODY_KEY)
            content_type = JSON_CONTENT_TYPE

        try:
            data = await self._client.call(
                path,
                self._operation.method,
                body=body,
                content_type=content_type,
            )
        except DispatchError as e:
            logger.error(f"[endpoint_tool:{self.name}] {e}")
            return ToolResult.error(
                str(e),
                structured={"error": str(e), "status_code": e.status_code},
            )

        return ToolResult.success(
            to_json_text(data),
            structured=data if isinstance(data, dict) else None,
        )

    def __repr__(self) -> str:
        return f"<EndpointTool {self.name} {self._operation.method} {self._operation.path}>"
