"""
Administrative tools.

These tools manage the adapter itself rather than calling AKHQ:
- get_servers: Known upstream servers (none are configured)
- set_base_url: Point the adapter at another AKHQ instance
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from akhq_mcp.client import BaseUrl
from akhq_mcp.tools.base import Tool, ToolAnnotations, ToolResult
from akhq_mcp.tools.endpoint import to_json_text
from akhq_mcp.validation import validate_arguments


class SetBaseUrlParams(BaseModel):
    url: str = Field(..., description="The new base URL")


class GetServersTool(Tool):
    """Lists upstream servers. No server list is shipped, so it is empty."""

    @property
    def name(self) -> str:
        return "get_servers"

    @property
    def description(self) -> str:
        return "Get available servers from the Swagger spec"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {"type": "object", "properties": {}}

    @property
    def annotations(self) -> ToolAnnotations:
        return ToolAnnotations(
            title="Get servers",
            read_only_hint=True,
            destructive_hint=False,
            idempotent_hint=True,
        )

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        return ToolResult.success(to_json_text([]))


class SetBaseUrlTool(Tool):
    """Replaces the base URL used for every later AKHQ request."""

    def __init__(self, base_url: BaseUrl):
        self._base_url = base_url

    @property
    def name(self) -> str:
        return "set_base_url"

    @property
    def description(self) -> str:
        return "Set the base URL for API requests"

    @property
    def input_schema(self) -> dict[str, Any]:
        return SetBaseUrlParams.model_json_schema()

    @property
    def annotations(self) -> ToolAnnotations:
        return ToolAnnotations(
            title="Set base URL",
            destructive_hint=False,
            idempotent_hint=True,
        )

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        validation = validate_arguments(SetBaseUrlParams, arguments)
        if not validation.valid:
            payload = validation.to_error_payload()
            return ToolResult.error(to_json_text(payload), structured=payload)

        url = validation.params["url"]
        self._base_url.set(url)

        payload = {"success": True, "newBaseUrl": url}
        return ToolResult.success(to_json_text(payload), structured=payload)
