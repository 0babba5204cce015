"""
Configuration Schemas for the AKHQ MCP adapter.

Pydantic models for process settings read from the environment.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "http://localhost:8080"


class AppSettings(BaseModel):
    """
    Application settings model.

    Used for type-safe settings access. Every field can be set through an
    ``AKHQ_MCP_``-prefixed environment variable.
    """

    # MCP server identity
    server_name: str = "AKHQ"
    server_version: str = "1.0.0"

    # Upstream AKHQ API
    base_url: str = Field(DEFAULT_BASE_URL, description="Initial AKHQ base URL")
    timeout: float = Field(30.0, gt=0, description="HTTP timeout in seconds")

    # Logging
    log_level: str = Field("INFO", description="Root log level")
