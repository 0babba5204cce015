"""
Settings access for the AKHQ MCP adapter.
"""

from __future__ import annotations

import os
from functools import lru_cache

from akhq_mcp.config.schemas import DEFAULT_BASE_URL, AppSettings


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get application settings from environment.

    Uses lru_cache for singleton pattern.
    """
    return AppSettings(
        # Server
        server_name=os.getenv("AKHQ_MCP_SERVER_NAME", "AKHQ"),
        server_version=os.getenv("AKHQ_MCP_SERVER_VERSION", "1.0.0"),
        # Upstream
        base_url=os.getenv("AKHQ_MCP_BASE_URL", DEFAULT_BASE_URL),
        timeout=float(os.getenv("AKHQ_MCP_TIMEOUT", "30.0")),
        # Logging
        log_level=os.getenv("AKHQ_MCP_LOG_LEVEL", "INFO").upper(),
    )
