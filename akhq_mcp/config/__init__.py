"""
Configuration module for the AKHQ MCP adapter.

Settings come from environment variables and are validated with pydantic.
"""

from .schemas import DEFAULT_BASE_URL, AppSettings
from .settings import get_settings

__all__ = [
    "AppSettings",
    "DEFAULT_BASE_URL",
    "get_settings",
]
