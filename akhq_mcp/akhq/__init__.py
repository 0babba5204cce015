"""
AKHQ endpoint definitions.

Parameter schemas and the catalog of endpoint tools.
"""

from .catalog import AKHQ_OPERATIONS, build_tools

__all__ = [
    "AKHQ_OPERATIONS",
    "build_tools",
]
