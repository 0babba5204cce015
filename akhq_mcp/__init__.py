"""
AKHQ MCP - the AKHQ Kafka UI API as Model Context Protocol tools.

Each AKHQ endpoint becomes one tool: arguments are validated, substituted
into the endpoint template, sent to AKHQ, and the JSON response is returned
as text.
"""

__version__ = "1.0.0"
