"""
Direct Tool Calls Example

This example calls AKHQ tools without an MCP client in between:
1. Create the dispatcher and registry
2. Call a few tools by name
3. Print the JSON text they return

Needs an AKHQ instance; point AKHQ_MCP_BASE_URL at it (default
http://localhost:8080).

Run: python -m examples.01-direct-tools.main
"""

import asyncio
import json
import logging

from akhq_mcp.client import AkhqClient, BaseUrl
from akhq_mcp.config import get_settings
from akhq_mcp.server import build_registry


async def main():
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()

    async with AkhqClient(BaseUrl(settings.base_url), timeout=settings.timeout) as client:
        registry = build_registry(client)
        print(f"{len(registry)} tools registered")

        # Clusters known to this AKHQ instance
        result = await registry.get_required("get_cluster").execute({})
        print("Clusters:", result.text)

        if result.is_error:
            return

        clusters = json.loads(result.text)
        cluster = clusters[0]["id"] if clusters else "local"

        # Topics whose name contains "orders"
        result = await registry.get_required("get_topic").execute(
            {"cluster": cluster, "search": "orders", "page": 1}
        )
        print("Topics:", result.text[:500])

        # A missing path parameter comes back as an error result
        result = await registry.get_required("get_topic_by_topicName").execute(
            {"cluster": cluster}
        )
        print("Error:", result.text)


if __name__ == "__main__":
    asyncio.run(main())
