"""
AKHQ API Client.

Sends already-resolved request paths to the AKHQ HTTP API and hands back the
parsed JSON. The client knows nothing about individual endpoints; tools
resolve their templates first and then call ``AkhqClient.call``.

The base URL lives in a ``BaseUrl`` register owned by the client. It is read
on every request, so updating it (e.g. through the ``set_base_url`` tool)
takes effect for all later calls.

Usage:
    async with AkhqClient(BaseUrl("http://localhost:8080")) as client:
        clusters = await client.call("/api/cluster", "GET")

        await client.call(
            "/api/local/topic",
            "POST",
            body={"name": "orders", "partition": 3},
            content_type="application/json",
        )
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from akhq_mcp.config.schemas import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================


class DispatchError(Exception):
    """Raised when a request cannot be sent or its response cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        method: str,
        path: str,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.method = method
        self.path = path
        self.status_code = status_code

    def __str__(self) -> str:
        parts = [f"[akhq] {self.args[0]}", f"({self.method} {self.path}"]
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        return " ".join(parts) + ")"


# =============================================================================
# Base URL Register
# =============================================================================


class BaseUrl:
    """
    Mutable holder for the upstream base URL.

    Any string is accepted as a new value; no further validation happens.
    """

    def __init__(self, url: str = DEFAULT_BASE_URL):
        self._url = url

    def get(self) -> str:
        return self._url

    def set(self, url: str) -> None:
        logger.info(f"[akhq_client] Base URL changed: {self._url} -> {url}")
        self._url = url

    def __str__(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"BaseUrl({self._url!r})"


# =============================================================================
# Client
# =============================================================================


class AkhqClient:
    """
    Async request dispatcher for the AKHQ API.

    Status codes are not interpreted: whatever JSON AKHQ returns, including
    error payloads, is passed back to the caller.

    HTTP client lifecycle:
        - If http_client is provided: it is used as-is (caller closes it)
        - Otherwise: one client is created lazily and closed by close()
    """

    def __init__(
        self,
        base_url: BaseUrl | None = None,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL register (a default one is created if omitted)
            timeout: Request timeout in seconds
            http_client: Optional shared HTTP client (caller manages lifecycle)
        """
        self.base_url = base_url if base_url is not None else BaseUrl()
        self._timeout = timeout
        self._shared_client = http_client
        self._owned_client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get the shared client or create the owned one."""
        if self._shared_client is not None:
            return self._shared_client

        if self._owned_client is None or self._owned_client.is_closed:
            self._owned_client = httpx.AsyncClient(timeout=self._timeout)
        return self._owned_client

    async def call(
        self,
        path: str,
        method: str,
        *,
        body: Any = None,
        content_type: str | None = None,
    ) -> Any:
        """
        Send one request and return the parsed JSON response.

        Args:
            path: Resolved request path, including any query string
            method: HTTP method
            body: Payload, JSON-encoded when not None
            content_type: Value for the Content-Type header, sent only if given

        Returns:
            Parsed JSON value

        Raises:
            DispatchError: On transport failure or a non-JSON response
        """
        method = method.upper()
        url = f"{self.base_url.get()}{path}"

        headers: dict[str, str] = {}
        if content_type:
            headers["Content-Type"] = content_type

        content = json.dumps(body) if body is not None else None

        logger.debug(f"[akhq_client] {method} {url}")

        try:
            response = await self._get_client().request(
                method=method,
                url=url,
                headers=headers,
                content=content,
            )
        except httpx.TimeoutException as e:
            raise DispatchError(
                f"Request timed out after {self._timeout}s",
                method=method,
                path=path,
            ) from e
        except httpx.HTTPError as e:
            raise DispatchError(
                f"Request failed: {e}",
                method=method,
                path=path,
            ) from e

        logger.info(f"[akhq_client] {method} {path} -> {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise DispatchError(
                f"Response is not valid JSON: {response.text[:200]}",
                method=method,
                path=path,
                status_code=response.status_code,
            ) from e

    async def close(self) -> None:
        """Close the owned HTTP client (never the shared one)."""
        if self._owned_client is not None and not self._owned_client.is_closed:
            await self._owned_client.aclose()
        self._owned_client = None

    async def __aenter__(self) -> AkhqClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"AkhqClient(base_url={self.base_url.get()!r})"
