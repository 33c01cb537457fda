"""
Async HTTP Transport for star-history.

Handles async GET requests against the GitHub REST API using the httpx async
client, with the same error mapping as the sync transport.
"""

import time
from typing import Any

import httpx

from starhistory.exceptions import ServerError
from starhistory.logging import log_http_request, log_http_response
from starhistory.transport import ApiResponse, build_headers, to_api_response


class AsyncHTTPTransport:
    """
    Async HTTP transport layer for the GitHub REST API.

    Mirrors HTTPTransport: one request per call, redirects followed, any
    other non-2xx answer raised as a typed UpstreamError.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: GitHub access token; requests are anonymous without one
            timeout: Request timeout in seconds
            transport: Custom httpx transport (used by starhistory.testing)
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=build_headers(token),
            follow_redirects=True,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> ApiResponse:
        """
        Make a GET request.

        Raises:
            UpstreamError: On any non-2xx response or connection failure
        """
        log_http_request("GET", path, headers=dict(self._client.headers) | (headers or {}), params=params)
        start = time.monotonic()
        try:
            response = await self._client.get(path, params=params, headers=headers)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e)) from e

        log_http_response(
            response.status_code,
            str(response.url),
            link=response.headers.get("link"),
            elapsed_ms=(time.monotonic() - start) * 1000,
        )
        return to_api_response(response)
