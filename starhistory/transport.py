"""
HTTP Transport for star-history.

Handles authenticated GET requests against the GitHub REST API and parses
error responses into typed exceptions.
"""

import time
from dataclasses import dataclass
from typing import Any

import httpx

from starhistory.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    UpstreamError,
    ValidationError,
)
from starhistory.logging import log_http_request, log_http_response

DEFAULT_ACCEPT = "application/vnd.github.v3+json"


@dataclass
class ApiResponse:
    """A successful API response: status, headers and decoded JSON body."""

    status_code: int
    headers: httpx.Headers
    data: Any

    @property
    def link(self) -> str | None:
        """The raw Link pagination header, if any."""
        return self.headers.get("link")


def build_headers(token: str | None) -> dict[str, str]:
    """Default request headers, with the token credential when one is given."""
    headers = {"Accept": DEFAULT_ACCEPT}
    if token:
        headers["Authorization"] = f"token {token}"
    return headers


def parse_error_response(response: httpx.Response) -> UpstreamError:
    """
    Parse an error response into a typed exception.

    GitHub error bodies look like ``{"message": ..., "documentation_url": ...}``.

    Args:
        response: HTTP response with error status

    Returns:
        Appropriate UpstreamError subclass
    """
    try:
        data = response.json()
    except ValueError:
        data = response.text or None

    status_code = response.status_code
    message = f"HTTP {status_code}"
    if isinstance(data, dict) and data.get("message"):
        message = str(data["message"])
    request_id = response.headers.get("X-GitHub-Request-Id")
    code = f"HTTP_{status_code}"

    kwargs: dict[str, Any] = {"status": status_code, "body": data, "request_id": request_id}

    if status_code == 401:
        return AuthenticationError(code, message, **kwargs)
    elif status_code == 403:
        return AuthorizationError(code, message, **kwargs)
    elif status_code == 404:
        return NotFoundError(code, message, **kwargs)
    elif status_code == 429:
        retry_after_str = response.headers.get("Retry-After", "60")
        try:
            retry_after = int(retry_after_str)
        except ValueError:
            retry_after = 60
        return RateLimitedError(code, message, retry_after, **kwargs)
    elif status_code >= 500:
        return ServerError(code, message, **kwargs)
    elif status_code >= 400:
        return ValidationError(code, message, **kwargs)
    else:
        # 1xx/3xx left over after redirects were followed
        return UpstreamError(code, message, **kwargs)


def to_api_response(response: httpx.Response) -> ApiResponse:
    """
    Wrap a 2xx response, or raise the typed error for anything else.

    Raises:
        UpstreamError: If the status is not 2xx
    """
    if not response.is_success:
        raise parse_error_response(response)

    return ApiResponse(
        status_code=response.status_code,
        headers=response.headers,
        data=response.json() if response.content else None,
    )


class HTTPTransport:
    """
    HTTP transport layer for the GitHub REST API.

    Handles:
    - Optional token authentication
    - Response headers and JSON bodies surfaced together as ApiResponse
    - Error response parsing into typed exceptions

    Each call issues exactly one request. Redirects (e.g. a renamed
    repository) are followed; any other non-2xx answer raises.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: GitHub access token; requests are anonymous without one
            timeout: Request timeout in seconds
            transport: Custom httpx transport (used by starhistory.testing)
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=build_headers(token),
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> ApiResponse:
        """
        Make a GET request.

        Args:
            path: API path (e.g., "/repos/owner/name/stargazers")
            params: Query parameters
            headers: Extra headers, merged over the defaults

        Returns:
            ApiResponse with status, headers and parsed JSON

        Raises:
            UpstreamError: On any non-2xx response or connection failure
        """
        log_http_request("GET", path, headers=dict(self._client.headers) | (headers or {}), params=params)
        start = time.monotonic()
        try:
            response = self._client.get(path, params=params, headers=headers)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e)) from e

        log_http_response(
            response.status_code,
            str(response.url),
            link=response.headers.get("link"),
            elapsed_ms=(time.monotonic() - start) * 1000,
        )
        return to_api_response(response)
