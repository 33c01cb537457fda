"""
star-history async client.

Provides the async interface for fetching star histories.
"""

import os
from typing import Any

import httpx

from starhistory.async_clients import (
    AsyncHistoryClient,
    AsyncReposClient,
    AsyncStargazersClient,
    AsyncStatsClient,
)
from starhistory.async_transport import AsyncHTTPTransport
from starhistory.client import _timeout_from_env
from starhistory.planner import PER_PAGE, SAMPLE_BUDGET
from starhistory.types.stars import StarPoint


class AsyncStarHistoryClient:
    """
    Async client for fetching GitHub star histories.

    Example:
        ```python
        import asyncio
        from starhistory import AsyncStarHistoryClient

        async def main():
            async with AsyncStarHistoryClient(token="ghp_...") as client:
                points = await client.get_star_history("encode/httpx")

        asyncio.run(main())
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        budget: int = SAMPLE_BUDGET,
        per_page: int = PER_PAGE,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the async client.

        Args:
            token: GitHub access token; requests are anonymous without one
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            budget: Maximum number of pages sampled per history (default: 15)
            per_page: Page size of stargazer and contributor-stats requests (default: 30)
            transport: Custom httpx transport, e.g. starhistory.testing.FakeGitHub
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            transport=transport,
        )

        self.stargazers = AsyncStargazersClient(self._transport, per_page=per_page)
        self.repos = AsyncReposClient(self._transport)
        self.stats = AsyncStatsClient(self._transport, per_page=per_page)
        self.history = AsyncHistoryClient(self._transport, budget=budget, per_page=per_page)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AsyncStarHistoryClient":
        """
        Create an async client from environment variables.

        Reads GITHUB_TOKEN, STAR_HISTORY_API_URL and STAR_HISTORY_TIMEOUT,
        like StarHistoryClient.from_env.
        """
        return cls(
            token=os.environ.get("GITHUB_TOKEN") or None,
            base_url=os.environ.get("STAR_HISTORY_API_URL") or cls.DEFAULT_BASE_URL,
            timeout=_timeout_from_env(cls.DEFAULT_TIMEOUT),
            **kwargs,
        )

    async def get_star_history(self, repo: str) -> list[StarPoint]:
        """Get the star history of a repository ("owner/name")."""
        return await self.history.get(repo)

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncStarHistoryClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
