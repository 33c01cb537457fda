"""
star-history main client.

Provides the primary interface for fetching star histories.
"""

import os
from typing import Any

import httpx

from starhistory.clients import HistoryClient, ReposClient, StargazersClient, StatsClient
from starhistory.exceptions import ConfigurationError
from starhistory.planner import PER_PAGE, SAMPLE_BUDGET
from starhistory.transport import HTTPTransport
from starhistory.types.stars import SampleRequest, StarPoint


def _timeout_from_env(default: float) -> float:
    raw = os.environ.get("STAR_HISTORY_TIMEOUT")
    if raw is None or raw == "":
        return default
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid STAR_HISTORY_TIMEOUT: {raw!r}. Must be a number of seconds") from None
    if timeout <= 0:
        raise ConfigurationError(f"Invalid STAR_HISTORY_TIMEOUT: {raw!r}. Must be positive")
    return timeout


class StarHistoryClient:
    """
    Main client for fetching GitHub star histories.

    Aggregates the resource clients over one HTTP transport.

    Example:
        ```python
        from starhistory import StarHistoryClient

        with StarHistoryClient(token="ghp_...") as client:
            for point in client.get_star_history("encode/httpx"):
                print(point.date, point.count)

        # Or create from environment variables
        client = StarHistoryClient.from_env()
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
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

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

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            transport=transport,
        )

        self.stargazers = StargazersClient(self._transport, per_page=per_page)
        self.repos = ReposClient(self._transport)
        self.stats = StatsClient(self._transport, per_page=per_page)
        self.history = HistoryClient(self._transport, budget=budget, per_page=per_page)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "StarHistoryClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_TOKEN: GitHub access token (optional)
            STAR_HISTORY_API_URL: Base URL for API (optional, default: https://api.github.com)
            STAR_HISTORY_TIMEOUT: Request timeout in seconds (optional, default: 30)

        Raises:
            ConfigurationError: If STAR_HISTORY_TIMEOUT is not a positive number
        """
        return cls(
            token=os.environ.get("GITHUB_TOKEN") or None,
            base_url=os.environ.get("STAR_HISTORY_API_URL") or cls.DEFAULT_BASE_URL,
            timeout=_timeout_from_env(cls.DEFAULT_TIMEOUT),
            **kwargs,
        )

    def get_star_history(self, repo: str) -> list[StarPoint]:
        """
        Get the star history of a repository ("owner/name").

        Returns:
            StarPoints in ascending date order
        """
        return self.history.get(repo)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "StarHistoryClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def get_star_history(repo: str, token: str | None = None, **kwargs: Any) -> list[StarPoint]:
    """
    Fetch a repository's star history with a short-lived client.

    Args:
        repo: Repository identifier ("owner/name")
        token: GitHub access token (optional)
        **kwargs: Passed on to StarHistoryClient

    Returns:
        StarPoints in ascending date order

    Raises:
        InvalidRepositoryError: If repo is not "owner/name"; no client is created
    """
    request = SampleRequest(repo, token)
    with StarHistoryClient(token=request.token, **kwargs) as client:
        return client.get_star_history(request.repo)
