"""Async repositories resource client."""

from typing import TYPE_CHECKING

from starhistory.types.repos import Repository

if TYPE_CHECKING:
    from starhistory.async_transport import AsyncHTTPTransport


class AsyncReposClient:
    """Async client for repository summaries."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def get(self, repo: str) -> Repository:
        """
        Get a repository summary, including its live stargazers_count.

        Args:
            repo: Repository identifier ("owner/name")

        Returns:
            Repository
        """
        response = await self.transport.get(f"/repos/{repo}")
        return Repository.from_api(response.data or {})
