"""Repositories resource client."""

from typing import TYPE_CHECKING

from starhistory.types.repos import Repository

if TYPE_CHECKING:
    from starhistory.transport import HTTPTransport


class ReposClient:
    """Client for repository summaries."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(self, repo: str) -> Repository:
        """
        Get a repository summary, including its live stargazers_count.

        Args:
            repo: Repository identifier ("owner/name")

        Returns:
            Repository

        Raises:
            NotFoundError: If the repository does not exist
        """
        response = self.transport.get(f"/repos/{repo}")
        return Repository.from_api(response.data or {})
