"""Async contributor statistics resource client."""

from typing import TYPE_CHECKING

from starhistory.clients.stats import parse_contributors_page
from starhistory.planner import PER_PAGE
from starhistory.types.pagination import Page
from starhistory.types.stats import ContributorActivity

if TYPE_CHECKING:
    from starhistory.async_transport import AsyncHTTPTransport


class AsyncStatsClient:
    """Async client for repository contributor statistics."""

    def __init__(self, transport: "AsyncHTTPTransport", per_page: int = PER_PAGE) -> None:
        self.transport = transport
        self.per_page = per_page

    async def contributors(
        self, repo: str, page: int | None = None
    ) -> Page[ContributorActivity]:
        """
        Fetch one page of contributor activity.

        Args:
            repo: Repository identifier ("owner/name")
            page: 1-based page number; the API default (page 1) when omitted

        Returns:
            Page of ContributorActivity with the response's Link header

        Raises:
            StatsPendingError: If GitHub answers 202 while it computes the statistics
        """
        params: dict[str, int] = {"per_page": self.per_page}
        if page is not None:
            params["page"] = page

        response = await self.transport.get(f"/repos/{repo}/stats/contributors", params=params)
        return parse_contributors_page(repo, page, response)
