"""Async stargazers resource client."""

from typing import TYPE_CHECKING

from starhistory.clients.stargazers import STAR_MEDIA_TYPE
from starhistory.planner import PER_PAGE
from starhistory.types.pagination import Page
from starhistory.types.stars import Stargazer

if TYPE_CHECKING:
    from starhistory.async_transport import AsyncHTTPTransport


class AsyncStargazersClient:
    """Async client for a repository's stargazers collection."""

    def __init__(self, transport: "AsyncHTTPTransport", per_page: int = PER_PAGE) -> None:
        """
        Initialize the async stargazers client.

        Args:
            transport: Async HTTP transport for making requests
            per_page: Page size requested from the API
        """
        self.transport = transport
        self.per_page = per_page

    async def list_page(self, repo: str, page: int | None = None) -> Page[Stargazer]:
        """
        Fetch one page of stargazers, oldest first.

        Args:
            repo: Repository identifier ("owner/name")
            page: 1-based page number; the API default (page 1) when omitted

        Returns:
            Page of Stargazer entries with the response's Link header
        """
        params: dict[str, int] = {"per_page": self.per_page}
        if page is not None:
            params["page"] = page

        response = await self.transport.get(
            f"/repos/{repo}/stargazers",
            params=params,
            headers={"Accept": STAR_MEDIA_TYPE},
        )

        return Page(
            number=page or 1,
            items=[Stargazer.from_api(entry) for entry in response.data or []],
            link=response.link,
        )
