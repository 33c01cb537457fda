"""Stargazers resource client."""

from typing import TYPE_CHECKING

from starhistory.planner import PER_PAGE
from starhistory.types.pagination import Page
from starhistory.types.stars import Stargazer

if TYPE_CHECKING:
    from starhistory.transport import HTTPTransport

# Media type that adds starred_at to each stargazer entry
STAR_MEDIA_TYPE = "application/vnd.github.v3.star+json"


class StargazersClient:
    """Client for a repository's stargazers collection."""

    def __init__(self, transport: "HTTPTransport", per_page: int = PER_PAGE) -> None:
        """
        Initialize the stargazers client.

        Args:
            transport: HTTP transport for making requests
            per_page: Page size requested from the API
        """
        self.transport = transport
        self.per_page = per_page

    def list_page(self, repo: str, page: int | None = None) -> Page[Stargazer]:
        """
        Fetch one page of stargazers, oldest first.

        Args:
            repo: Repository identifier ("owner/name")
            page: 1-based page number; the API default (page 1) when omitted

        Returns:
            Page of Stargazer entries with the response's Link header

        Raises:
            NotFoundError: If the repository does not exist
            UpstreamError: On any other API error
        """
        params: dict[str, int] = {"per_page": self.per_page}
        if page is not None:
            params["page"] = page

        response = self.transport.get(
            f"/repos/{repo}/stargazers",
            params=params,
            headers={"Accept": STAR_MEDIA_TYPE},
        )

        return Page(
            number=page or 1,
            items=[Stargazer.from_api(entry) for entry in response.data or []],
            link=response.link,
        )
