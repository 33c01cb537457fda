"""Contributor statistics resource client."""

from typing import TYPE_CHECKING

from starhistory.exceptions import StatsPendingError
from starhistory.planner import PER_PAGE
from starhistory.types.pagination import Page
from starhistory.types.stats import ContributorActivity

if TYPE_CHECKING:
    from starhistory.transport import ApiResponse, HTTPTransport


def parse_contributors_page(
    repo: str, page: int | None, response: "ApiResponse"
) -> Page[ContributorActivity]:
    """Build a page of contributors, rejecting the 202 "still computing" answer."""
    if response.status_code == 202:
        raise StatsPendingError(
            "STATS_PENDING",
            f"Contributor statistics for {repo} are still being computed",
            status=202,
            body=response.data,
        )

    entries = response.data if isinstance(response.data, list) else []
    return Page(
        number=page or 1,
        items=[ContributorActivity.from_api(entry) for entry in entries],
        link=response.link,
    )


class StatsClient:
    """Client for repository contributor statistics."""

    def __init__(self, transport: "HTTPTransport", per_page: int = PER_PAGE) -> None:
        """
        Initialize the stats client.

        Args:
            transport: HTTP transport for making requests
            per_page: Page size requested from the API
        """
        self.transport = transport
        self.per_page = per_page

    def contributors(
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
            UpstreamError: On any other API error
        """
        params: dict[str, int] = {"per_page": self.per_page}
        if page is not None:
            params["page"] = page

        response = self.transport.get(f"/repos/{repo}/stats/contributors", params=params)
        return parse_contributors_page(repo, page, response)
