"""Async star history client."""

import asyncio
from collections.abc import Awaitable, Callable
from itertools import chain
from typing import TYPE_CHECKING, Any

from starhistory.async_clients.repos import AsyncReposClient
from starhistory.async_clients.stargazers import AsyncStargazersClient
from starhistory.async_clients.stats import AsyncStatsClient
from starhistory.exceptions import EmptyRepositoryError
from starhistory.logging import get_logger, log_sampling_plan
from starhistory.pagination import resolve_page_count
from starhistory.planner import PER_PAGE, SAMPLE_BUDGET, is_exact, plan_pages
from starhistory.sampling import (
    TIMESTAMP_OF,
    exact_curve,
    lacks_star_timestamps,
    sampled_curve,
)
from starhistory.types.pagination import Page, PaginationInfo
from starhistory.types.stars import HistoryStrategy, SampleRequest, StarPoint

if TYPE_CHECKING:
    from starhistory.async_transport import AsyncHTTPTransport

logger = get_logger("sampler")


class AsyncHistoryClient:
    """Async client that approximates a repository's star growth curve."""

    def __init__(
        self,
        transport: "AsyncHTTPTransport",
        budget: int = SAMPLE_BUDGET,
        per_page: int = PER_PAGE,
    ) -> None:
        """
        Initialize the async history client.

        Args:
            transport: Async HTTP transport for making requests
            budget: Maximum number of pages sampled per run
            per_page: Page size of stargazer and contributor-stats requests
        """
        self.transport = transport
        self.budget = budget
        self.per_page = per_page
        self.stargazers = AsyncStargazersClient(transport, per_page=per_page)
        self.stats = AsyncStatsClient(transport, per_page=per_page)
        self.repos = AsyncReposClient(transport)

    def _page_fetcher(
        self, strategy: HistoryStrategy
    ) -> Callable[[str, int | None], Awaitable[Page[Any]]]:
        if strategy is HistoryStrategy.CONTRIBUTOR_STATS:
            return self.stats.contributors
        return self.stargazers.list_page

    async def discover(
        self, repo: str, strategy: HistoryStrategy = HistoryStrategy.STARGAZERS
    ) -> PaginationInfo[Any]:
        """
        Fetch page 1 of the collection and learn its total page count.

        Raises:
            EmptyRepositoryError: If the collection is a single empty page
            UpstreamError: If the request fails
        """
        first = await self._page_fetcher(strategy)(repo, None)
        total_pages = resolve_page_count(first.link)

        if total_pages == 1 and not first.items:
            raise EmptyRepositoryError(repo)

        return PaginationInfo(total_pages=total_pages, first_page=first.items)

    async def get(self, repo: str) -> list[StarPoint]:
        """
        Get the star history of a repository.

        See HistoryClient.get; the sampled pages are fetched with asyncio.gather.
        """
        request = SampleRequest(repo)
        strategy = HistoryStrategy.STARGAZERS
        info = await self.discover(request.repo, strategy)

        if lacks_star_timestamps(info.first_page):
            logger.info(f"{repo}: stargazer timestamps unavailable, using contributor statistics")
            strategy = HistoryStrategy.CONTRIBUTOR_STATS
            info = await self.discover(request.repo, strategy)

        pages = plan_pages(info.total_pages, self.budget)
        exact = is_exact(info.total_pages, self.budget)
        log_sampling_plan(
            repo, strategy.value, "exact" if exact else "sampled", info.total_pages, pages
        )

        fetched = [Page(number=1, items=list(info.first_page))]
        fetched.extend(
            await self._fetch_pages(request.repo, strategy, [p for p in pages if p != 1])
        )
        timestamp_of = TIMESTAMP_OF[strategy]

        if exact:
            points = exact_curve(
                chain.from_iterable(page.items for page in fetched), timestamp_of, self.budget
            )
            if not points:
                raise EmptyRepositoryError(repo)
        else:
            repository = await self.repos.get(request.repo)
            points = sampled_curve(
                fetched, timestamp_of, repository.stargazers_count, per_page=self.per_page
            )

        logger.info(f"{repo}: {len(points)} points from {len(fetched)} pages")
        return points

    async def _fetch_pages(
        self, repo: str, strategy: HistoryStrategy, numbers: list[int]
    ) -> list[Page[Any]]:
        """Fetch pages concurrently; every request finishes before the first error is raised."""
        fetch = self._page_fetcher(strategy)
        results = await asyncio.gather(
            *(fetch(repo, number) for number in numbers), return_exceptions=True
        )

        for result in results:
            if isinstance(result, BaseException):
                raise result

        return list(results)
