"""Star history client: discovers, plans and samples a repository's stargazers."""

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from itertools import chain
from typing import TYPE_CHECKING, Any

from starhistory.clients.repos import ReposClient
from starhistory.clients.stargazers import StargazersClient
from starhistory.clients.stats import StatsClient
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
    from starhistory.transport import HTTPTransport

logger = get_logger("sampler")


class HistoryClient:
    """
    Client that approximates a repository's star growth curve.

    At most ``budget`` page requests are made per run (plus one discovery
    request and, for large repositories, one repository summary request).
    Any failed request aborts the run.
    """

    def __init__(
        self,
        transport: "HTTPTransport",
        budget: int = SAMPLE_BUDGET,
        per_page: int = PER_PAGE,
    ) -> None:
        """
        Initialize the history client.

        Args:
            transport: HTTP transport for making requests
            budget: Maximum number of pages sampled per run
            per_page: Page size of stargazer and contributor-stats requests
        """
        self.transport = transport
        self.budget = budget
        self.per_page = per_page
        self.stargazers = StargazersClient(transport, per_page=per_page)
        self.stats = StatsClient(transport, per_page=per_page)
        self.repos = ReposClient(transport)

    def _page_fetcher(self, strategy: HistoryStrategy) -> Callable[[str, int | None], Page[Any]]:
        if strategy is HistoryStrategy.CONTRIBUTOR_STATS:
            return self.stats.contributors
        return self.stargazers.list_page

    def discover(
        self, repo: str, strategy: HistoryStrategy = HistoryStrategy.STARGAZERS
    ) -> PaginationInfo[Any]:
        """
        Fetch page 1 of the collection and learn its total page count.

        Args:
            repo: Repository identifier ("owner/name")
            strategy: Collection to discover

        Returns:
            PaginationInfo with the total page count and page 1's entries

        Raises:
            EmptyRepositoryError: If the collection is a single empty page
            UpstreamError: If the request fails
        """
        first = self._page_fetcher(strategy)(repo, None)
        total_pages = resolve_page_count(first.link)

        if total_pages == 1 and not first.items:
            raise EmptyRepositoryError(repo)

        return PaginationInfo(total_pages=total_pages, first_page=first.items)

    def get(self, repo: str) -> list[StarPoint]:
        """
        Get the star history of a repository.

        Repositories with fewer pages than the budget are rebuilt exactly
        from every stargazer. Larger ones are sampled: one point per sampled
        page plus today's live star count.

        Args:
            repo: Repository identifier ("owner/name")

        Returns:
            StarPoints in ascending date order

        Raises:
            InvalidRepositoryError: If repo is not "owner/name"
            EmptyRepositoryError: If the repository has no stargazers
            UpstreamError: If any request fails
        """
        request = SampleRequest(repo)
        strategy = HistoryStrategy.STARGAZERS
        info = self.discover(request.repo, strategy)

        if lacks_star_timestamps(info.first_page):
            logger.info(f"{repo}: stargazer timestamps unavailable, using contributor statistics")
            strategy = HistoryStrategy.CONTRIBUTOR_STATS
            info = self.discover(request.repo, strategy)

        pages = plan_pages(info.total_pages, self.budget)
        exact = is_exact(info.total_pages, self.budget)
        log_sampling_plan(
            repo, strategy.value, "exact" if exact else "sampled", info.total_pages, pages
        )

        fetched = [Page(number=1, items=list(info.first_page))]
        fetched.extend(self._fetch_pages(request.repo, strategy, [p for p in pages if p != 1]))
        timestamp_of = TIMESTAMP_OF[strategy]

        if exact:
            points = exact_curve(
                chain.from_iterable(page.items for page in fetched), timestamp_of, self.budget
            )
            if not points:
                raise EmptyRepositoryError(repo)
        else:
            live_count = self.repos.get(request.repo).stargazers_count
            points = sampled_curve(fetched, timestamp_of, live_count, per_page=self.per_page)

        logger.info(f"{repo}: {len(points)} points from {len(fetched)} pages")
        return points

    def _fetch_pages(
        self, repo: str, strategy: HistoryStrategy, numbers: list[int]
    ) -> list[Page[Any]]:
        """Fetch pages concurrently; every request finishes before the first error is raised."""
        if not numbers:
            return []

        fetch = self._page_fetcher(strategy)
        with ThreadPoolExecutor(max_workers=len(numbers)) as executor:
            futures = [executor.submit(fetch, repo, number) for number in numbers]

        return [future.result() for future in futures]
