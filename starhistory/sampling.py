"""
Growth curve assembly.

Turns fetched pages into StarPoints. Nothing here performs I/O; the sync and
async history clients fetch pages and hand them over.
"""

from collections.abc import Callable, Iterable, Sequence
from datetime import date, datetime, timezone
from typing import Any

from starhistory.planner import PER_PAGE, SAMPLE_BUDGET
from starhistory.types.pagination import Page
from starhistory.types.stars import HistoryStrategy, Stargazer, StarPoint
from starhistory.types.stats import ContributorActivity

TimestampOf = Callable[[Any], datetime | None]


def stargazer_timestamp(entry: Stargazer) -> datetime | None:
    return entry.starred_at


def contributor_timestamp(entry: ContributorActivity) -> datetime | None:
    return entry.first_active_week()


TIMESTAMP_OF: dict[HistoryStrategy, TimestampOf] = {
    HistoryStrategy.STARGAZERS: stargazer_timestamp,
    HistoryStrategy.CONTRIBUTOR_STATS: contributor_timestamp,
}


def today() -> date:
    return datetime.now(timezone.utc).date()


def normalize(points: Iterable[StarPoint]) -> list[StarPoint]:
    """Sort by date and merge points that fall on the same day, keeping the highest count."""
    by_date: dict[date, int] = {}
    for point in points:
        by_date[point.date] = max(point.count, by_date.get(point.date, point.count))
    return [StarPoint(date=day, count=count) for day, count in sorted(by_date.items())]


def rank_points(timestamps: Sequence[datetime], budget: int = SAMPLE_BUDGET) -> list[StarPoint]:
    """
    Pick evenly rank-spaced points from chronologically sorted timestamps.

    With ``n <= budget`` timestamps every one becomes a point. Otherwise the
    ranks ``1 + k * (n - 1) // (budget - 1)`` for ``k = 0..budget-1`` are used,
    so the first and the last star are always included and exactly ``budget``
    points come out. A point's count is the 1-based rank of its timestamp.
    """
    n = len(timestamps)
    if n <= budget:
        ranks = range(1, n + 1)
    elif budget == 1:
        ranks = range(n, n + 1)
    else:
        ranks = [1 + k * (n - 1) // (budget - 1) for k in range(budget)]

    return [StarPoint(date=timestamps[rank - 1].date(), count=rank) for rank in ranks]


def exact_curve(
    entries: Iterable[Any],
    timestamp_of: TimestampOf,
    budget: int = SAMPLE_BUDGET,
) -> list[StarPoint]:
    """
    Rebuild the curve from every entry of the collection.

    Entries without a timestamp (e.g. contributors with no recorded
    activity) are left out.
    """
    timestamps = sorted(t for t in map(timestamp_of, entries) if t is not None)
    return normalize(rank_points(timestamps, budget))


def sampled_curve(
    pages: Iterable[Page[Any]],
    timestamp_of: TimestampOf,
    live_count: int,
    as_of: date | None = None,
    per_page: int = PER_PAGE,
) -> list[StarPoint]:
    """
    Approximate the curve from a sample of pages.

    Each non-empty page contributes one point: the date of its first
    timestamped entry, with ``per_page * (page - 1)`` stars before it. The
    live star count is appended as of ``as_of`` (today, UTC, by default).
    """
    points = []
    for page in pages:
        first = next((t for t in map(timestamp_of, page.items) if t is not None), None)
        if first is None:
            continue
        points.append(StarPoint(date=first.date(), count=per_page * (page.number - 1)))

    points.append(StarPoint(date=as_of or today(), count=live_count))
    return normalize(points)


def lacks_star_timestamps(first_page: Sequence[Stargazer]) -> bool:
    """True when stargazers came back without starred_at, i.e. the star+json preview was not honoured."""
    return bool(first_page) and all(entry.starred_at is None for entry in first_page)
