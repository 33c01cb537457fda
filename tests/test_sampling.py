"""
Property-based tests for growth curve assembly.

Feature: star-history
"""

from datetime import date, datetime, timedelta, timezone

from hypothesis import given, settings
from hypothesis import strategies as st

from starhistory.planner import PER_PAGE, SAMPLE_BUDGET
from starhistory.sampling import (
    contributor_timestamp,
    exact_curve,
    lacks_star_timestamps,
    normalize,
    rank_points,
    sampled_curve,
    stargazer_timestamp,
)
from starhistory.testing.fixtures import create_contributor
from starhistory.types.pagination import Page
from starhistory.types.stars import Stargazer, StarPoint
from starhistory.types.stats import ContributorActivity

START = datetime(2019, 6, 1, 8, 30, tzinfo=timezone.utc)


def daily(count: int) -> list[datetime]:
    return [START + timedelta(days=i) for i in range(count)]


def stargazers(timestamps: list[datetime]) -> list[Stargazer]:
    return [Stargazer(starred_at=t, login=f"user{i}") for i, t in enumerate(timestamps)]


@given(n=st.integers(min_value=1, max_value=2_000))
@settings(max_examples=200)
def test_property_exact_curve_shape(n: int) -> None:
    """
    With one star per day, the exact curve has min(budget, n) points,
    strictly ascending dates and counts, and ends at n.
    """
    points = exact_curve(stargazers(daily(n)), stargazer_timestamp)

    assert len(points) == min(SAMPLE_BUDGET, n)
    assert points[0] == StarPoint(date=START.date(), count=1)
    assert points[-1].count == n
    assert all(a.date < b.date for a, b in zip(points, points[1:]))
    assert all(a.count < b.count for a, b in zip(points, points[1:]))


@given(
    offsets=st.lists(st.integers(min_value=0, max_value=3_000 * 24), min_size=1, max_size=500),
)
@settings(max_examples=200)
def test_property_exact_curve_is_order_independent(offsets: list[int]) -> None:
    """Shuffled input yields the same curve: entries are sorted by starred_at first."""
    timestamps = [START + timedelta(hours=h) for h in offsets]

    forward = exact_curve(stargazers(timestamps), stargazer_timestamp)
    backward = exact_curve(stargazers(list(reversed(timestamps))), stargazer_timestamp)

    assert forward == backward
    assert forward[-1].count == len(timestamps)
    assert all(a.date < b.date for a, b in zip(forward, forward[1:]))
    assert all(a.count <= b.count for a, b in zip(forward, forward[1:]))


def test_rank_points_includes_first_and_last() -> None:
    points = rank_points(daily(100), budget=15)

    ranks = [p.count for p in points]
    assert len(ranks) == 15
    assert ranks[0] == 1
    assert ranks[-1] == 100
    assert ranks == sorted(set(ranks))


def test_rank_points_small_list_emits_every_entry() -> None:
    points = rank_points(daily(4), budget=15)

    assert [p.count for p in points] == [1, 2, 3, 4]


def test_rank_points_budget_of_one_keeps_the_total() -> None:
    assert rank_points(daily(7), budget=1) == [StarPoint(date=daily(7)[-1].date(), count=7)]


def test_rank_points_empty() -> None:
    assert rank_points([], budget=15) == []


def test_same_day_stars_merge_to_highest_rank() -> None:
    same_day = [START + timedelta(minutes=i) for i in range(3)]

    points = exact_curve(stargazers(same_day), stargazer_timestamp)

    assert points == [StarPoint(date=START.date(), count=3)]


def test_normalize_sorts_and_merges() -> None:
    points = normalize([
        StarPoint(date=date(2021, 3, 1), count=60),
        StarPoint(date=date(2020, 1, 1), count=0),
        StarPoint(date=date(2021, 3, 1), count=90),
    ])

    assert points == [
        StarPoint(date=date(2020, 1, 1), count=0),
        StarPoint(date=date(2021, 3, 1), count=90),
    ]


def test_sampled_curve_counts_stars_before_each_page() -> None:
    pages = [
        Page(number=1, items=stargazers([START])),
        Page(number=19, items=stargazers([START + timedelta(days=100)])),
        Page(number=29, items=stargazers([START + timedelta(days=200)])),
    ]

    points = sampled_curve(pages, stargazer_timestamp, live_count=1234, as_of=date(2024, 1, 1))

    assert points == [
        StarPoint(date=START.date(), count=0),
        StarPoint(date=(START + timedelta(days=100)).date(), count=PER_PAGE * 18),
        StarPoint(date=(START + timedelta(days=200)).date(), count=PER_PAGE * 28),
        StarPoint(date=date(2024, 1, 1), count=1234),
    ]


def test_sampled_curve_skips_empty_pages() -> None:
    pages = [
        Page(number=1, items=stargazers([START])),
        Page(number=40, items=[]),
    ]

    points = sampled_curve(pages, stargazer_timestamp, live_count=31, as_of=date(2024, 1, 1))

    assert [p.count for p in points] == [0, 31]


def test_sampled_curve_defaults_to_today() -> None:
    points = sampled_curve([], stargazer_timestamp, live_count=5)

    assert points == [StarPoint(date=datetime.now(timezone.utc).date(), count=5)]


def test_contributor_timestamp_uses_first_active_week() -> None:
    active = ContributorActivity.from_api(
        create_contributor("octocat", first_active=START + timedelta(weeks=2), start=START)
    )
    idle = ContributorActivity.from_api(create_contributor("ghost", first_active=None, start=START))

    assert contributor_timestamp(active) == START + timedelta(weeks=2)
    assert contributor_timestamp(idle) is None


def test_exact_curve_drops_entries_without_timestamp() -> None:
    contributors = [
        ContributorActivity.from_api(create_contributor("a", first_active=START, start=START)),
        ContributorActivity.from_api(create_contributor("b", first_active=None, start=START)),
    ]

    points = exact_curve(contributors, contributor_timestamp)

    assert points == [StarPoint(date=START.date(), count=1)]


def test_lacks_star_timestamps() -> None:
    assert lacks_star_timestamps([Stargazer(starred_at=None, login="a")])
    assert not lacks_star_timestamps(stargazers([START]))
    assert not lacks_star_timestamps([])


def test_star_point_to_dict() -> None:
    assert StarPoint(date=date(2015, 3, 1), count=12).to_dict() == {"date": "2015-03-01", "count": 12}
