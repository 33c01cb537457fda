"""
Pytest fixtures for star-history testing.

Provides a FakeGitHub server, clients wired to it, and helpers that build
upstream data.
"""

from collections.abc import Generator
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from starhistory.client import StarHistoryClient
from starhistory.testing.fake_github import FakeGitHub

DEFAULT_START = datetime(2020, 1, 1, 12, 0, tzinfo=timezone.utc)


# ============================================================================
# Data helpers
# ============================================================================


def create_stargazer_timestamps(
    count: int,
    start: datetime = DEFAULT_START,
    interval: timedelta = timedelta(days=1),
) -> list[datetime]:
    """Create ``count`` evenly spaced starred_at timestamps, oldest first."""
    return [start + interval * i for i in range(count)]


def create_contributor(
    login: str,
    first_active: datetime | None,
    weeks: int = 4,
    start: datetime = DEFAULT_START,
) -> dict[str, Any]:
    """
    Create a raw /stats/contributors entry.

    Weeks run from ``start``; the contributor is inactive until the week
    containing ``first_active`` (never, when it is None).
    """
    buckets = []
    for i in range(weeks):
        week_start = start + timedelta(weeks=i)
        active = first_active is not None and week_start + timedelta(weeks=1) > first_active
        buckets.append({
            "w": int(week_start.timestamp()),
            "a": 10 if active else 0,
            "d": 2 if active else 0,
            "c": 1 if active else 0,
        })
    return {"author": {"login": login}, "total": sum(b["c"] for b in buckets), "weeks": buckets}


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def fake_github() -> Generator[FakeGitHub, None, None]:
    """
    Provide an empty FakeGitHub.

    Example:
        ```python
        def test_history(fake_github, star_history_client):
            fake_github.add_repo("octo/cat", starred_at=create_stargazer_timestamps(10))
            points = star_history_client.get_star_history("octo/cat")
            assert points[-1].count == 10
        ```
    """
    fake = FakeGitHub()
    yield fake
    fake.reset()


@pytest.fixture
def star_history_client(
    fake_github: FakeGitHub,
) -> Generator[StarHistoryClient, None, None]:
    """Provide a StarHistoryClient that talks to the fake_github fixture."""
    client = StarHistoryClient(token="test-token", transport=fake_github.transport)
    yield client
    client.close()
