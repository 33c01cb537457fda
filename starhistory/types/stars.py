"""Star history data models."""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any

from starhistory.exceptions import InvalidRepositoryError

_REPO_PATTERN = re.compile(r"^[^/\s]+/[^/\s]+$")


def parse_timestamp(value: str) -> datetime:
    """Parse a GitHub ISO 8601 timestamp ("2015-03-01T12:00:00Z") as aware UTC."""
    return datetime.fromisoformat(value.replace("Z", "+00:00")).astimezone(timezone.utc)


@dataclass(frozen=True)
class StarPoint:
    """Cumulative star count as of a day."""

    date: date
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date.isoformat(), "count": self.count}


@dataclass(frozen=True)
class Stargazer:
    """
    One entry of the stargazers collection.

    starred_at is None when the response was not served with the star+json
    media type, in which case entries are bare user objects.
    """

    starred_at: datetime | None
    login: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Stargazer":
        user = data.get("user") or {}
        starred_at = data.get("starred_at")
        return cls(
            starred_at=parse_timestamp(starred_at) if starred_at else None,
            login=user.get("login") or data.get("login"),
        )


@dataclass(frozen=True)
class SampleRequest:
    """Input to a sampling run."""

    repo: str
    token: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.repo, str) or not _REPO_PATTERN.match(self.repo):
            raise InvalidRepositoryError(str(self.repo))


class HistoryStrategy(str, Enum):
    """Upstream data source used to place pages on the timeline."""

    STARGAZERS = "stargazers"
    CONTRIBUTOR_STATS = "contributor_stats"


def to_records(points: list[StarPoint]) -> list[dict[str, Any]]:
    """Render a growth curve as [{"date": "YYYY-MM-DD", "count": n}, ...]."""
    return [point.to_dict() for point in points]
