"""Contributor statistics data models."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class WeekActivity:
    """One weekly bucket of a contributor's activity."""

    week_start: datetime
    additions: int
    deletions: int
    commits: int

    @property
    def active(self) -> bool:
        return bool(self.additions or self.deletions or self.commits)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "WeekActivity":
        return cls(
            week_start=datetime.fromtimestamp(data["w"], tz=timezone.utc),
            additions=data.get("a", 0),
            deletions=data.get("d", 0),
            commits=data.get("c", 0),
        )


@dataclass
class ContributorActivity:
    """A contributor and their weekly activity buckets."""

    login: str | None
    weeks: list[WeekActivity]

    def first_active_week(self) -> datetime | None:
        """Start of the first week with any additions, deletions or commits."""
        for week in self.weeks:
            if week.active:
                return week.week_start
        return None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ContributorActivity":
        author = data.get("author") or {}
        return cls(
            login=author.get("login"),
            weeks=[WeekActivity.from_api(week) for week in data.get("weeks", [])],
        )
