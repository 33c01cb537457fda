"""Repository-related data models."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Repository:
    """Repository summary, as returned by GET /repos/{owner}/{name}."""

    full_name: str
    stargazers_count: int

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Repository":
        return cls(
            full_name=data.get("full_name", ""),
            stargazers_count=int(data.get("stargazers_count", 0)),
        )
