"""Pagination data models."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a paginated collection."""

    number: int
    items: list[T]
    link: str | None = None


@dataclass(frozen=True)
class PaginationInfo(Generic[T]):
    """Result of pagination discovery: total page count and page 1."""

    total_pages: int
    first_page: list[T] = field(default_factory=list)
