"""star-history type definitions.

This module exports all data model types used by the package.
"""

from starhistory.types.pagination import Page, PaginationInfo
from starhistory.types.repos import Repository
from starhistory.types.stars import (
    HistoryStrategy,
    SampleRequest,
    Stargazer,
    StarPoint,
    parse_timestamp,
    to_records,
)
from starhistory.types.stats import ContributorActivity, WeekActivity

__all__ = [
    # Curve types
    "StarPoint",
    "SampleRequest",
    "HistoryStrategy",
    "to_records",
    # Upstream records
    "Stargazer",
    "Repository",
    "ContributorActivity",
    "WeekActivity",
    "parse_timestamp",
    # Pagination
    "Page",
    "PaginationInfo",
]
