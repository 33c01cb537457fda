"""star-history async resource clients."""

from starhistory.async_clients.history import AsyncHistoryClient
from starhistory.async_clients.repos import AsyncReposClient
from starhistory.async_clients.stargazers import AsyncStargazersClient
from starhistory.async_clients.stats import AsyncStatsClient

__all__ = [
    "AsyncHistoryClient",
    "AsyncReposClient",
    "AsyncStargazersClient",
    "AsyncStatsClient",
]
