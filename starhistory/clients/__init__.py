"""star-history resource clients."""

from starhistory.clients.history import HistoryClient
from starhistory.clients.repos import ReposClient
from starhistory.clients.stargazers import StargazersClient
from starhistory.clients.stats import StatsClient

__all__ = [
    "HistoryClient",
    "ReposClient",
    "StargazersClient",
    "StatsClient",
]
