"""star-history - approximate GitHub star growth curves with a bounded request budget."""

from starhistory.async_client import AsyncStarHistoryClient
from starhistory.client import StarHistoryClient, get_star_history
from starhistory.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    EmptyRepositoryError,
    InvalidRepositoryError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    StarHistoryError,
    StatsPendingError,
    UpstreamError,
    ValidationError,
)
from starhistory.logging import configure_logging, get_logger
from starhistory.pagination import parse_last_page, resolve_page_count
from starhistory.planner import PER_PAGE, SAMPLE_BUDGET, plan_pages
from starhistory.transport import HTTPTransport
from starhistory.types import HistoryStrategy, SampleRequest, StarPoint, to_records

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "StarHistoryClient",
    "AsyncStarHistoryClient",
    "get_star_history",
    # Data model
    "StarPoint",
    "SampleRequest",
    "HistoryStrategy",
    "to_records",
    # Sampling
    "SAMPLE_BUDGET",
    "PER_PAGE",
    "plan_pages",
    "parse_last_page",
    "resolve_page_count",
    # Exceptions
    "StarHistoryError",
    "ConfigurationError",
    "InvalidRepositoryError",
    "EmptyRepositoryError",
    "UpstreamError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "StatsPendingError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
