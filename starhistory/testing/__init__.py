"""star-history testing utilities.

Provides a fake GitHub API and fixtures for testing code that uses star-history.
"""

from starhistory.testing.fake_github import FakeFailure, FakeGitHub, FakeRepo
from starhistory.testing.fixtures import (
    create_contributor,
    create_stargazer_timestamps,
)

__all__ = [
    # Fake API
    "FakeGitHub",
    "FakeRepo",
    "FakeFailure",
    # Helper functions
    "create_stargazer_timestamps",
    "create_contributor",
]
