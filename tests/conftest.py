"""Shared fixtures for the star-history test suite."""

from starhistory.testing.fixtures import fake_github, star_history_client  # noqa: F401
