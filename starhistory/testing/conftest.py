"""
Pytest plugin for star-history testing fixtures.

To use these fixtures in your tests, add this to your top-level conftest.py:

    pytest_plugins = ["starhistory.testing.conftest"]

Or import the fixtures directly:

    from starhistory.testing.fixtures import fake_github, star_history_client
"""

from starhistory.testing.fixtures import fake_github, star_history_client

__all__ = [
    "fake_github",
    "star_history_client",
]
