"""
Link header pagination parsing.

GitHub paginates collections with a Link header such as::

    <https://api.github.com/repositories/1/stargazers?per_page=30&page=2>; rel="next",
    <https://api.github.com/repositories/1/stargazers?per_page=30&page=50>; rel="last"

Only page 1 is ever inspected, so a well-formed header always lists ``next``
before ``last``.
"""

import re
from urllib.parse import parse_qs, urlsplit

from starhistory.logging import get_logger

logger = get_logger("sampler")

_NEXT_THEN_LAST = re.compile(r'rel="next".*?<([^>]*)>\s*;\s*rel="last"', re.DOTALL)


def parse_last_page(link_header: str | None) -> int | None:
    """
    Extract the page number of the ``last`` relation.

    Args:
        link_header: Raw Link header value

    Returns:
        The last page number, or None if the header is absent or does not
        have the expected next/last shape
    """
    if not link_header:
        return None

    match = _NEXT_THEN_LAST.search(link_header)
    if match is None:
        return None

    pages = parse_qs(urlsplit(match.group(1)).query).get("page")
    if not pages or not pages[-1].isdigit():
        return None

    page = int(pages[-1])
    return page if page >= 1 else None


def resolve_page_count(link_header: str | None) -> int:
    """
    Total number of pages in a collection, given page 1's Link header.

    An absent header means a single page. A header that is present but
    malformed is also treated as a single page rather than an error.
    """
    if link_header is None:
        return 1

    last_page = parse_last_page(link_header)
    if last_page is None:
        logger.warning(f"Malformed Link header, assuming a single page: {link_header!r}")
        return 1

    return last_page
