"""
Sample planning: which pages of a collection to fetch.

Stargazer lists are chronological, so the page number of an entry is a
proxy for its rank. Sampling pages spread over the whole range lets a fixed
number of requests trace the growth curve of any repository.
"""

SAMPLE_BUDGET = 15
PER_PAGE = 30


def plan_pages(total_pages: int, budget: int = SAMPLE_BUDGET) -> tuple[int, ...]:
    """
    Choose the 1-based page numbers to fetch.

    Below the budget every page is fetched. Otherwise page
    ``round(i * total_pages / budget) - 1`` is chosen for ``i = 1..budget``
    (rounding half up), values below 1 are clamped to page 1, and page 1
    takes the place of the smallest index when the arithmetic misses it.
    The result is sorted, contains page 1 and never exceeds ``budget``.

    Args:
        total_pages: Number of pages in the collection (>= 1)
        budget: Maximum number of pages to fetch

    Returns:
        Sorted tuple of page numbers

    Raises:
        ValueError: If total_pages or budget is below 1
    """
    if total_pages < 1:
        raise ValueError(f"total_pages must be >= 1, got {total_pages}")
    if budget < 1:
        raise ValueError(f"budget must be >= 1, got {budget}")

    if total_pages < budget:
        return tuple(range(1, total_pages + 1))

    # round half up without floats: floor((2 * i * n + budget) / (2 * budget))
    pages = sorted(
        {
            max(1, (2 * i * total_pages + budget) // (2 * budget) - 1)
            for i in range(1, budget + 1)
        }
    )
    if pages[0] != 1:
        pages[0] = 1

    return tuple(pages)


def is_exact(total_pages: int, budget: int = SAMPLE_BUDGET) -> bool:
    """True when every page is fetched and the curve can be rebuilt exactly."""
    return total_pages < budget
