"""Cursor-based pagination over Notion list endpoints."""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

# Fetches one page of results given the cursor of the page to start from
PageFetcher = Callable[[str | None], dict[str, Any]]


def paginate(fetch_page: PageFetcher) -> list[dict[str, Any]]:
    """Collect the results of every page of a paginated Notion call.

    Pages are requested one after another, each with the cursor returned by
    the previous one, until a response carries no ``next_cursor``. Results
    keep the order the API returned them in.

    Any exception raised by ``fetch_page`` propagates immediately and no
    partial results are returned.

    :param fetch_page: Callable taking the start cursor (None for the first page)
        and returning a response with ``results`` and ``next_cursor``.
    :returns: Concatenated results of all pages.
    """
    all_results: list[dict[str, Any]] = []
    start_cursor: str | None = None
    page_count = 0

    while True:
        response = fetch_page(start_cursor)
        page_count += 1
        all_results.extend(response.get("results") or [])

        start_cursor = response.get("next_cursor")
        if not start_cursor:
            break

    logger.debug(f"Paginated {page_count} pages, {len(all_results)} results")
    return all_results
