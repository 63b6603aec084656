"""Batch resolution of related page IDs into their titles."""

import concurrent.futures
import logging
from collections.abc import Iterable
from functools import partial
from typing import Any

from src.notion.base import NotionAPI
from src.notion.parser import extract_page_title
from src.schema.models import DatabaseSchema

logger = logging.getLogger(__name__)


def _fetch_title(client: NotionAPI, page_id: str) -> str | None:
    """Fetch a related page's title, or None if the lookup fails."""
    try:
        return extract_page_title(client.get_page(page_id))
    except Exception as e:
        # Any failure, whatever the injected client raises, only affects this ID
        logger.warning(f"Failed to fetch related page {page_id}: {e}")
        return None


def resolve_relation_titles(
    client: NotionAPI,
    page_ids: Iterable[str],
    *,
    max_workers: int = 1,
) -> dict[str, str | None]:
    """Resolve related page IDs to their titles.

    Each distinct ID is fetched once. A failed lookup records None for that
    ID and never aborts the rest of the batch.

    :param client: Notion API client.
    :param page_ids: Related page IDs, duplicates allowed.
    :param max_workers: Number of concurrent lookups. 1 fetches sequentially.
    :returns: Mapping of page ID to title (None if untitled or failed).
    """
    unique_ids = list(dict.fromkeys(page_ids))
    if not unique_ids:
        return {}

    logger.info(f"Resolving titles for {len(unique_ids)} related pages")

    if max_workers <= 1 or len(unique_ids) == 1:
        return {page_id: _fetch_title(client, page_id) for page_id in unique_ids}

    with concurrent.futures.ThreadPoolExecutor(
        max_workers=min(max_workers, len(unique_ids))
    ) as executor:
        titles = executor.map(partial(_fetch_title, client), unique_ids)
        return dict(zip(unique_ids, titles, strict=True))


def apply_relation_titles(
    rows: list[dict[str, Any]],
    schema: DatabaseSchema,
    titles: dict[str, str | None],
) -> None:
    """Replace related page IDs with ``{"id", "title"}`` pairs in place.

    Only relation fields with ``fetch_related`` set are rewritten. Fields that
    decoded to None are left as None.

    :param rows: Transformed rows.
    :param schema: Schema the rows were transformed with.
    :param titles: Resolved titles by page ID.
    """
    fields = schema.related_fields()

    for row in rows:
        for name in fields:
            page_ids = row.get(name)
            if page_ids is None:
                continue
            row[name] = [{"id": page_id, "title": titles.get(page_id)} for page_id in page_ids]
