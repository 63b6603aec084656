"""Discovery of top-level pages and the databases embedded in them."""

import logging
from typing import Any

from src.notion.base import NotionAPI
from src.notion.enums import BlockType, ParentType
from src.notion.models import InlineDatabase, TopLevelPage
from src.notion.parser import extract_page_title
from src.query.pagination import paginate

logger = logging.getLogger(__name__)

PAGE_SEARCH_FILTER: dict[str, Any] = {"property": "object", "value": "page"}


def is_top_level_page(page: dict[str, Any]) -> bool:
    """Check whether a page sits at the root of what the integration can see.

    The search endpoint cannot filter on this, so a page counts as top level
    when its parent is the workspace, or a page reference with no ID (a parent
    the integration has no access to).

    :param page: Raw page object from the search endpoint.
    :returns: True if the page is top level.
    """
    parent = page.get("parent") or {}
    parent_type = parent.get("type")

    if parent_type == ParentType.WORKSPACE:
        return True

    return parent_type == ParentType.PAGE_ID and not parent.get("page_id")


def get_all_connected_pages(client: NotionAPI) -> list[dict[str, Any]]:
    """Get every page shared with the integration.

    :param client: Notion API client.
    :returns: Raw page objects in search order.
    :raises NotionClientError: If any request fails.
    """
    pages = paginate(
        lambda cursor: client.search(filter_=PAGE_SEARCH_FILTER, start_cursor=cursor)
    )
    logger.info(f"Found {len(pages)} connected pages")
    return pages


def get_all_top_level_pages(client: NotionAPI) -> list[TopLevelPage]:
    """Get the pages at the root of the workspace.

    Untitled pages are returned with ``page_name`` set to None.

    :param client: Notion API client.
    :returns: Top-level pages in search order.
    :raises NotionClientError: If any request fails.
    """
    top_level_pages: list[TopLevelPage] = []

    for page in get_all_connected_pages(client):
        if not is_top_level_page(page):
            continue

        page_name = extract_page_title(page)
        if page_name is None:
            logger.warning(f"Top-level page has no title: {page['id']}")

        top_level_pages.append(
            TopLevelPage(
                page_id=page["id"],
                page_name=page_name,
                page_parent=page.get("parent") or {},
            )
        )

    logger.info(f"Found {len(top_level_pages)} top-level pages")
    return top_level_pages


def get_inline_databases(client: NotionAPI, page_id: str) -> list[InlineDatabase]:
    """Get the databases embedded as child blocks of a page.

    :param client: Notion API client.
    :param page_id: The Notion page ID.
    :returns: Inline databases in block order.
    :raises NotionClientError: If any request fails.
    """
    blocks = paginate(lambda cursor: client.list_block_children(page_id, start_cursor=cursor))

    databases = [
        InlineDatabase(
            database_id=block["id"],
            database_name=(block.get(BlockType.CHILD_DATABASE) or {}).get("title", ""),
        )
        for block in blocks
        if block.get("type") == BlockType.CHILD_DATABASE
    ]

    logger.info(f"Found {len(databases)} inline databases in page: {page_id}")
    return databases
