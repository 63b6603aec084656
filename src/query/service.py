"""Query service combining pagination, row transformation and relation resolution."""

import logging
from typing import Any

from src.notion.base import NotionAPI
from src.notion.models import InlineDatabase, TopLevelPage
from src.query.discovery import (
    get_all_connected_pages,
    get_all_top_level_pages,
    get_inline_databases,
)
from src.query.pagination import paginate
from src.query.resolver import apply_relation_titles, resolve_relation_titles
from src.query.transformer import transform_rows
from src.schema.models import DatabaseSchema

logger = logging.getLogger(__name__)


def _with_cursor(query: dict[str, Any] | None, start_cursor: str | None) -> dict[str, Any]:
    """Copy a query payload, adding the start cursor when there is one."""
    payload = dict(query or {})
    if start_cursor is not None:
        payload["start_cursor"] = start_cursor
    return payload


class NotionQueryService:
    """Schema-driven reads over a Notion workspace.

    Holds no state between calls, so one instance can be shared.
    """

    def __init__(self, client: NotionAPI, *, relation_workers: int = 1) -> None:
        """Initialise the service.

        :param client: Notion API client used for every remote call.
        :param relation_workers: Concurrent lookups when resolving related titles.
        """
        self._client = client
        self._relation_workers = relation_workers

    def get_all_top_level_pages(self) -> list[TopLevelPage]:
        """Get the pages at the root of the workspace."""
        return get_all_top_level_pages(self._client)

    def get_all_connected_pages(self) -> list[dict[str, Any]]:
        """Get every page shared with the integration."""
        return get_all_connected_pages(self._client)

    def get_inline_databases(self, page_id: str) -> list[InlineDatabase]:
        """Get the databases embedded in a page."""
        return get_inline_databases(self._client, page_id)

    def find_inline_database(self, name: str) -> InlineDatabase | None:
        """Find an inline database by name across all top-level pages.

        :param name: Exact database title.
        :returns: The first database with that title, or None.
        :raises NotionClientError: If any request fails.
        """
        for page in self.get_all_top_level_pages():
            for database in self.get_inline_databases(page.page_id):
                if database.database_name == name:
                    return database

        logger.info(f"No inline database named: {name}")
        return None

    def _fetch_pages(
        self,
        schema: DatabaseSchema,
        query: dict[str, Any] | None,
        fetch_all: bool,
    ) -> list[dict[str, Any]]:
        if not fetch_all:
            return self._client.query_database(schema.id, query).get("results", [])

        return paginate(
            lambda cursor: self._client.query_database(schema.id, _with_cursor(query, cursor))
        )

    def query_database(
        self,
        schema: DatabaseSchema,
        query: dict[str, Any] | None = None,
        *,
        fetch_all: bool = False,
    ) -> list[dict[str, Any]]:
        """Query a database and decode its rows according to a schema.

        Rows are decoded first. Related page titles are then fetched once per
        distinct ID across the whole result set and written back into every
        relation field with ``fetch_related`` set.

        :param schema: Database schema naming the properties to decode.
        :param query: Optional payload (filter, sorts, ...) passed through to
            the query endpoint.
        :param fetch_all: Follow pagination cursors and return every row.
            By default only the first page of results is returned.
        :returns: Transformed rows in the order Notion returned them.
        :raises NotionClientError: If the query request fails. Errors raised by other
            client implementations are logged and re-raised unchanged.
        """
        try:
            pages = self._fetch_pages(schema, query, fetch_all)
        except Exception as e:
            logger.error(f"Error querying database {schema.id}: {e}")
            raise

        rows, pending = transform_rows(pages, schema)

        if pending:
            titles = resolve_relation_titles(
                self._client,
                sorted(pending),
                max_workers=self._relation_workers,
            )
            apply_relation_titles(rows, schema, titles)

        logger.info(f"Transformed {len(rows)} rows from database: {schema.id}")
        return rows
