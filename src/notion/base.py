"""Protocol for the remote Notion calls the query layer depends on."""

from typing import Any, Protocol


class NotionAPI(Protocol):
    """Protocol for a Notion API client.

    NotionClient satisfies it. Any object exposing the same calls can be
    injected instead, e.g. a client with its own retry policy.
    """

    def search(
        self,
        *,
        filter_: dict[str, Any] | None = None,
        start_cursor: str | None = None,
    ) -> dict[str, Any]:
        """List pages or databases visible to the integration.

        :returns: Dict with ``results`` and ``next_cursor``.
        """
        ...

    def get_page(self, page_id: str) -> dict[str, Any]:
        """Fetch one page with all its properties."""
        ...

    def list_block_children(
        self,
        block_id: str,
        *,
        start_cursor: str | None = None,
    ) -> dict[str, Any]:
        """List the child blocks of a page.

        :returns: Dict with ``results`` and ``next_cursor``.
        """
        ...

    def query_database(
        self,
        database_id: str,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Query one database.

        :returns: Dict with ``results`` and ``next_cursor``.
        """
        ...
