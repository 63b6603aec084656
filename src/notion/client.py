"""Notion API client for searching, reading pages and querying databases."""

import logging
from typing import Any

import requests

from src.notion.config import NotionConfig
from src.notion.exceptions import NotionClientError

logger = logging.getLogger(__name__)

# Notion API version. Databases are queried through databases/{id}/query,
# which later versions moved to data sources.
NOTION_VERSION = "2022-06-28"


class NotionClient:
    """Client for interacting with the Notion API.

    Read-only: exposes the search, page, block children and database query
    endpoints the query layer is built on.
    """

    BASE_URL = "https://api.notion.com/v1"

    def __init__(self, *, token: str | None = None, config: NotionConfig | None = None) -> None:
        """Initialise the Notion client.

        :param token: Notion integration token. If not provided, read from the
            NOTION_INTEGRATION_SECRET setting.
        :param config: Settings to use. Loaded from the environment if omitted.
        :raises ValueError: If token is not provided and not found in settings.
        """
        self._config = config or NotionConfig()
        self._token = token or self._config.integration_secret

        if not self._token:
            raise ValueError(
                "Notion integration token not provided. Set NOTION_INTEGRATION_SECRET "
                "environment variable or pass token parameter."
            )

        logger.debug("NotionClient initialised")

    @property
    def _headers(self) -> dict[str, str]:
        """Headers for Notion API requests.

        :returns: Dictionary of required headers.
        """
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "Notion-Version": NOTION_VERSION,
        }

    @property
    def page_size(self) -> int:
        """Number of results requested per paginated call."""
        return self._config.page_size

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Make a request to the Notion API.

        :param method: HTTP method.
        :param endpoint: API endpoint path (without base URL).
        :param params: Optional query string parameters.
        :param payload: Optional JSON request body.
        :returns: JSON response as dictionary.
        :raises NotionClientError: If the request fails.
        """
        url = f"{self.BASE_URL}/{endpoint}"
        timeout = self._config.request_timeout
        logger.debug(f"Making {method} request to endpoint={endpoint}")

        try:
            response = requests.request(
                method,
                url,
                headers=self._headers,
                params=params,
                json=payload,
                timeout=timeout,
            )
            response.raise_for_status()
            return response.json()

        except requests.exceptions.Timeout as e:
            raise NotionClientError(f"Notion API request timed out after {timeout}s") from e
        except requests.exceptions.HTTPError as e:
            error_body = self._extract_error_message(e.response)
            raise NotionClientError(
                f"Notion API request failed: {e.response.status_code} - {error_body}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise NotionClientError(f"Notion API request failed: {e}") from e

    def _extract_error_message(self, response: requests.Response) -> str:
        """Extract error message from Notion API error response.

        :param response: Response object from failed request.
        :returns: Error message string.
        """
        try:
            data = response.json()
            return data.get("message", response.text)
        except ValueError:
            return response.text

    # Search endpoint

    def search(
        self,
        *,
        filter_: dict[str, Any] | None = None,
        start_cursor: str | None = None,
    ) -> dict[str, Any]:
        """Search pages and databases shared with the integration.

        :param filter_: Optional search filter, e.g. restricting to pages.
        :param start_cursor: Cursor for pagination.
        :returns: One page of search results with pagination info.
        :raises NotionClientError: If the request fails.
        """
        logger.info("Searching workspace")
        payload: dict[str, Any] = {"page_size": self.page_size}

        if filter_ is not None:
            payload["filter"] = filter_

        if start_cursor is not None:
            payload["start_cursor"] = start_cursor

        return self._request("POST", "search", payload=payload)

    # Page endpoints

    def get_page(self, page_id: str) -> dict[str, Any]:
        """Retrieve a single page.

        :param page_id: Notion page ID.
        :returns: Page object with properties.
        :raises NotionClientError: If the request fails.
        """
        logger.info(f"Retrieving page: {page_id}")
        return self._request("GET", f"pages/{page_id}")

    # Block endpoints

    def list_block_children(
        self,
        block_id: str,
        *,
        start_cursor: str | None = None,
    ) -> dict[str, Any]:
        """List one page of a block's children.

        :param block_id: Notion block or page ID.
        :param start_cursor: Cursor for pagination.
        :returns: One page of child blocks with pagination info.
        :raises NotionClientError: If the request fails.
        """
        logger.info(f"Listing children of block: {block_id}")
        params: dict[str, Any] = {"page_size": self.page_size}

        if start_cursor is not None:
            params["start_cursor"] = start_cursor

        return self._request("GET", f"blocks/{block_id}/children", params=params)

    # Database endpoints

    def query_database(
        self,
        database_id: str,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Query pages from a database.

        :param database_id: Notion database ID.
        :param payload: Optional request body (filter, sorts, start_cursor, ...),
            passed through unchanged.
        :returns: Query results with pages and pagination info.
        :raises NotionClientError: If the request fails.
        """
        logger.info(f"Querying database: {database_id}")
        return self._request("POST", f"databases/{database_id}/query", payload=dict(payload or {}))
