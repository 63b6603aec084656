"""Custom exceptions for the Notion API client."""


class NotionClientError(Exception):
    """Raised when a Notion API request fails.

    This exception covers timeouts, HTTP errors and connection failures
    raised while talking to the Notion API.
    """

    pass
