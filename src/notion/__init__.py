"""Notion API integration module for reading pages, blocks and databases."""

from src.notion.client import NotionClient
from src.notion.enums import PropertyType, UserField
from src.notion.exceptions import NotionClientError
from src.notion.models import InlineDatabase, TopLevelPage

__all__ = [
    "InlineDatabase",
    "NotionClient",
    "NotionClientError",
    "PropertyType",
    "TopLevelPage",
    "UserField",
]
