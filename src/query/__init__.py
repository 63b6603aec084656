"""Schema-driven queries over Notion databases."""

from src.query.discovery import (
    get_all_connected_pages,
    get_all_top_level_pages,
    get_inline_databases,
    is_top_level_page,
)
from src.query.pagination import paginate
from src.query.resolver import apply_relation_titles, resolve_relation_titles
from src.query.service import NotionQueryService
from src.query.transformer import decode_property, transform_row, transform_rows

__all__ = [
    "NotionQueryService",
    "apply_relation_titles",
    "decode_property",
    "get_all_connected_pages",
    "get_all_top_level_pages",
    "get_inline_databases",
    "is_top_level_page",
    "paginate",
    "resolve_relation_titles",
    "transform_row",
    "transform_rows",
]
