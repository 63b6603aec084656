"""Decoding of raw Notion pages into flat rows described by a database schema."""

from collections.abc import Iterable
from typing import Any

from src.notion.enums import PropertyType
from src.notion.parser import (
    extract_date,
    extract_first_plain_text,
    extract_multi_select,
    extract_relation_ids,
    extract_select,
    extract_user,
)
from src.schema.models import (
    DatabaseSchema,
    PropertySchema,
    RelationPropertySchema,
    UserPropertySchema,
)

# Key holding the source page ID in every transformed row
PAGE_ID_FIELD = "pageId"


def decode_property(prop: PropertySchema, payload: dict[str, Any]) -> Any:  # noqa: PLR0911
    """Decode one raw property payload according to its declared type.

    The declared type decides the rule, not what the payload contains, so a
    payload of another type decodes to None rather than failing.

    :param prop: Declared property schema.
    :param payload: Raw property payload from the page.
    :returns: The decoded value.
    """
    match prop.type:
        case PropertyType.TITLE | PropertyType.RICH_TEXT:
            return extract_first_plain_text(payload.get(prop.type))
        case PropertyType.NUMBER:
            return payload.get("number")
        case PropertyType.SELECT:
            return extract_select(payload)
        case PropertyType.MULTI_SELECT:
            return extract_multi_select(payload)
        case PropertyType.DATE:
            return extract_date(payload)
        case PropertyType.CHECKBOX:
            return payload.get("checkbox")
        case PropertyType.RELATION:
            return extract_relation_ids(payload)
        case PropertyType.CREATED_BY | PropertyType.LAST_EDITED_BY:
            include = prop.include if isinstance(prop, UserPropertySchema) else None
            return extract_user(payload.get(prop.type), include)
        case _:
            return payload.get(prop.type)


def transform_row(
    page: dict[str, Any],
    schema: DatabaseSchema,
) -> tuple[dict[str, Any], set[str]]:
    """Transform one raw page into a flat row.

    :param page: Raw page object from a database query.
    :param schema: Schema naming the properties to decode.
    :returns: The row, plus the related page IDs it needs titles for.
    """
    properties = page.get("properties") or {}
    row: dict[str, Any] = {PAGE_ID_FIELD: page["id"]}
    pending: set[str] = set()

    for name, prop in schema.properties.items():
        payload = properties.get(name)
        if not isinstance(payload, dict) or not payload:
            row[name] = None
            continue

        value = decode_property(prop, payload)
        row[name] = value

        if isinstance(prop, RelationPropertySchema) and prop.fetch_related and value:
            pending.update(value)

    return row, pending


def transform_rows(
    pages: Iterable[dict[str, Any]],
    schema: DatabaseSchema,
) -> tuple[list[dict[str, Any]], set[str]]:
    """Transform a result set, folding the related page IDs of every row.

    :param pages: Raw page objects from a database query.
    :param schema: Schema naming the properties to decode.
    :returns: The rows in input order, plus all distinct related page IDs.
    """
    rows: list[dict[str, Any]] = []
    pending: set[str] = set()

    for page in pages:
        row, row_pending = transform_row(page, schema)
        rows.append(row)
        pending |= row_pending

    return rows, pending
