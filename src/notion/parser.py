"""Extraction helpers for raw Notion API property payloads.

Every helper tolerates a payload shaped differently than expected and
returns None (or an empty default) instead of raising, so a schema that
does not match the remote database never fails a query.
"""

from typing import Any

from src.notion.enums import PropertyType, UserField


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def extract_first_plain_text(segments: Any) -> str | None:
    """Extract the plain text of the first rich text segment."""
    if not isinstance(segments, list) or not segments:
        return None
    return _as_dict(segments[0]).get("plain_text") or None


def extract_select(prop: dict[str, Any]) -> str | None:
    """Extract selected option name from a select property."""
    return _as_dict(prop.get("select")).get("name") or None


def extract_multi_select(prop: dict[str, Any]) -> list[str] | None:
    """Extract option names from a multi_select property, keeping their order."""
    options = prop.get("multi_select")
    if not isinstance(options, list):
        return None
    return [option["name"] for option in options if "name" in _as_dict(option)]


def extract_date(prop: dict[str, Any]) -> str | None:
    """Extract the start date string from a date property."""
    return _as_dict(prop.get("date")).get("start") or None


def extract_relation_ids(prop: dict[str, Any]) -> list[str] | None:
    """Extract referenced page IDs from a relation property, keeping their order."""
    items = prop.get("relation")
    if not isinstance(items, list):
        return None
    return [item["id"] for item in items if "id" in _as_dict(item)]


def extract_user(
    user: Any,
    include: tuple[UserField, ...] | None = None,
) -> str | dict[str, Any] | None:
    """Extract a user reference from a created_by or last_edited_by payload.

    :param user: The raw user object.
    :param include: User fields to pick. If empty or None only the user ID is returned.
    :returns: The user ID, or a dict holding exactly the requested fields.
    """
    if not isinstance(user, dict):
        return None

    if not include:
        return user.get("id")

    picked: dict[str, Any] = {}
    for field in include:
        if field == UserField.EMAIL:
            # Email lives on the nested person object, not on the user itself
            picked[field.value] = _as_dict(user.get("person")).get("email") or None
        else:
            picked[field.value] = user.get(field.value) or None
    return picked


def extract_page_title(page: dict[str, Any]) -> str | None:
    """Extract a page's title from whichever property is title-typed.

    :param page: Raw page object from Notion API response.
    :returns: First title segment, or None if the page has no title.
    """
    properties = _as_dict(page.get("properties"))

    for prop in properties.values():
        prop = _as_dict(prop)
        if prop.get("type") == PropertyType.TITLE:
            return extract_first_plain_text(prop.get("title"))

    return None
