"""Enums for Notion object and property type tags."""

from enum import StrEnum


class PropertyType(StrEnum):
    """Property types a database schema can declare."""

    TITLE = "title"
    RICH_TEXT = "rich_text"
    NUMBER = "number"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    DATE = "date"
    PEOPLE = "people"
    FILES = "files"
    CHECKBOX = "checkbox"
    URL = "url"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    FORMULA = "formula"
    RELATION = "relation"
    ROLLUP = "rollup"
    CREATED_TIME = "created_time"
    CREATED_BY = "created_by"
    LAST_EDITED_TIME = "last_edited_time"
    LAST_EDITED_BY = "last_edited_by"


# Property types whose payload is a user object
USER_PROPERTY_TYPES = frozenset({PropertyType.CREATED_BY, PropertyType.LAST_EDITED_BY})


class UserField(StrEnum):
    """Fields that can be picked from a user object."""

    ID = "id"
    NAME = "name"
    AVATAR_URL = "avatar_url"
    EMAIL = "email"


class ParentType(StrEnum):
    """Parent reference types of a Notion page."""

    WORKSPACE = "workspace"
    PAGE_ID = "page_id"
    DATABASE_ID = "database_id"
    BLOCK_ID = "block_id"


class BlockType(StrEnum):
    """Block types the discovery operations care about."""

    CHILD_DATABASE = "child_database"
    CHILD_PAGE = "child_page"
