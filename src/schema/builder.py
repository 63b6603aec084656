"""Builder API for declaring database schemas.

Example::

    schema = db(database_id).properties(
        {
            "Name": property_type("title").key(True),
            "Country": property_type("relation").fetch_related(),
            "CreatedBy": property_type("created_by").include("name", "email"),
        }
    )
"""

from src.notion.enums import PropertyType, UserField
from src.schema.models import (
    DatabaseSchema,
    PropertySchema,
    RelationPropertySchema,
    UserPropertySchema,
)


class PropertyBuilder:
    """Builds the property schema variant matching one property type."""

    def __init__(self, type_: PropertyType | str) -> None:
        """Initialise the builder.

        :param type_: Notion property type tag.
        :raises ValueError: If the type tag is unknown.
        """
        self._type = PropertyType(type_)

    def key(self, is_key: bool = False) -> PropertySchema:
        """Build a plain property schema.

        :param is_key: Advisory key flag.
        :returns: The property schema.
        """
        return PropertySchema(type=self._type, key=is_key)

    def include(self, *fields: UserField | str) -> UserPropertySchema:
        """Build a user property schema picking the given user fields.

        :param fields: User fields to include in the decoded value.
        :returns: The user property schema.
        :raises ValueError: If the type is not a user type or a field is unknown.
        """
        return UserPropertySchema(type=self._type, include=tuple(UserField(f) for f in fields))

    def fetch_related(self, fetch: bool = True) -> RelationPropertySchema:
        """Build a relation property schema.

        :param fetch: Whether to resolve related page titles.
        :returns: The relation property schema.
        :raises ValueError: If the type is not relation.
        """
        return RelationPropertySchema(type=self._type, fetch_related=fetch)


class DatabaseBuilder:
    """Binds a database ID to its property schemas."""

    def __init__(self, database_id: str) -> None:
        self._database_id = database_id

    def properties(self, props: dict[str, PropertySchema]) -> DatabaseSchema:
        """Build the database schema.

        :param props: Output field name to property schema.
        :returns: The database schema.
        """
        return DatabaseSchema(id=self._database_id, properties=dict(props))


def property_type(type_: PropertyType | str) -> PropertyBuilder:
    """Start building a property schema for a property type."""
    return PropertyBuilder(type_)


def db(database_id: str) -> DatabaseBuilder:
    """Start building a database schema for a database ID."""
    return DatabaseBuilder(database_id)
