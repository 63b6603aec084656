"""Pydantic models describing which database properties to read and how."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.notion.enums import USER_PROPERTY_TYPES, PropertyType, UserField


class PropertySchema(BaseModel):
    """Declarative description of one database property.

    :param type: The Notion property type the value is decoded as.
    :param key: Advisory flag marking the property as a grouping or sort key.
        It is carried for the caller and never affects decoding.
    """

    model_config = ConfigDict(frozen=True)

    type: PropertyType
    key: bool = False


class UserPropertySchema(PropertySchema):
    """A created_by or last_edited_by property.

    Without ``include`` the decoded value is the user ID. With it, the value
    is a dict holding exactly the requested user fields.
    """

    include: tuple[UserField, ...] | None = None

    @field_validator("type")
    @classmethod
    def validate_user_type(cls, v: PropertyType) -> PropertyType:
        """Ensure the property type refers to a user.

        :raises ValueError: If the type is not created_by or last_edited_by.
        """
        if v not in USER_PROPERTY_TYPES:
            raise ValueError(f"include is only supported for user properties, got {v}")
        return v

    @field_validator("include")
    @classmethod
    def dedupe_include(cls, v: tuple[UserField, ...] | None) -> tuple[UserField, ...] | None:
        """Drop repeated fields keeping first-seen order; an empty list means no include."""
        if not v:
            return None
        return tuple(dict.fromkeys(v))


class RelationPropertySchema(PropertySchema):
    """A relation property.

    When ``fetch_related`` is set, decoded page IDs are replaced with
    ``{"id": ..., "title": ...}`` pairs once the whole result set is decoded.
    """

    type: PropertyType = PropertyType.RELATION
    fetch_related: bool = False

    @field_validator("type")
    @classmethod
    def validate_relation_type(cls, v: PropertyType) -> PropertyType:
        """Ensure the property type is relation.

        :raises ValueError: If the type is anything else.
        """
        if v != PropertyType.RELATION:
            raise ValueError(f"fetch_related is only supported for relation properties, got {v}")
        return v


class DatabaseSchema(BaseModel):
    """A database ID plus the properties to read from it.

    Only the fields are frozen. The builder stores a copy of the caller's
    mapping, but the properties dict itself should be treated as read-only.

    :param id: Notion database ID.
    :param properties: Output field name to property schema.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Notion database ID")
    properties: dict[str, PropertySchema] = Field(default_factory=dict)

    def related_fields(self) -> list[str]:
        """Names of the relation fields whose titles should be resolved."""
        return [
            name
            for name, prop in self.properties.items()
            if isinstance(prop, RelationPropertySchema) and prop.fetch_related
        ]
