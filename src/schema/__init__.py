"""Declarative schemas describing how to decode Notion database rows."""

from src.schema.builder import db, property_type
from src.schema.models import (
    DatabaseSchema,
    PropertySchema,
    RelationPropertySchema,
    UserPropertySchema,
)

__all__ = [
    "DatabaseSchema",
    "PropertySchema",
    "RelationPropertySchema",
    "UserPropertySchema",
    "db",
    "property_type",
]
