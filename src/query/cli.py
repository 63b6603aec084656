"""Command line runner for discovering and querying Notion databases.

Lists the top-level pages shared with the integration and the inline
databases inside them, or queries one inline database by name::

    python -m src.query
    python -m src.query --database GuidePost --property Name=title
        --property Country=relation --fetch-related --include name,email
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from src.notion.client import NotionClient
from src.notion.config import get_notion_settings
from src.notion.enums import USER_PROPERTY_TYPES, PropertyType
from src.notion.exceptions import NotionClientError
from src.observability.sentry import init_sentry
from src.paths import PROJECT_ROOT
from src.query.service import NotionQueryService
from src.schema.builder import db, property_type
from src.schema.models import DatabaseSchema, PropertySchema
from src.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.query",
        description="Discover and query Notion inline databases",
    )
    parser.add_argument(
        "--database",
        help="Name of the inline database to query (lists databases if omitted)",
    )
    parser.add_argument(
        "--property",
        action="append",
        default=[],
        metavar="NAME=TYPE",
        help="Property to read, e.g. Name=title. Repeat for more properties",
    )
    parser.add_argument(
        "--fetch-related",
        action="store_true",
        help="Resolve relation properties to related page titles",
    )
    parser.add_argument(
        "--include",
        default="",
        help="Comma-separated user fields for created_by/last_edited_by properties",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        dest="fetch_all",
        help="Follow pagination and return every row",
    )
    return parser


def parse_property(
    option: str,
    *,
    fetch_related: bool,
    include: Sequence[str],
) -> tuple[str, PropertySchema]:
    """Parse a NAME=TYPE option into a property schema.

    :param option: The option value.
    :param fetch_related: Whether relation properties resolve titles.
    :param include: User fields for user-typed properties.
    :returns: Tuple of (field name, property schema).
    :raises ValueError: If the option is malformed or the type is unknown.
    """
    name, sep, type_ = option.partition("=")
    if not sep or not name or not type_:
        raise ValueError(f"Invalid property '{option}', expected NAME=TYPE")

    prop_type = PropertyType(type_.strip())
    builder = property_type(prop_type)

    if prop_type == PropertyType.RELATION:
        return name, builder.fetch_related(fetch_related)
    if prop_type in USER_PROPERTY_TYPES and include:
        return name, builder.include(*include)
    return name, builder.key()


def build_schema(database_id: str, args: argparse.Namespace) -> DatabaseSchema:
    """Build the database schema from parsed command line options."""
    include = [field.strip() for field in args.include.split(",") if field.strip()]
    properties = dict(
        parse_property(option, fetch_related=args.fetch_related, include=include)
        for option in args.property
    )
    return db(database_id).properties(properties)


def _list_databases(service: NotionQueryService) -> list[dict[str, object]]:
    listing: list[dict[str, object]] = []
    for page in service.get_all_top_level_pages():
        databases = service.get_inline_databases(page.page_id)
        listing.append(
            {
                **page.model_dump(),
                "databases": [database.model_dump() for database in databases],
            }
        )
    return listing


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the command line runner.

    :param argv: Command line arguments, defaults to sys.argv.
    :returns: Process exit code.
    """
    load_dotenv(PROJECT_ROOT / ".env")
    configure_logging()
    init_sentry()

    args = _build_parser().parse_args(argv)
    settings = get_notion_settings()

    try:
        client = NotionClient(config=settings)
    except ValueError as e:
        logger.error(f"Failed to initialise Notion client: {e}")
        return 1

    service = NotionQueryService(client, relation_workers=settings.relation_workers)

    try:
        if args.database is None:
            output: object = _list_databases(service)
        else:
            database = service.find_inline_database(args.database)
            if database is None:
                logger.error(f"Inline database not found: {args.database}")
                return 1
            schema = build_schema(database.database_id, args)
            output = service.query_database(schema, fetch_all=args.fetch_all)
    except NotionClientError as e:
        logger.error(f"Notion request failed: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid schema: {e}")
        return 2

    json.dump(output, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    return 0
