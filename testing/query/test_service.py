"""Tests for the query service."""

import unittest
from typing import Any
from unittest.mock import MagicMock

from src.notion.exceptions import NotionClientError
from src.notion.models import InlineDatabase, TopLevelPage
from src.query.service import NotionQueryService
from src.schema.builder import db, property_type


def _row(page_id: str, country_ids: list[str]) -> dict[str, Any]:
    return {
        "id": page_id,
        "properties": {
            "Name": {"type": "title", "title": [{"plain_text": page_id.upper()}]},
            "Country": {"type": "relation", "relation": [{"id": i} for i in country_ids]},
        },
    }


def _country(page_id: str, title: str) -> dict[str, Any]:
    return {"id": page_id, "properties": {"Name": {"type": "title", "title": [{"plain_text": title}]}}}


class TestQueryDatabase(unittest.TestCase):
    """Tests for NotionQueryService.query_database."""

    def setUp(self) -> None:
        self.schema = db("db-1").properties(
            {
                "Name": property_type("title").key(True),
                "Country": property_type("relation").fetch_related(True),
            }
        )
        self.client = MagicMock()
        self.service = NotionQueryService(self.client)

    def test_resolves_relations_once_per_id(self) -> None:
        """Test shared related IDs are fetched once across the whole result set."""
        self.client.query_database.return_value = {
            "results": [_row("p1", ["r1", "r2"]), _row("p2", ["r1"])],
            "next_cursor": None,
        }
        self.client.get_page.side_effect = lambda page_id: _country(page_id, f"Title {page_id}")

        rows = self.service.query_database(self.schema)

        self.assertEqual(
            rows,
            [
                {
                    "pageId": "p1",
                    "Name": "P1",
                    "Country": [
                        {"id": "r1", "title": "Title r1"},
                        {"id": "r2", "title": "Title r2"},
                    ],
                },
                {"pageId": "p2", "Name": "P2", "Country": [{"id": "r1", "title": "Title r1"}]},
            ],
        )
        self.assertEqual(self.client.get_page.call_count, 2)

    def test_failed_lookup_does_not_abort_query(self) -> None:
        """Test a failing related page lookup yields a None title."""
        self.client.query_database.return_value = {"results": [_row("p1", ["r1", "r2"])]}

        def get_page(page_id: str) -> dict[str, Any]:
            if page_id == "r2":
                raise NotionClientError("404")
            return _country(page_id, "Title1")

        self.client.get_page.side_effect = get_page

        rows = self.service.query_database(self.schema)

        self.assertEqual(
            rows[0]["Country"],
            [{"id": "r1", "title": "Title1"}, {"id": "r2", "title": None}],
        )

    def test_no_relations_skips_resolution(self) -> None:
        """Test no page lookups happen when nothing needs resolving."""
        self.client.query_database.return_value = {"results": [_row("p1", [])]}

        rows = self.service.query_database(self.schema)

        self.assertEqual(rows[0]["Country"], [])
        self.client.get_page.assert_not_called()

    def test_passes_query_payload_and_fetches_one_page(self) -> None:
        """Test the query payload is passed through and only the first page is read."""
        self.client.query_database.return_value = {"results": [], "next_cursor": "c-1"}
        query = {"sorts": [{"property": "Name", "direction": "ascending"}]}

        self.service.query_database(self.schema, query)

        self.client.query_database.assert_called_once_with("db-1", query)

    def test_fetch_all_follows_cursors(self) -> None:
        """Test fetch_all threads the cursor into the query payload."""
        self.client.query_database.side_effect = [
            {"results": [_row("p1", [])], "next_cursor": "c-1"},
            {"results": [_row("p2", [])], "next_cursor": None},
        ]
        query = {"filter": {"property": "Name", "title": {"is_not_empty": True}}}

        rows = self.service.query_database(self.schema, query, fetch_all=True)

        self.assertEqual([row["pageId"] for row in rows], ["p1", "p2"])
        first, second = self.client.query_database.call_args_list
        self.assertEqual(first.args, ("db-1", query))
        self.assertEqual(second.args, ("db-1", {**query, "start_cursor": "c-1"}))
        self.assertNotIn("start_cursor", query)

    def test_query_failure_propagates(self) -> None:
        """Test a failing query call is raised to the caller."""
        self.client.query_database.side_effect = NotionClientError("500")

        with self.assertRaises(NotionClientError):
            self.service.query_database(self.schema)

    def test_other_query_failure_is_logged_and_propagates(self) -> None:
        """Test a non-Notion error from the query call is logged before being raised."""
        self.client.query_database.side_effect = RuntimeError("retry budget exhausted")

        with self.assertLogs("src.query.service", level="ERROR") as logs:
            with self.assertRaises(RuntimeError):
                self.service.query_database(self.schema)

        self.assertIn("db-1", "\n".join(logs.output))

    def test_related_lookup_runtime_error_does_not_abort_query(self) -> None:
        """Test a related page lookup raising a non-Notion error yields a None title."""
        self.client.query_database.return_value = {"results": [_row("p1", ["r1", "r2"])]}

        def get_page(page_id: str) -> dict[str, Any]:
            if page_id == "r2":
                raise RuntimeError("retry budget exhausted")
            return _country(page_id, "T1")

        self.client.get_page.side_effect = get_page

        rows = self.service.query_database(self.schema)

        self.assertEqual(
            rows[0]["Country"],
            [{"id": "r1", "title": "T1"}, {"id": "r2", "title": None}],
        )


class TestFindInlineDatabase(unittest.TestCase):
    """Tests for NotionQueryService.find_inline_database."""

    def test_finds_database_by_name(self) -> None:
        """Test the first database with a matching name is returned."""
        service = NotionQueryService(MagicMock())
        service.get_all_top_level_pages = MagicMock(  # type: ignore[method-assign]
            return_value=[
                TopLevelPage(page_id="p-1", page_name="Home"),
                TopLevelPage(page_id="p-2", page_name="Travel"),
            ]
        )
        service.get_inline_databases = MagicMock(  # type: ignore[method-assign]
            side_effect=[
                [InlineDatabase(database_id="db-1", database_name="Tasks")],
                [InlineDatabase(database_id="db-2", database_name="GuidePost")],
            ]
        )

        database = service.find_inline_database("GuidePost")

        self.assertIsNotNone(database)
        self.assertEqual(database.database_id, "db-2")

    def test_missing_database_returns_none(self) -> None:
        """Test None is returned when no database matches."""
        client = MagicMock()
        client.search.return_value = {"results": [], "next_cursor": None}

        self.assertIsNone(NotionQueryService(client).find_inline_database("GuidePost"))


if __name__ == "__main__":
    unittest.main()
