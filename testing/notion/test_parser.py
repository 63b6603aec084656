"""Tests for Notion parser module."""

import unittest

from src.notion.enums import UserField
from src.notion.parser import (
    extract_date,
    extract_first_plain_text,
    extract_multi_select,
    extract_page_title,
    extract_relation_ids,
    extract_select,
    extract_user,
)


class TestExtractFirstPlainText(unittest.TestCase):
    """Tests for extract_first_plain_text function."""

    def test_returns_first_segment_only(self) -> None:
        """Test only the first segment's text is returned."""
        segments = [{"plain_text": "Part 1 "}, {"plain_text": "Part 2"}]

        self.assertEqual(extract_first_plain_text(segments), "Part 1 ")

    def test_empty_segments_returns_none(self) -> None:
        """Test an empty segment list returns None."""
        self.assertIsNone(extract_first_plain_text([]))

    def test_empty_text_returns_none(self) -> None:
        """Test an empty string segment returns None."""
        self.assertIsNone(extract_first_plain_text([{"plain_text": ""}]))

    def test_non_list_returns_none(self) -> None:
        """Test a payload that is not a list returns None."""
        self.assertIsNone(extract_first_plain_text(None))
        self.assertIsNone(extract_first_plain_text({"plain_text": "x"}))


class TestExtractSelect(unittest.TestCase):
    """Tests for extract_select and extract_multi_select functions."""

    def test_select_returns_option_name(self) -> None:
        """Test the selected option name is returned."""
        self.assertEqual(extract_select({"select": {"name": "High"}}), "High")

    def test_unselected_returns_none(self) -> None:
        """Test an empty select returns None."""
        self.assertIsNone(extract_select({"select": None}))

    def test_multi_select_keeps_order(self) -> None:
        """Test option names keep their order."""
        prop = {"multi_select": [{"name": "b"}, {"name": "a"}]}

        self.assertEqual(extract_multi_select(prop), ["b", "a"])

    def test_multi_select_empty_selection(self) -> None:
        """Test an empty selection returns an empty list."""
        self.assertEqual(extract_multi_select({"multi_select": []}), [])

    def test_multi_select_wrong_shape_returns_none(self) -> None:
        """Test a payload of another type returns None."""
        self.assertIsNone(extract_multi_select({"select": {"name": "a"}}))


class TestExtractDate(unittest.TestCase):
    """Tests for extract_date function."""

    def test_returns_start(self) -> None:
        """Test the start date string is returned unparsed."""
        prop = {"date": {"start": "2025-12-25", "end": "2025-12-26"}}

        self.assertEqual(extract_date(prop), "2025-12-25")

    def test_empty_date_returns_none(self) -> None:
        """Test an empty date returns None."""
        self.assertIsNone(extract_date({"date": None}))


class TestExtractRelationIds(unittest.TestCase):
    """Tests for extract_relation_ids function."""

    def test_returns_ids_in_order(self) -> None:
        """Test related IDs keep their order."""
        prop = {"relation": [{"id": "r2"}, {"id": "r1"}]}

        self.assertEqual(extract_relation_ids(prop), ["r2", "r1"])

    def test_missing_relation_returns_none(self) -> None:
        """Test a payload without relation returns None."""
        self.assertIsNone(extract_relation_ids({"number": 3}))


class TestExtractUser(unittest.TestCase):
    """Tests for extract_user function."""

    def setUp(self) -> None:
        self.user = {
            "object": "user",
            "id": "user-1",
            "name": "Ada",
            "avatar_url": "https://example.com/ada.png",
            "person": {"email": "ada@example.com"},
        }

    def test_without_include_returns_id(self) -> None:
        """Test the bare user ID is returned when nothing is included."""
        self.assertEqual(extract_user(self.user), "user-1")

    def test_email_only(self) -> None:
        """Test only the email is returned, read from the person object."""
        result = extract_user(self.user, (UserField.EMAIL,))

        self.assertEqual(result, {"email": "ada@example.com"})

    def test_requested_fields_only(self) -> None:
        """Test exactly the requested fields are returned."""
        result = extract_user(self.user, (UserField.NAME, UserField.ID))

        self.assertEqual(result, {"name": "Ada", "id": "user-1"})

    def test_missing_person_gives_none_email(self) -> None:
        """Test a bot user without person yields a None email."""
        result = extract_user({"id": "bot-1", "name": "Bot"}, (UserField.NAME, UserField.EMAIL))

        self.assertEqual(result, {"name": "Bot", "email": None})

    def test_non_dict_user_returns_none(self) -> None:
        """Test a missing user object returns None."""
        self.assertIsNone(extract_user(None, (UserField.NAME,)))


class TestExtractPageTitle(unittest.TestCase):
    """Tests for extract_page_title function."""

    def test_finds_title_property_by_type(self) -> None:
        """Test the title is read from the title-typed property whatever its name."""
        page = {
            "id": "page-1",
            "properties": {
                "Status": {"type": "select", "select": {"name": "Done"}},
                "Country name": {"type": "title", "title": [{"plain_text": "France"}]},
            },
        }

        self.assertEqual(extract_page_title(page), "France")

    def test_no_title_property_returns_none(self) -> None:
        """Test a page without a title property returns None."""
        page = {"id": "page-1", "properties": {"Done": {"type": "checkbox", "checkbox": True}}}

        self.assertIsNone(extract_page_title(page))

    def test_empty_title_returns_none(self) -> None:
        """Test a page with an empty title returns None."""
        page = {"id": "page-1", "properties": {"title": {"type": "title", "title": []}}}

        self.assertIsNone(extract_page_title(page))


if __name__ == "__main__":
    unittest.main()
