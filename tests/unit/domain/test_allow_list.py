"""Unit tests for the allow-list loader."""

import unittest
from unittest.mock import MagicMock

from codestyle_linter.domain.allow_list import AllowList
from codestyle_linter.domain.constants import ALLOW_LIST_FILE_NAME

ENTRY = "myproject.tests.test_widgets.WidgetTests, myproject"


class InMemoryFile:
    def __init__(self, path: str, text: str) -> None:
        self._path = path
        self._text = text
        self.reads = 0

    @property
    def path(self) -> str:
        return self._path

    def get_text(self) -> str:
        self.reads += 1
        return self._text


class TestAllowListParse(unittest.TestCase):
    def test_entries_are_trimmed(self) -> None:
        allow_list = AllowList.parse(f"   {ENTRY}\t\n")
        self.assertIn(ENTRY, allow_list)
        self.assertTrue(allow_list.contains(ENTRY))

    def test_duplicates_collapse(self) -> None:
        once = AllowList.parse(ENTRY)
        twice = AllowList.parse(f"{ENTRY}\n{ENTRY}\n  {ENTRY}  \n")
        self.assertEqual(once, twice)
        self.assertEqual(len(twice), 1)

    def test_whitespace_only_matches_nothing(self) -> None:
        allow_list = AllowList.parse("   \n\t\n\n")
        self.assertEqual(len(allow_list), 0)
        self.assertFalse(allow_list.contains(""))
        self.assertFalse(allow_list.contains(ENTRY))

    def test_match_is_exact(self) -> None:
        allow_list = AllowList.parse(ENTRY)
        self.assertFalse(allow_list.contains("myproject.tests.test_widgets.WidgetTests,myproject"))
        self.assertFalse(allow_list.contains("myproject.tests.test_widgets.WidgetTests"))
        self.assertFalse(allow_list.contains(ENTRY.upper()))

    def test_malformed_lines_are_kept_but_inert(self) -> None:
        allow_list = AllowList.parse(f"not an identity\n{ENTRY}\n")
        self.assertEqual(len(allow_list), 2)
        self.assertTrue(allow_list.contains(ENTRY))

    def test_windows_line_endings(self) -> None:
        allow_list = AllowList.parse(f"{ENTRY}\r\nother.Thing, other\r\n")
        self.assertTrue(allow_list.contains(ENTRY))
        self.assertTrue(allow_list.contains("other.Thing, other"))


class TestAllowListLoad(unittest.TestCase):
    def test_no_additional_files_gives_empty(self) -> None:
        self.assertEqual(AllowList.load([]), AllowList.empty())

    def test_loads_file_matching_name(self) -> None:
        files = [
            InMemoryFile("config/other.txt", "other.Thing, other"),
            InMemoryFile(f"config/{ALLOW_LIST_FILE_NAME}", ENTRY),
        ]
        allow_list = AllowList.load(files)
        self.assertTrue(allow_list.contains(ENTRY))
        self.assertFalse(allow_list.contains("other.Thing, other"))
        self.assertEqual(files[0].reads, 0)

    def test_name_match_is_case_sensitive(self) -> None:
        files = [InMemoryFile(ALLOW_LIST_FILE_NAME.lower(), ENTRY)]
        self.assertEqual(len(AllowList.load(files)), 0)

    def test_first_matching_file_wins(self) -> None:
        files = [
            InMemoryFile(f"a/{ALLOW_LIST_FILE_NAME}", "first.Entry, first"),
            InMemoryFile(f"b/{ALLOW_LIST_FILE_NAME}", "second.Entry, second"),
        ]
        allow_list = AllowList.load(files)
        self.assertTrue(allow_list.contains("first.Entry, first"))
        self.assertFalse(allow_list.contains("second.Entry, second"))

    def test_custom_file_name(self) -> None:
        files = [InMemoryFile("allow.txt", ENTRY)]
        self.assertTrue(AllowList.load(files, "allow.txt").contains(ENTRY))

    def test_read_errors_propagate(self) -> None:
        broken = MagicMock()
        broken.path = ALLOW_LIST_FILE_NAME
        broken.get_text.side_effect = OSError("permission denied")
        with self.assertRaises(OSError):
            AllowList.load([broken])
