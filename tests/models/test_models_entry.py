import dataclasses
import unittest

from ownedcopy.models import Entry, Page
from ownedcopy.util.mime import FOLDER_MIME


class TestEntry(unittest.TestCase):
    def test_entry_defaults(self) -> None:
        entry = Entry(file_id="F1", name="n", mime_type="text/plain")
        self.assertEqual(entry.owners, ())
        self.assertEqual(entry.parents, ())
        self.assertFalse(entry.is_folder)

    def test_entry_folder_keeps_owner_order(self) -> None:
        entry = Entry("D1", "dir", FOLDER_MIME, ("alice@x.com", "bob@x.com"))
        self.assertTrue(entry.is_folder)
        self.assertEqual(entry.owners[0], "alice@x.com")

    def test_entry_is_immutable(self) -> None:
        entry = Entry("F1", "n", "text/plain")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            entry.name = "other"  # type: ignore[misc]

    def test_page_default_is_final(self) -> None:
        page = Page(entries=())
        self.assertIsNone(page.next_page_token)


if __name__ == "__main__":
    unittest.main()
