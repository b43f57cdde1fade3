import unittest

from ownedcopy.util.mime import FOLDER_MIME, is_folder


class TestUtilMime(unittest.TestCase):
    def test_is_folder(self) -> None:
        self.assertTrue(is_folder(FOLDER_MIME))
        self.assertFalse(is_folder("text/plain"))
        self.assertFalse(is_folder("application/vnd.google-apps.shortcut"))


if __name__ == "__main__":
    unittest.main()
