import unittest

import ownedcopy


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(ownedcopy, "OwnedCopyManager"))
        self.assertTrue(hasattr(ownedcopy, "OwnedItemWalker"))
        self.assertTrue(hasattr(ownedcopy, "SubtreeReplicator"))
        self.assertTrue(hasattr(ownedcopy, "AuthInfo"))
        self.assertTrue(hasattr(ownedcopy, "OAuthClient"))

        self.assertTrue(hasattr(ownedcopy, "Entry"))
        self.assertTrue(hasattr(ownedcopy, "CopyReport"))
        self.assertTrue(hasattr(ownedcopy, "RunOptions"))

        self.assertTrue(hasattr(ownedcopy, "OwnedCopyError"))
        self.assertTrue(hasattr(ownedcopy, "OwnerNotFoundError"))

    def test___all___is_defined(self) -> None:
        for name in ownedcopy.__all__:
            self.assertTrue(hasattr(ownedcopy, name), name)
        self.assertIn("OwnedCopyManager", ownedcopy.__all__)


if __name__ == "__main__":
    unittest.main()
