import unittest

from fake_store import FakeStore

from ownedcopy.errors import ApiError, TraversalCycleError
from ownedcopy.models import CopyReport
from ownedcopy.replicator import SubtreeReplicator


def _mixed_tree() -> FakeStore:
    """R -> A (bob) -> [x (carol), S (carol) -> [y (dave), T (dave) -> [z (bob)]]]."""
    store = FakeStore()
    store.add_folder("R", "R", ["alice@x.com"])
    store.add_folder("A", "A", ["bob@x.com"], "R")
    store.add_file("x", "x", ["carol@x.com"], "A")
    store.add_folder("S", "S", ["carol@x.com"], "A")
    store.add_file("y", "y", ["dave@x.com"], "S")
    store.add_folder("T", "T", ["dave@x.com"], "S")
    store.add_file("z", "z", ["bob@x.com"], "T")
    return store


class TestSubtreeReplicator(unittest.TestCase):
    def setUp(self) -> None:
        self.store = _mixed_tree()
        self.report = CopyReport(root_folder_id="R", target_email="bob@x.com")
        self.replicator = SubtreeReplicator(self.store, self.report)

    def test_owned_folder_gets_full_copy_regardless_of_ownership(self) -> None:
        before = self.store.subtree_size("A")

        new_folder = self.replicator.replicate_owned(
            self.store.items["A"], "R", "bob@x.com", "alice@x.com"
        )

        self.assertIsNotNone(new_folder)
        self.assertEqual(new_folder.name, "A")
        self.assertEqual(self.store.calls[0], ("create_folder", "A", "R"))
        self.assertEqual(self.store.subtree_size(new_folder.file_id), before)
        self.assertEqual(self.store.names_in(new_folder.file_id), ["x", "S"])
        self.assertEqual(self.report.folders_created, 3)
        self.assertEqual(self.report.files_copied, 3)

    def test_owned_file_is_copied_into_given_parent(self) -> None:
        created = self.replicator.replicate_owned(
            self.store.items["z"], "T", "bob@x.com", "alice@x.com"
        )

        self.assertEqual(self.store.calls, [("copy", "z", "T", "z")])
        self.assertEqual(created.name, "z")
        self.assertEqual(self.store.names_in("T"), ["z", "z"])
        self.assertIn(created.file_id, self.report.created_ids)

    def test_failed_folder_creation_skips_its_subtree(self) -> None:
        self.store.fail_create.add("S")

        new_folder = self.replicator.replicate_owned(
            self.store.items["A"], "R", "bob@x.com", "alice@x.com"
        )

        self.assertEqual(self.store.names_in(new_folder.file_id), ["x"])
        self.assertNotIn(("list", "S", None), self.store.calls)
        self.assertEqual(len(self.report.failures), 1)
        self.assertEqual(self.report.failures[0].operation, "create_folder")
        self.assertEqual(self.report.failures[0].name, "S")

    def test_failed_top_folder_creation_returns_none(self) -> None:
        self.store.fail_create.add("A")

        result = self.replicator.replicate_owned(
            self.store.items["A"], "R", "bob@x.com", "alice@x.com"
        )

        self.assertIsNone(result)
        self.assertEqual(self.store.calls_of("list"), [])

    def test_file_copy_failure_does_not_stop_subtree(self) -> None:
        self.store.fail_copy.add("x")

        new_folder = self.replicator.replicate_owned(
            self.store.items["A"], "R", "bob@x.com", "alice@x.com"
        )

        self.assertEqual(self.store.names_in(new_folder.file_id), ["S"])
        self.assertEqual(self.report.files_copied, 2)
        self.assertEqual([f.name for f in self.report.failures], ["x"])

    def test_list_failure_propagates(self) -> None:
        self.store.fail_list.add("S")

        with self.assertRaises(ApiError):
            self.replicator.copy_subtree("A", "R", "bob@x.com", "alice@x.com")

    def test_cycle_in_source_is_fatal(self) -> None:
        self.store.children["T"].append("A")

        with self.assertRaises(TraversalCycleError):
            self.replicator.copy_subtree("A", "R", "bob@x.com", "alice@x.com")


if __name__ == "__main__":
    unittest.main()
