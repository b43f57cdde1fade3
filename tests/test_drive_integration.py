import os
import unittest

from ownedcopy import AuthInfo, OwnedCopyManager
from ownedcopy.controller import GoogleDriveController


def _env(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise unittest.SkipTest(f"Missing env var: {name}")
    return value


class TestGoogleDriveIntegration(unittest.TestCase):
    """
    Integration test with real Google Drive.

    Required env vars:
        - OWNEDCOPY_CLIENT_SECRETS: path to OAuth client secrets json
        - OWNEDCOPY_TOKEN_FILE: path to token json (will be created/updated)
        - OWNEDCOPY_TEST_ROOT_ID: Drive folder ID used as test root (safe sandbox)
        - OWNEDCOPY_TEST_TARGET_EMAIL: owner of some items under the test root

    The run creates copies under the test root; clean them up afterwards.
    """

    @classmethod
    def setUpClass(cls) -> None:
        cls.auth_info = AuthInfo.oauth(
            _env("OWNEDCOPY_CLIENT_SECRETS"),
            _env("OWNEDCOPY_TOKEN_FILE"),
        )
        cls.root_id = _env("OWNEDCOPY_TEST_ROOT_ID")
        cls.target_email = _env("OWNEDCOPY_TEST_TARGET_EMAIL")

    def test_run_smoke(self) -> None:
        mgr = OwnedCopyManager(self.auth_info)

        report = mgr.run(self.root_id, self.target_email)

        self.assertGreaterEqual(report.folders_visited, 1)
        self.assertEqual(
            report.folders_created + report.files_copied,
            len(report.created_ids),
        )

        controller = GoogleDriveController(self.auth_info)
        for file_id in sorted(report.created_ids)[:5]:
            entry = controller.get(file_id)
            self.assertEqual(entry.file_id, file_id)


if __name__ == "__main__":
    unittest.main()
