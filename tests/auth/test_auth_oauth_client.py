import json
import tempfile
import unittest
from pathlib import Path

from ownedcopy.auth import DEFAULT_SCOPES, AuthInfo, OAuthClient
from ownedcopy.errors import AuthError, InvalidArgumentError


class TestOAuthClient(unittest.TestCase):
    def test_get_credentials_loads_token_file_without_refresh(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp)
            token_file = tmp_path / "token.json"

            token_payload = {
                "token": "fake-token",
                "refresh_token": "fake-refresh-token",
                "token_uri": "https://oauth2.googleapis.com/token",
                "client_id": "fake-client-id",
                "client_secret": "fake-client-secret",
                "scopes": list(DEFAULT_SCOPES),
                "type": "authorized_user",
            }
            token_file.write_text(json.dumps(token_payload), encoding="utf-8")

            info = AuthInfo.oauth(str(tmp_path / "client_secrets.json"), str(token_file))
            creds = OAuthClient(info).get_credentials(
                scopes=DEFAULT_SCOPES,
                ensure_valid=False,
            )

            self.assertEqual(creds.refresh_token, "fake-refresh-token")

    def test_unparsable_token_file_raises_auth_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            token_file = Path(tmp) / "token.json"
            token_file.write_text("not json", encoding="utf-8")

            info = AuthInfo.oauth(str(Path(tmp) / "client_secrets.json"), str(token_file))
            with self.assertRaises(AuthError):
                OAuthClient(info).get_credentials(scopes=DEFAULT_SCOPES)

    def test_missing_client_secrets_raises_auth_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            info = AuthInfo.oauth(
                str(Path(tmp) / "client_secrets.json"),
                str(Path(tmp) / "token.json"),
            )
            with self.assertRaises(AuthError) as ctx:
                OAuthClient(info).get_credentials(scopes=DEFAULT_SCOPES)
            self.assertIn("client_secrets_file", ctx.exception.details)

    def test_empty_scopes_rejected(self) -> None:
        info = AuthInfo.oauth("secrets.json", "token.json")
        with self.assertRaises(InvalidArgumentError):
            OAuthClient(info).get_credentials(scopes=[])


if __name__ == "__main__":
    unittest.main()
