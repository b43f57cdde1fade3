"""Command-line driver: gathers operator input and runs a copy job."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Callable, Optional, Sequence

from ownedcopy.auth import AuthInfo
from ownedcopy.errors import InvalidArgumentError, OwnedCopyError
from ownedcopy.manager import OwnedCopyManager
from ownedcopy.models import MAX_PAGE_SIZE, RunOptions

logger = logging.getLogger("ownedcopy")

ENV_CLIENT_SECRETS = "OWNEDCOPY_CLIENT_SECRETS"
ENV_TOKEN_FILE = "OWNEDCOPY_TOKEN_FILE"

LOG_FORMAT = "%(asctime)s %(levelname)-8s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ownedcopy",
        description=(
            "Copy every Google Drive item owned by a given user, found below a "
            "shared root folder, next to the original."
        ),
    )
    parser.add_argument("--root-folder-id", help="ID of the root shared folder")
    parser.add_argument("--target-email", help="Email of the user whose items to copy")
    parser.add_argument(
        "--client-secrets",
        default=os.environ.get(ENV_CLIENT_SECRETS, "credentials.json"),
        help=f"OAuth client secrets JSON (env: {ENV_CLIENT_SECRETS})",
    )
    parser.add_argument(
        "--token-file",
        default=os.environ.get(ENV_TOKEN_FILE, "token.json"),
        help=f"OAuth token JSON, created on first run (env: {ENV_TOKEN_FILE})",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=MAX_PAGE_SIZE,
        help=f"Children requested per list call (1-{MAX_PAGE_SIZE})",
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=0,
        help="Retry rate-limited, network and 5xx failures this many times",
    )
    parser.add_argument(
        "--no-shared-drives",
        action="store_true",
        help="Do not send shared-drive flags with Drive requests",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--debug", action="store_true", help="Log every Drive request")
    parser.add_argument("--log-file", help="Also write the log to this file")
    return parser


def setup_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.quiet:
        level = logging.WARNING
    if args.debug:
        level = logging.DEBUG

    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    formatter = logging.Formatter(LOG_FORMAT)

    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    if args.log_file:
        file_handler = logging.FileHandler(filename=args.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def _ask(prompt: Callable[[str], str], question: str) -> str:
    return prompt(question).strip()


def _require_input(value: str, label: str) -> None:
    if not value or not value.strip():
        raise InvalidArgumentError(f"A {label} is required")


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    prompt: Callable[[str], str] = input,
    manager_factory: Callable[..., OwnedCopyManager] = OwnedCopyManager,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args)

    try:
        options = RunOptions(
            page_size=args.page_size,
            supports_all_drives=not args.no_shared_drives,
            max_retries=args.max_retries,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        root_folder_id = args.root_folder_id or _ask(
            prompt, "Enter the ID of the root shared folder: "
        )
        target_email = args.target_email or _ask(
            prompt, "Enter the email of the user whose files you want to find: "
        )
        _require_input(root_folder_id, "root folder ID")
        _require_input(target_email, "target email")

        auth_info = AuthInfo.oauth(args.client_secrets, args.token_file)
        manager = manager_factory(auth_info, options=options)
        report = manager.run(root_folder_id, target_email)
    except EOFError:
        logger.error("Error: no input available")
        return 1
    except (OwnedCopyError, ValueError) as exc:
        logger.error("Error: %s", exc)
        details = getattr(exc, "details", None)
        if details:
            logger.debug("Error details: %s", details)
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130

    summary = report.summary()
    print(
        "Copied {files_copied} file(s), created {folders_created} folder(s), "
        "{failed} failure(s)".format(**summary)
    )
    for failure in report.failures:
        print(f"  failed: {failure.name} ({failure.file_id}): {failure.error_message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
