"""
GitHub login
Trades username, password and an optional one-time password for a
gist-scoped access token, then stores it.
"""

import argparse
import logging
import socket
import sys
from typing import Optional, Sequence

from requests.auth import HTTPBasicAuth

from . import config
from .client import add_common_arguments, send
from .credentials import default_store
from .errors import GistError, LocalIOError, RemoteServiceError
from .types import DEFAULT_HEADERS

logger = logging.getLogger(__name__)

GIST_SCOPE = "gist"


def build_note() -> str:
    """Human-readable authorization note: <hostname>/gogist."""
    try:
        hostname = socket.gethostname()
    except OSError as exc:
        raise LocalIOError(f"cannot resolve hostname: {exc}") from exc
    return f"{hostname}/{config.APP_NAME}"


def create_authorization(
    user: str,
    password: str,
    otp: str = "",
    note: Optional[str] = None,
    note_url: str = config.AUTH_NOTE_URL,
) -> str:
    """Create a gist-scoped authorization, return its token."""
    headers = dict(DEFAULT_HEADERS)
    if otp:
        headers["X-GitHub-OTP"] = otp

    data = send(
        "POST",
        f"{config.api_base()}/authorizations",
        headers=headers,
        auth=HTTPBasicAuth(user, password),
        json={
            "scopes": [GIST_SCOPE],
            "note": note if note is not None else build_note(),
            "note_url": note_url,
        },
    )

    token = data.get("token") if isinstance(data, dict) else None
    if not token:
        raise RemoteServiceError("POST /authorizations: no token in response")
    return token


def login(
    user: str, password: str, otp: str = "", token_file: Optional[str] = None
) -> None:
    """Full login flow: authorize and persist the token."""
    store = default_store(token_file)
    token = create_authorization(user, password, otp)
    store.write(token)
    logger.debug("stored token in %s", store.path)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"{config.APP_NAME} login",
        description="authenticates with github using the v3 oauth workflow "
        f"and provisions an application to $HOME/{config.TOKEN_FILE_NAME}.",
    )
    parser.add_argument("-u", "--user", default="",
                        help="your github username or email address.")
    parser.add_argument("-p", "--pass", dest="password", default="",
                        help="your github password.")
    parser.add_argument("-o", "--otp", default="",
                        help="your one time github password, required when "
                        "MFA is enabled.")
    add_common_arguments(parser)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point: log in and store the token."""
    args = _build_parser().parse_args(argv)
    log = config.setup_logging(args.verbose)

    try:
        login(args.user, args.password, args.otp, args.token_file)
    except GistError as exc:
        log.error("%s", exc)
        sys.exit(exc.kind.exit_code)
