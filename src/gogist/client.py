"""
GitHub Gist API client
Token-authenticated listing and creation of gists.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

import requests
from requests.utils import quote

from . import config
from .collector import collect
from .credentials import default_store
from .errors import GistError, RemoteServiceError
from .types import DEFAULT_HEADERS, Gist, GistSummary

logger = logging.getLogger(__name__)


def _error_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.reason or ""
    if isinstance(body, dict) and body.get("message"):
        return body["message"]
    return resp.reason or ""


def send(method: str, url: str, **kwargs) -> object:
    """Issue one request; any failure becomes RemoteServiceError."""
    logger.debug("%s %s", method, url)
    try:
        resp = requests.request(method, url, timeout=config.timeout(), **kwargs)
    except requests.RequestException as exc:
        raise RemoteServiceError(f"{method} {url}: {exc}") from exc

    if resp.status_code >= 400:
        raise RemoteServiceError(
            f"{method} {url}: {resp.status_code} {_error_message(resp)}",
            status_code=resp.status_code,
        )

    if not resp.content:
        return {}
    try:
        return resp.json()
    except ValueError as exc:
        raise RemoteServiceError(f"{method} {url}: invalid JSON response") from exc


def _summary(data: object, where: str) -> GistSummary:
    """Parse one gist; a gist without html_url is a malformed response."""
    if not isinstance(data, dict) or not data.get("html_url"):
        raise RemoteServiceError(f"{where}: gist without html_url in response")
    return GistSummary.from_dict(data)


class GistClient:
    """Gist API client authenticated with a stored access token."""

    def __init__(self, token: str, api_base: Optional[str] = None):
        self._token = token
        self._api_base = api_base or config.api_base()

    @classmethod
    def from_store(cls, token_file: Optional[str] = None) -> "GistClient":
        return cls(default_store(token_file).read())

    def _headers(self) -> dict:
        return {
            **DEFAULT_HEADERS,
            "Authorization": f"token {self._token}",
        }

    def _request(self, method: str, path: str, **kwargs) -> object:
        return send(
            method, f"{self._api_base}{path}", headers=self._headers(), **kwargs
        )

    def list_gists(self, user: str = "") -> list[GistSummary]:
        """The authenticated user's gists, or `user`'s public gists."""
        path = f"/users/{quote(user, safe='')}/gists" if user else "/gists"
        data = self._request("GET", path)
        if not isinstance(data, list):
            raise RemoteServiceError(f"GET {path}: unexpected response")
        return [_summary(item, f"GET {path}") for item in data]

    def create_gist(self, gist: Gist) -> GistSummary:
        data = self._request("POST", "/gists", json=gist.to_payload())
        if not isinstance(data, dict):
            raise RemoteServiceError("POST /gists: unexpected response")
        return _summary(data, "POST /gists")


# ── Commands ──────────────────────────────────────────────


def cmd_list(args: argparse.Namespace) -> None:
    client = GistClient.from_store(args.token_file)
    for gist in client.list_gists(args.user or ""):
        print(gist.html_url)


def cmd_new(args: argparse.Namespace) -> None:
    client = GistClient.from_store(args.token_file)
    files = collect(
        files=args.file,
        dirs=args.dir,
        globs=args.glob,
        name=args.name or "",
    )
    gist = client.create_gist(
        Gist(description=args.desc or "", public=args.public, files=files)
    )
    print(gist.html_url)


# ── CLI ───────────────────────────────────────────────────


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--token-file",
        help=f"token file to use instead of $HOME/{config.TOKEN_FILE_NAME}",
    )
    parser.add_argument("-v", "--verbose", action="store_true")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=config.APP_NAME, description=config.APP_DESC
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser(
        "list", help="returns a list of gist urls for the authenticated user"
    )
    p.add_argument(
        "-u", "--user", default="",
        help="return the public gists of this user instead of all of "
        "the authenticated user's gists",
    )
    add_common_arguments(p)

    p = sub.add_parser(
        "new",
        help="creates a new gist for stdin input and returns the url "
        "for the generated gist",
    )
    p.add_argument("-p", "--public", action="store_true",
                   help="makes the gist public")
    p.add_argument("-n", "--name", default="",
                   help="sets the filename for the gist, ignored if file, "
                   "dir or glob are specified")
    p.add_argument("-d", "--desc", default="", help="sets the gist description")
    p.add_argument("--file", action="append", default=[],
                   help="adds the specified file to the gist")
    p.add_argument("--dir", action="append", default=[],
                   help="adds all files within the specified directory to the gist")
    p.add_argument("--glob", action="append", default=[],
                   help="adds all files matching the glob to the gist")
    add_common_arguments(p)

    return parser


_DISPATCH = {
    "list": cmd_list,
    "new": cmd_new,
}


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for list and new."""
    args = _build_parser().parse_args(argv)
    log = config.setup_logging(args.verbose)

    handler = _DISPATCH.get(args.command)
    if not handler:
        log.error("Unknown command")
        sys.exit(1)

    try:
        handler(args)
    except GistError as exc:
        log.error("%s", exc)
        sys.exit(exc.kind.exit_code)
