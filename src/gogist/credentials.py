"""
Credential store: one access token, the whole content of one file.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from . import config
from .errors import LocalIOError

logger = logging.getLogger(__name__)

TOKEN_FILE_MODE = 0o600


class CredentialStore:
    """Reads and writes the token file at an explicit path."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise LocalIOError(f"cannot read token file {self._path}: {exc}") from exc

    def write(self, token: str) -> None:
        try:
            fd = os.open(
                self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, TOKEN_FILE_MODE
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                # O_CREAT's mode only applies to new files
                os.fchmod(fh.fileno(), TOKEN_FILE_MODE)
                fh.write(token)
        except OSError as exc:
            raise LocalIOError(f"cannot write token file {self._path}: {exc}") from exc
        logger.debug("wrote token to %s", self._path)


def default_store(path: Optional[str] = None) -> CredentialStore:
    """Store at `path`, or at the configured location when not given."""
    if path:
        return CredentialStore(Path(path).expanduser())
    return CredentialStore(config.token_path())
