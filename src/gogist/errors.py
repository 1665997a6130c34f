"""
Error taxonomy for gogist.

Every failure the CLI reports belongs to one ErrorKind, and each kind maps
to its own process exit code so scripts can tell them apart.
"""

from enum import Enum


class ErrorKind(Enum):
    IO = 3
    GLOB = 4
    DUPLICATE_FILE_NAME = 5
    REMOTE_SERVICE = 6

    @property
    def exit_code(self) -> int:
        return self.value


class GistError(Exception):
    """Base error for gogist."""

    kind: ErrorKind


class LocalIOError(GistError):
    """Raised when a local file, directory, stdin or the token file fails."""

    kind = ErrorKind.IO


class GlobError(GistError):
    """Raised when a glob pattern is malformed."""

    kind = ErrorKind.GLOB


class DuplicateFileNameError(GistError):
    """Raised when two collected files resolve to the same name."""

    kind = ErrorKind.DUPLICATE_FILE_NAME

    def __init__(self, filename: str):
        super().__init__(f"error matching files have the same name: {filename}")
        self.filename = filename


class RemoteServiceError(GistError):
    """Raised when a GitHub API call fails."""

    kind = ErrorKind.REMOTE_SERVICE

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code
