"""
gogist: create and list GitHub gists from the command line.
"""

from .client import GistClient
from .collector import collect
from .credentials import CredentialStore
from .errors import (
    DuplicateFileNameError,
    ErrorKind,
    GistError,
    GlobError,
    LocalIOError,
    RemoteServiceError,
)
from .types import Gist, GistFile, GistSummary

__all__ = [
    "CredentialStore",
    "DuplicateFileNameError",
    "ErrorKind",
    "Gist",
    "GistClient",
    "GistError",
    "GistFile",
    "GistSummary",
    "GlobError",
    "LocalIOError",
    "RemoteServiceError",
    "collect",
]
__version__ = "0.0.1"
