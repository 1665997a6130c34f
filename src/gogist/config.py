"""
Configuration read from the environment.

GOGIST_API_BASE    GitHub API root (GitHub Enterprise installs differ)
GOGIST_TOKEN_FILE  where the access token lives, default ~/.gogist
GOGIST_TIMEOUT     HTTP timeout in seconds
"""

import logging
import math
import os
import sys
from pathlib import Path

from .errors import LocalIOError

APP_NAME = "gogist"
APP_VERSION = "0.0.1"
APP_USAGE = "a cli tool for githubs gists"
APP_DESC = "create and list github gists"
AUTH_NOTE_URL = "github.com/jakekeeys/gogist"
TOKEN_FILE_NAME = ".gogist"
DEFAULT_TIMEOUT = 30.0


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def api_base() -> str:
    return _env_str("GOGIST_API_BASE", "https://api.github.com").rstrip("/")


def timeout() -> float:
    """HTTP timeout in seconds; non-positive or non-finite values fall back."""
    value = _env_float("GOGIST_TIMEOUT", DEFAULT_TIMEOUT)
    if not math.isfinite(value) or value <= 0:
        return DEFAULT_TIMEOUT
    return value


def token_path() -> Path:
    """Resolve the credential file path. Raises LocalIOError without a home."""
    override = os.environ.get("GOGIST_TOKEN_FILE")
    if override:
        return Path(override).expanduser()
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as exc:
        raise LocalIOError(f"cannot resolve home directory: {exc}") from exc
    return home / TOKEN_FILE_NAME


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Route the gogist logger to stderr with bare messages."""
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # rebind to the current sys.stderr on every call
    for old in list(logger.handlers):
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
