"""
File collection for new gists.

Explicit files, directories and glob patterns are resolved in that order
and merged into one mapping keyed by base name. With none of them given,
stdin becomes a single file.
"""

import glob
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Optional, Sequence

from .errors import DuplicateFileNameError, GlobError, LocalIOError
from .types import GistFile

logger = logging.getLogger(__name__)

DEFAULT_STDIN_NAME = "gistfile1.txt"


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def read_gist_file(path: Path) -> GistFile:
    """Read one file into a GistFile named after its base name."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise LocalIOError(f"cannot read file {path}: {exc}") from exc
    return GistFile(filename=path.name, content=_decode(data))


# ── Source resolvers ──────────────────────────────────────


def resolve_files(files: Sequence[str]) -> list[Path]:
    return [Path(f) for f in files]


def resolve_dirs(dirs: Sequence[str]) -> list[Path]:
    """Immediate file entries of each directory, sub-directories skipped."""
    paths: list[Path] = []
    for d in dirs:
        try:
            entries = sorted(Path(d).iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise LocalIOError(f"cannot read directory {d}: {exc}") from exc
        paths.extend(p for p in entries if not p.is_dir())
    return paths


def check_pattern(pattern: str) -> None:
    """Raise GlobError for an unterminated character class or trailing escape."""
    i, n = 0, len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "\\":
            if i + 1 >= n:
                raise GlobError(f"syntax error in pattern: {pattern}")
            i += 2
            continue
        if ch == "[":
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            close = pattern.find("]", j)
            if close == -1 or close == j:
                raise GlobError(f"syntax error in pattern: {pattern}")
            i = close + 1
            continue
        i += 1


def resolve_globs(globs: Sequence[str]) -> list[Path]:
    """Expand each pattern, dropping directory matches."""
    paths: list[Path] = []
    for pattern in globs:
        check_pattern(pattern)
        matches = sorted(glob.glob(pattern, include_hidden=True))
        paths.extend(Path(m) for m in matches if not Path(m).is_dir())
    return paths


Resolver = Callable[[Sequence[str]], list[Path]]


def _merge(into: dict[str, GistFile], files: Iterable[GistFile]) -> None:
    for gist_file in files:
        if gist_file.filename in into:
            raise DuplicateFileNameError(gist_file.filename)
        into[gist_file.filename] = gist_file


def collect(
    files: Sequence[str] = (),
    dirs: Sequence[str] = (),
    globs: Sequence[str] = (),
    name: str = "",
    stdin: Optional[BinaryIO] = None,
) -> dict[str, GistFile]:
    """Build the filename → GistFile mapping for a new gist."""
    sources: list[tuple[Sequence[str], Resolver]] = [
        (files, resolve_files),
        (dirs, resolve_dirs),
        (globs, resolve_globs),
    ]

    if not any(values for values, _ in sources):
        return read_stdin(name, stdin)

    collected: dict[str, GistFile] = {}
    for values, resolver in sources:
        if not values:
            continue
        _merge(collected, (read_gist_file(p) for p in resolver(values)))

    logger.debug("collected files: %s", ", ".join(collected))
    return collected


def read_stdin(name: str = "", stdin: Optional[BinaryIO] = None) -> dict[str, GistFile]:
    """All of stdin as a single file."""
    stream = stdin if stdin is not None else sys.stdin.buffer
    try:
        data = stream.read()
    except OSError as exc:
        raise LocalIOError(f"cannot read stdin: {exc}") from exc
    filename = name or DEFAULT_STDIN_NAME
    return {filename: GistFile(filename=filename, content=_decode(data))}
