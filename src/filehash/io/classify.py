"""Pre-flight checks deciding which command-line paths can be hashed."""

from __future__ import annotations

import stat
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PathCheckResult:
    """A path as given on the command line plus whether it names a regular file."""

    path: str
    hashable: bool
    reason: str | None = None


def classify(path: str | Path) -> PathCheckResult:
    """Classify `path` using metadata only; the file is never opened.

    Symbolic links are followed. Missing paths, special files (sockets,
    devices, fifos) and paths that cannot be stat'ed at all share the same reason.
    """

    display = str(path)
    try:
        mode = Path(path).stat().st_mode
    except (OSError, ValueError):
        mode = 0

    if stat.S_ISREG(mode):
        return PathCheckResult(display, True)
    if stat.S_ISDIR(mode):
        return PathCheckResult(display, False, f"{display}: is a directory, not a file")
    return PathCheckResult(display, False, f"{display}: is not a directory or a file")


def classify_all(paths: Iterable[str | Path]) -> list[PathCheckResult]:
    return [classify(path) for path in paths]


__all__ = ["PathCheckResult", "classify", "classify_all"]
