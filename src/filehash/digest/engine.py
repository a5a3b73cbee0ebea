"""Streaming digest computation for files on disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from filehash.digest.algorithms import DigestAlgorithm
from filehash.util.hexenc import to_hex

LOGGER = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


def hash_stream(handle: BinaryIO, algorithm: DigestAlgorithm, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Return the hex digest of everything left in `handle`, read in `chunk_size` pieces."""
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")

    digest = algorithm.new()
    total = 0
    for chunk in iter(lambda: handle.read(chunk_size), b""):
        digest.update(chunk)
        total += len(chunk)
    LOGGER.debug("Digested %s bytes with %s", total, algorithm.value)
    return to_hex(digest.digest())


def hash_file(path: str | Path, algorithm: DigestAlgorithm, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Return the lowercase hex digest of the file at `path`.

    Raises `OSError` when the file cannot be opened or a read fails part way;
    the handle is closed either way.
    """
    with Path(path).open("rb") as handle:
        return hash_stream(handle, algorithm, chunk_size=chunk_size)


__all__ = ["DEFAULT_CHUNK_SIZE", "hash_file", "hash_stream"]
