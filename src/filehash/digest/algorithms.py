"""Supported digest algorithms."""

from __future__ import annotations

import hashlib
from enum import Enum


class DigestAlgorithm(str, Enum):
    """Closed set of digest widths the CLI can compute."""

    SHA256 = "sha256"
    SHA512 = "sha512"

    def new(self):
        """Return a fresh hash object for this algorithm."""
        return hashlib.new(self.value)

    @property
    def digest_size(self) -> int:
        return self.new().digest_size

    @property
    def hex_length(self) -> int:
        return self.digest_size * 2


__all__ = ["DigestAlgorithm"]
