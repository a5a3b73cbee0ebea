"""Hex rendering for digest bytes."""

from __future__ import annotations


def to_hex(data: bytes) -> str:
    """Return `data` as lowercase hex, two characters per byte, no separators."""
    return "".join(f"{byte:02x}" for byte in data)


__all__ = ["to_hex"]
