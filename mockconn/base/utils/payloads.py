"""Payload helpers shared by diagnostics and summary rendering."""

from __future__ import annotations

from typing import Any


def to_bytes(data: Any) -> bytes:
    """Normalize any bytes-like object to ``bytes``; reject text."""
    if isinstance(data, (str, int)):
        raise TypeError(f"a bytes-like object is required, not {type(data).__name__!r}")
    return bytes(data)


def quote_bytes(data: bytes) -> str:
    """Render a payload as a quoted, human-readable string.

    UTF-8 text shows as-is (``b"hello!!"`` -> ``'hello!!'``); undecodable
    bytes are shown as backslash escapes.
    """
    return repr(data.decode("utf-8", errors="backslashreplace"))


__all__ = ["to_bytes", "quote_bytes"]
