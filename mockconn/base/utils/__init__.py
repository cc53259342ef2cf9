"""Small shared helpers."""

from .payloads import quote_bytes, to_bytes

__all__ = ["quote_bytes", "to_bytes"]
