"""Interfaces (Protocols) split into single-class modules.

``mockconn.base.interfaces`` re-exports these under a stable import path.
"""

from .byte_stream import ByteStream
from .reporter import Reporter

__all__ = ["ByteStream", "Reporter"]
