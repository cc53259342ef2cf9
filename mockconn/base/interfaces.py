"""
Protocols for the mock connection layer.

Re-exports Protocols split into single-class modules under
``mockconn.base.interfaces_parts`` while keeping imports stable.
"""

from __future__ import annotations

from .interfaces_parts import ByteStream, Reporter

__all__ = ["ByteStream", "Reporter"]
