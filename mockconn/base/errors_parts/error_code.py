"""
Normalized mock connection error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the scenario state machine and the
verification pass. Values are lowercase snake_case and are considered a stable
public contract for diagnostics and structured logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    ALREADY_CLOSED = "already_closed"
    UNEXPECTED_OPERATION = "unexpected_operation"
    PAYLOAD_MISMATCH = "payload_mismatch"
    UNSATISFIED_SCENARIO = "unsatisfied_scenario"


__all__ = ["ErrorCode"]
