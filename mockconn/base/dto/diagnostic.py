"""Diagnostic record DTO produced by the scenario state machine.

A ``Diagnostic`` is one instance of expected-vs-actual mismatch, either
recorded during a live call or synthesized by ``verify()``. It is a plain data
record; styling belongs to the presentation layer (see ``mockconn.report``).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from ..errors_parts.error_code import ErrorCode


class Diagnostic(BaseModel):
    """Structured mismatch or omission record.

    Attributes:
        index: 1-based scenario index the record refers to.
        code: Normalized error code of the failure category.
        message: Human-readable description.
        operation: Operation the caller attempted (``"recv"``, ``"send"``,
            ``"close"``), or ``None`` for verification records.
        expected: Expected bytes, when a payload is involved.
        actual: Bytes actually submitted, when a payload is involved.
    """

    index: int
    code: ErrorCode
    message: str
    operation: Optional[str] = None
    expected: Optional[bytes] = None
    actual: Optional[bytes] = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


__all__ = ["Diagnostic"]
