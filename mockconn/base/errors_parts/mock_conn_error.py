"""
Structured mock connection error exception types.

Every failure surfaced by :class:`~mockconn.connection.MockConnection` is a
``MockConnError``. The base class also derives from ``ConnectionError`` so code
under test that already handles socket failures (``OSError``) treats the double
the same way it would treat a real connection.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .error_code import ErrorCode

if TYPE_CHECKING:
    from ..dto.diagnostic import Diagnostic


@dataclass(eq=False)
class MockConnError(ConnectionError):
    """Represents a structured mock connection failure.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message.
        diagnostic: The diagnostic record produced for this failure, when the
            failure was recorded in the connection's diagnostic log.
    """

    code: ErrorCode
    message: str
    diagnostic: Optional["Diagnostic"] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.code.value}: {self.message}"


class AlreadyClosedError(MockConnError):
    """Operation attempted after a successful close; never recorded."""

    def __init__(self, message: str = "already closed") -> None:
        super().__init__(ErrorCode.ALREADY_CLOSED, message)


class UnexpectedOperationError(MockConnError):
    """The attempted operation does not match the action at the cursor."""

    def __init__(self, message: str, diagnostic: Optional["Diagnostic"] = None) -> None:
        super().__init__(ErrorCode.UNEXPECTED_OPERATION, message, diagnostic)


class PayloadMismatchError(MockConnError):
    """Sent bytes differ from (or overrun) the expected remaining bytes."""

    def __init__(self, message: str, diagnostic: Optional["Diagnostic"] = None) -> None:
        super().__init__(ErrorCode.PAYLOAD_MISMATCH, message, diagnostic)


class UnsatisfiedScenarioError(MockConnError):
    """Verification-only: scenario actions left unconsumed. Never raised by I/O."""

    def __init__(self, message: str, diagnostic: Optional["Diagnostic"] = None) -> None:
        super().__init__(ErrorCode.UNSATISFIED_SCENARIO, message, diagnostic)


__all__ = [
    "MockConnError",
    "AlreadyClosedError",
    "UnexpectedOperationError",
    "PayloadMismatchError",
    "UnsatisfiedScenarioError",
]
