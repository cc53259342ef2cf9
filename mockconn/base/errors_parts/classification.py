"""
Mapping between normalized error codes and their exception types.

Used when a diagnostic is turned back into an exception (for example by the
pytest plugin, or by callers that want to re-raise a stored diagnostic).
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

from .error_code import ErrorCode
from .mock_conn_error import (
    AlreadyClosedError,
    MockConnError,
    PayloadMismatchError,
    UnexpectedOperationError,
    UnsatisfiedScenarioError,
)

if TYPE_CHECKING:
    from ..dto.diagnostic import Diagnostic


ERROR_TYPES: Dict[ErrorCode, Type[MockConnError]] = {
    ErrorCode.ALREADY_CLOSED: AlreadyClosedError,
    ErrorCode.UNEXPECTED_OPERATION: UnexpectedOperationError,
    ErrorCode.PAYLOAD_MISMATCH: PayloadMismatchError,
    ErrorCode.UNSATISFIED_SCENARIO: UnsatisfiedScenarioError,
}


def error_for_code(diagnostic: "Diagnostic") -> MockConnError:
    """Build the exception matching ``diagnostic.code``, carrying the record."""
    if diagnostic.code is ErrorCode.ALREADY_CLOSED:
        return AlreadyClosedError(diagnostic.message)
    return ERROR_TYPES[diagnostic.code](diagnostic.message, diagnostic)


__all__ = ["ERROR_TYPES", "error_for_code"]
