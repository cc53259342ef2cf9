"""Unified mock connection error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``mockconn.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.mock_conn_error import (
    AlreadyClosedError,
    MockConnError,
    PayloadMismatchError,
    UnexpectedOperationError,
    UnsatisfiedScenarioError,
)
from .errors_parts.classification import error_for_code

__all__ = [
    "ErrorCode",
    "MockConnError",
    "AlreadyClosedError",
    "UnexpectedOperationError",
    "PayloadMismatchError",
    "UnsatisfiedScenarioError",
    "error_for_code",
]
