"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `mockconn.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .mock_conn_error import (
    AlreadyClosedError,
    MockConnError,
    PayloadMismatchError,
    UnexpectedOperationError,
    UnsatisfiedScenarioError,
)
from .classification import ERROR_TYPES, error_for_code

__all__ = [
    "ErrorCode",
    "MockConnError",
    "AlreadyClosedError",
    "UnexpectedOperationError",
    "PayloadMismatchError",
    "UnsatisfiedScenarioError",
    "ERROR_TYPES",
    "error_for_code",
]
