"""Error taxonomy surface."""

from __future__ import annotations

import pytest

from mockconn import (
    AlreadyClosedError,
    Diagnostic,
    ErrorCode,
    MockConnError,
    PayloadMismatchError,
    UnexpectedOperationError,
    UnsatisfiedScenarioError,
)
from mockconn.base.errors import error_for_code


@pytest.mark.parametrize(
    "cls, code",
    [
        (UnexpectedOperationError, ErrorCode.UNEXPECTED_OPERATION),
        (PayloadMismatchError, ErrorCode.PAYLOAD_MISMATCH),
        (UnsatisfiedScenarioError, ErrorCode.UNSATISFIED_SCENARIO),
    ],
)
def test_error_for_code_maps_types(cls, code) -> None:
    diag = Diagnostic(index=2, code=code, message="boom")
    err = error_for_code(diag)
    assert type(err) is cls
    assert err.diagnostic is diag
    assert err.code is code
    assert str(err) == f"{code.value}: boom"


def test_already_closed_carries_no_diagnostic() -> None:
    err = error_for_code(Diagnostic(index=1, code=ErrorCode.ALREADY_CLOSED, message="already closed"))
    assert isinstance(err, AlreadyClosedError)
    assert err.diagnostic is None


def test_errors_are_connection_errors() -> None:
    err = AlreadyClosedError()
    assert isinstance(err, MockConnError)
    assert isinstance(err, ConnectionError)
    assert isinstance(err, OSError)
    assert err.args == ("already closed",)


def test_error_codes_are_stable_strings() -> None:
    assert {c.value for c in ErrorCode} == {
        "already_closed",
        "unexpected_operation",
        "payload_mismatch",
        "unsatisfied_scenario",
    }


def test_diagnostic_str() -> None:
    diag = Diagnostic(index=1, code=ErrorCode.PAYLOAD_MISMATCH, message="m", expected=b"a", actual=b"b")
    assert str(diag) == "payload_mismatch: m"
    assert diag.model_dump()["expected"] == b"a"
