"""Scripted mock connection: a socket-like test double driven by a scenario.

Purpose
-------
``MockConnection`` stands in for a connected socket inside code under test.
The test declares the expected traffic up front::

    conn = MockConnection(reporter)
    conn.expect(
        Receive(b"welcome from server"),
        Send(b"hello!!"),
        Terminate(),
    )
    run_client(conn)
    assert conn.verify() == []

Each ``recv_into``/``send``/``close`` call is matched against the action at the
scenario cursor. Mismatches are recorded as :class:`Diagnostic` records (and
mirrored to the reporter, if any) and the call raises the matching
:class:`MockConnError`, so code under test sees an ``OSError`` like it would
from a broken socket. ``verify()`` returns everything recorded plus any
unfinished scenario.

State machine
-------------
- The cursor only moves forward, one action at a time, when that action's
  obligation is discharged. A drained ``Receive`` or ``Send`` at the cursor is
  skipped by whichever operation reaches it next.
- Adjacent ``Receive`` actions read as one continuous stream.
- Past the end of the scenario, ``recv_into`` returns 0, ``send`` accepts and
  reports 0 bytes, and ``close`` succeeds.
- ``closed`` latches only on a successful ``close``; afterwards every I/O and
  deadline call raises :class:`AlreadyClosedError`.

Concurrency
-----------
Not thread-safe. One logical caller per connection.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple

from .base.actions import Action, Receive, Send, Terminate
from .base.dto import ActionReport, Diagnostic
from .base.errors import AlreadyClosedError, ErrorCode, MockConnError, error_for_code
from .base.interfaces import Reporter
from .base.logging import LogContext, get_logger, normalized_log_event
from .base.scenario import Scenario
from .base.utils import quote_bytes, to_bytes
from .config import get_connection_settings
from .report import render_summary

Address = Tuple[str, int]

_RECV = "recv"
_SEND = "send"
_CLOSE = "close"

_EXPECTED_LABELS = {
    Receive: "recv",
    Send: "send",
    Terminate: "close",
}


class MockConnection:
    """Socket-like double that checks every call against a declared scenario."""

    def __init__(
        self,
        reporter: Optional[Reporter] = None,
        *,
        local_address: Optional[Address] = None,
        remote_address: Optional[Address] = None,
        name: Optional[str] = None,
    ) -> None:
        """Create a connection with an empty scenario.

        Parameters
        ----------
        reporter: Optional[Reporter]
            Test-reporting handle. Receives every diagnostic as it is recorded
            and the rendered scenario summary on ``verify()``.
        local_address, remote_address: Optional[Tuple[str, int]]
            Static addresses to report; defaults come from
            :func:`mockconn.config.get_connection_settings`.
        name: Optional[str]
            Label used in log events. Defaults to an id-based name.
        """
        settings = get_connection_settings(
            {"local_address": local_address, "remote_address": remote_address}
        )
        self._reporter = reporter
        self._scenario = Scenario()
        self._diagnostics: List[Diagnostic] = []
        self._closed = False
        self._local_address: Address = settings.local_address
        self._remote_address: Address = settings.remote_address
        self.name = name or f"conn-{id(self):x}"
        self._logger = get_logger("mockconn.connection")
        self._ctx = LogContext(connection=self.name)

    def __repr__(self) -> str:
        return (
            f"<MockConnection {self.name} cursor={self._scenario.cursor}/{len(self._scenario)}"
            f" closed={self._closed} diagnostics={len(self._diagnostics)}>"
        )

    # ------------------------------------------------------------------
    # Scenario setup and inspection

    def expect(self, *actions: Action) -> None:
        """Install (or replace) the scenario and rewind the cursor to 0.

        Recorded diagnostics and the ``closed`` latch are kept.
        """
        self._scenario.install(actions)
        self._ctx.scenario_length = len(self._scenario)
        normalized_log_event(
            self._logger,
            "scenario.install",
            self._ctx,
            phase="setup",
            actions=[a.kind.value for a in self._scenario.actions],
        )

    @property
    def scenario(self) -> Sequence[Action]:
        return self._scenario.actions

    @property
    def cursor(self) -> int:
        """0-based index of the action currently being satisfied."""
        return self._scenario.cursor

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        """Diagnostics recorded by live calls so far."""
        return tuple(self._diagnostics)

    @property
    def reporter(self) -> Optional[Reporter]:
        return self._reporter

    # ------------------------------------------------------------------
    # Receive

    def recv_into(self, buffer: Any, nbytes: int = 0) -> int:
        """Copy scripted bytes into ``buffer`` and return how many were copied.

        Returns 0 when the current receive action is drained and the next
        action is not a receive, or when the scenario is exhausted.

        Raises
        ------
        AlreadyClosedError
            After a successful ``close()``.
        UnexpectedOperationError
            When a pending send or a close is expected instead.
        """
        if self._closed:
            raise AlreadyClosedError()
        view = memoryview(buffer).cast("B")
        capacity = len(view) if nbytes <= 0 else min(nbytes, len(view))
        scenario = self._scenario
        while True:
            action = scenario.current()
            if isinstance(action, Receive):
                remaining = scenario.current_remaining()
                if remaining:
                    n = min(capacity, len(remaining))
                    view[:n] = remaining[:n]
                    scenario.consume(n)
                    return n
                if isinstance(scenario.peek_next(), Receive):
                    scenario.advance()
                    continue
                return 0
            if isinstance(action, Send):
                if not scenario.current_remaining():
                    scenario.advance()
                    continue
                raise self._unexpected(_RECV, action)
            if isinstance(action, Terminate):
                raise self._unexpected(_RECV, action)
            return 0

    def recv(self, bufsize: int) -> bytes:
        """Return up to ``bufsize`` scripted bytes (``b""`` when none are due)."""
        if bufsize < 0:
            raise ValueError("negative buffersize in recv")
        buffer = bytearray(bufsize)
        n = self.recv_into(buffer)
        return bytes(buffer[:n])

    # ------------------------------------------------------------------
    # Send

    def send(self, data: Any) -> int:
        """Check ``data`` against the expected send and return bytes accepted.

        A send may cover any prefix of what is still expected; the action is
        satisfied once the cumulative bytes equal the declared payload. Past
        the end of the scenario the data is accepted and 0 is returned.

        Raises
        ------
        AlreadyClosedError
            After a successful ``close()``.
        PayloadMismatchError
            When ``data`` differs from, or runs past, the expected bytes.
        UnexpectedOperationError
            When pending receive data or a close is expected instead.
        """
        if self._closed:
            raise AlreadyClosedError()
        payload = to_bytes(data)
        scenario = self._scenario
        while True:
            action = scenario.current()
            if isinstance(action, Receive):
                if scenario.current_remaining():
                    raise self._unexpected(_SEND, action)
                scenario.advance()
                continue
            if isinstance(action, Send):
                expected = scenario.current_remaining()
                if not expected.startswith(payload):
                    raise self._record(
                        ErrorCode.PAYLOAD_MISMATCH,
                        _SEND,
                        f"socket scenario {scenario.cursor + 1} - send() "
                        f"expected={quote_bytes(expected)} actual={quote_bytes(payload)}",
                        expected=expected,
                        actual=payload,
                    )
                scenario.consume(len(payload))
                if len(payload) == len(expected):
                    scenario.advance()
                return len(payload)
            if isinstance(action, Terminate):
                raise self._unexpected(_SEND, action)
            return 0

    def sendall(self, data: Any) -> None:
        """Send all of ``data``; the double never accepts a partial write."""
        self.send(data)

    # ------------------------------------------------------------------
    # Terminate

    def close(self) -> None:
        """Satisfy the expected close and latch the connection closed.

        Raises
        ------
        AlreadyClosedError
            When already closed.
        UnexpectedOperationError
            When receive data or a send is still pending; the connection
            stays open.
        """
        if self._closed:
            raise AlreadyClosedError()
        scenario = self._scenario
        satisfied: Optional[int] = None
        while True:
            action = scenario.current()
            if isinstance(action, Receive):
                if scenario.current_remaining():
                    raise self._unexpected(_CLOSE, action)
                scenario.advance()
                continue
            if isinstance(action, Send):
                raise self._unexpected(_CLOSE, action)
            if isinstance(action, Terminate):
                satisfied = scenario.cursor + 1
                scenario.advance()
            break
        self._closed = True
        # index is None when closing past the end of the scenario
        normalized_log_event(
            self._logger, "conn.close", self._ctx, phase="io", index=satisfied, operation=_CLOSE
        )

    # ------------------------------------------------------------------
    # Addresses and deadlines

    @property
    def local_address(self) -> Address:
        return self._local_address

    @local_address.setter
    def local_address(self, address: Address) -> None:
        self._local_address = address

    @property
    def remote_address(self) -> Address:
        return self._remote_address

    @remote_address.setter
    def remote_address(self, address: Address) -> None:
        self._remote_address = address

    def getsockname(self) -> Address:
        return self._local_address

    def getpeername(self) -> Address:
        return self._remote_address

    def set_deadline(self, when: Any) -> None:
        """Accepted and ignored; no timing is simulated."""
        self._check_open()

    def set_read_deadline(self, when: Any) -> None:
        self._check_open()

    def set_write_deadline(self, when: Any) -> None:
        self._check_open()

    def settimeout(self, value: Optional[float]) -> None:
        self._check_open()

    def _check_open(self) -> None:
        if self._closed:
            raise AlreadyClosedError("closed")

    # ------------------------------------------------------------------
    # Verification

    def verify(self) -> List[Diagnostic]:
        """Return all diagnostics plus any implied by the unfinished scenario.

        Leftover receive or send data at the cursor produces one diagnostic
        and moves the cursor past that action; any further unconsumed actions
        produce a single ``unconsumed scenario N/M`` diagnostic. The stored
        diagnostic log is restored afterwards, so calling ``verify()`` again
        does not duplicate earlier verification records, but the cursor move
        is kept. Never raises.

        ``N`` in ``unconsumed scenario N/M`` counts from the cursor at the
        moment ``verify()`` was called, before the leftover skip. A fully
        drained receive still at the cursor is therefore counted: after
        ``recv(1)`` on ``[Receive(b"a"), Terminate()]`` the result is
        ``unconsumed scenario 2/2`` even though only the terminate is left.
        """
        baseline = list(self._diagnostics)
        scenario = self._scenario
        start = scenario.cursor
        action = scenario.current()
        if isinstance(action, Receive):
            remaining = scenario.current_remaining()
            if remaining:
                self._record(
                    ErrorCode.UNSATISFIED_SCENARIO,
                    None,
                    f"mock socket scenario {scenario.cursor + 1} - "
                    f"leftover data never received: {quote_bytes(remaining)}",
                    expected=remaining,
                )
            scenario.advance()
        elif isinstance(action, Send):
            remaining = scenario.current_remaining()
            self._record(
                ErrorCode.UNSATISFIED_SCENARIO,
                None,
                f"mock socket scenario {scenario.cursor + 1} - "
                f"leftover data never sent: {quote_bytes(remaining)}",
                expected=remaining,
            )
            scenario.advance()
        if not scenario.at_end():
            # counted from where verification started, before the leftover skip
            self._record(
                ErrorCode.UNSATISFIED_SCENARIO,
                None,
                f"unconsumed scenario {len(scenario) - start}/{len(scenario)}",
                index=start + 1,
            )
        result = list(self._diagnostics)
        self._diagnostics = baseline

        if self._reporter is not None:
            self._reporter.log(render_summary(self.summarize()))
        normalized_log_event(
            self._logger,
            "verify.finish",
            self._ctx,
            phase="verify",
            index=start + 1,
            diagnostics=len(result),
        )
        return result

    def summarize(self) -> List[ActionReport]:
        """Per-action satisfaction state at the current cursor; no side effects."""
        scenario = self._scenario
        reports: List[ActionReport] = []
        for i, action in enumerate(scenario.actions):
            offset = scenario.consumed(i)
            reports.append(
                ActionReport(
                    index=i + 1,
                    kind=action.kind,
                    satisfied=i < scenario.cursor,
                    original=action.data,
                    consumed=action.data[:offset],
                    remaining=action.data[offset:],
                )
            )
        return reports

    # ------------------------------------------------------------------
    # Diagnostics

    def _unexpected(self, operation: str, action: Action) -> MockConnError:
        expected = _EXPECTED_LABELS[type(action)]
        return self._record(
            ErrorCode.UNEXPECTED_OPERATION,
            operation,
            f"socket scenario {self._scenario.cursor + 1} - "
            f"expected {expected}, but {operation}() was called",
        )

    def _record(
        self,
        code: ErrorCode,
        operation: Optional[str],
        message: str,
        *,
        expected: Optional[bytes] = None,
        actual: Optional[bytes] = None,
        index: Optional[int] = None,
    ) -> MockConnError:
        """Append a diagnostic, mirror it, and return the matching exception."""
        diagnostic = Diagnostic(
            index=self._scenario.cursor + 1 if index is None else index,
            code=code,
            message=message,
            operation=operation,
            expected=expected,
            actual=actual,
        )
        self._diagnostics.append(diagnostic)
        if self._reporter is not None:
            self._reporter.error(str(diagnostic))
        normalized_log_event(
            self._logger,
            "conn.diagnostic",
            self._ctx,
            phase="verify" if operation is None else "io",
            index=diagnostic.index,
            operation=operation,
            error_code=code.value,
            level=logging.INFO,
            message=message,
        )
        return error_for_code(diagnostic)


__all__ = ["MockConnection"]
