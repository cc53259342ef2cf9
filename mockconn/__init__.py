"""mockconn package

Scripted socket-like test double.

Purpose:
    Replace a real connection in code under test with a ``MockConnection``
    that follows a declared scenario of receive, send and close actions, and
    report every deviation as a structured diagnostic.

Public API (re-exported):
    - Version: ``__version__``
    - Double: :class:`MockConnection`
    - Actions: :class:`Receive`, :class:`Send`, :class:`Terminate`,
      :class:`ActionKind`
    - Records: :class:`Diagnostic`, :class:`ActionReport`
    - Exceptions: :class:`MockConnError`, :class:`AlreadyClosedError`,
      :class:`UnexpectedOperationError`, :class:`PayloadMismatchError`,
      :class:`UnsatisfiedScenarioError`, :class:`ErrorCode`
    - Protocols: :class:`Reporter`, :class:`ByteStream`
    - Reporters: :class:`LoggingReporter`, :class:`CollectingReporter`
    - Rendering: :func:`render_summary`, :func:`render_diagnostics`
"""

from .base.actions import ActionKind, Receive, Send, Terminate
from .base.dto import ActionReport, Diagnostic
from .base.errors import (
    AlreadyClosedError,
    ErrorCode,
    MockConnError,
    PayloadMismatchError,
    UnexpectedOperationError,
    UnsatisfiedScenarioError,
)
from .base.interfaces import ByteStream, Reporter
from .connection import MockConnection
from .report import render_diagnostics, render_summary
from .reporters import CollectingReporter, LoggingReporter

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "MockConnection",
    "Receive",
    "Send",
    "Terminate",
    "ActionKind",
    "Diagnostic",
    "ActionReport",
    "MockConnError",
    "AlreadyClosedError",
    "UnexpectedOperationError",
    "PayloadMismatchError",
    "UnsatisfiedScenarioError",
    "ErrorCode",
    "Reporter",
    "ByteStream",
    "LoggingReporter",
    "CollectingReporter",
    "render_summary",
    "render_diagnostics",
]
