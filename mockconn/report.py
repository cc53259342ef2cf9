"""Human-readable rendering of verification results.

The connection only produces structured records (:class:`Diagnostic`,
:class:`ActionReport`). This module is the presentation layer that turns them
into the text handed to a reporter or shown in a pytest failure.

Summary line format::

    OK (1) recv: 'welcome from server'
    NG (2) send: 'hel' | 'lo!!'
    NG (3) close

A partially drained payload is shown as ``consumed | remaining``.
"""
from __future__ import annotations

from typing import Iterable

from .base.actions import ActionKind
from .base.dto import ActionReport, Diagnostic
from .base.utils import quote_bytes

SUMMARY_HEADER = "Mock Socket Scenario Summary:"
OK_LABEL = "OK"
NG_LABEL = "NG"

_OPERATION_LABELS = {
    ActionKind.RECEIVE: "recv",
    ActionKind.SEND: "send",
    ActionKind.TERMINATE: "close",
}


def render_payload(report: ActionReport) -> str:
    if report.partial:
        return f"{quote_bytes(report.consumed)} | {quote_bytes(report.remaining)}"
    return quote_bytes(report.original)


def render_action(report: ActionReport) -> str:
    label = OK_LABEL if report.satisfied else NG_LABEL
    operation = _OPERATION_LABELS.get(report.kind, report.kind.value)
    line = f"{label} ({report.index}) {operation}"
    if report.kind is ActionKind.TERMINATE:
        return line
    return f"{line}: {render_payload(report)}"


def render_summary(reports: Iterable[ActionReport]) -> str:
    """Render the per-action summary block, one line per declared action."""
    lines = [SUMMARY_HEADER]
    lines.extend(render_action(r) for r in reports)
    return "\n".join(lines)


def render_diagnostics(diagnostics: Iterable[Diagnostic]) -> str:
    """Render diagnostics as a numbered list."""
    return "\n".join(f"{n}. {d}" for n, d in enumerate(diagnostics, start=1))


__all__ = [
    "SUMMARY_HEADER",
    "render_payload",
    "render_action",
    "render_summary",
    "render_diagnostics",
]
