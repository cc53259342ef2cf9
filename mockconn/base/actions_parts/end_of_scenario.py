"""End-of-scenario sentinel (single-class module)."""

from __future__ import annotations

from dataclasses import dataclass, field

from .action_kind import ActionKind


@dataclass(frozen=True)
class EndOfScenario:
    """Returned for any cursor position past the last declared action.

    Test authors never build this directly; it has no diagnostic obligations.
    """

    kind: ActionKind = field(default=ActionKind.END_OF_SCENARIO, init=False)

    @property
    def data(self) -> bytes:
        return b""


END_OF_SCENARIO = EndOfScenario()


__all__ = ["EndOfScenario", "END_OF_SCENARIO"]
