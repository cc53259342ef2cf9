"""Terminate action (single-class module)."""

from __future__ import annotations

from dataclasses import dataclass, field

from .action_kind import ActionKind


@dataclass(frozen=True)
class Terminate:
    """Expected ``close()`` call. Carries no payload."""

    kind: ActionKind = field(default=ActionKind.TERMINATE, init=False)

    @property
    def data(self) -> bytes:
        return b""


__all__ = ["Terminate"]
