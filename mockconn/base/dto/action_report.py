"""Per-action verification summary DTO."""

from __future__ import annotations

from pydantic import BaseModel

from ..actions_parts.action_kind import ActionKind


class ActionReport(BaseModel):
    """Satisfaction state of one declared action at verification time.

    Attributes:
        index: 1-based scenario index.
        kind: Action variant.
        satisfied: True when the index is behind the cursor.
        original: Declared payload (empty for terminate).
        consumed: Leading bytes of ``original`` already received or sent.
        remaining: Trailing bytes of ``original`` still outstanding.
    """

    index: int
    kind: ActionKind
    satisfied: bool
    original: bytes = b""
    consumed: bytes = b""
    remaining: bytes = b""

    @property
    def partial(self) -> bool:
        """True when the payload was drained part of the way."""
        return bool(self.consumed) and bool(self.remaining)


__all__ = ["ActionReport"]
