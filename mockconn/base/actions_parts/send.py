"""Send action (single-class module)."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..utils.payloads import to_bytes
from .action_kind import ActionKind


@dataclass(frozen=True)
class Send:
    """Bytes the caller is expected to pass to ``send``.

    The expected bytes may arrive over several calls as long as each call is a
    matching continuation:

        conn.expect(Send(b"sunmontue"))
        conn.send(b"sun")  # ok
        conn.send(b"mon")  # ok
        conn.send(b"tue")  # ok, action satisfied
    """

    data: bytes = b""
    kind: ActionKind = field(default=ActionKind.SEND, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", to_bytes(self.data))


__all__ = ["Send"]
