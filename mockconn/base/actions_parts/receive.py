"""Receive action (single-class module)."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..utils.payloads import to_bytes
from .action_kind import ActionKind


@dataclass(frozen=True)
class Receive:
    """Bytes the double delivers to the caller through ``recv_into``.

    One action can be drained by any number of receive calls; adjacent
    ``Receive`` actions behave as one continuous stream.

    Example::

        conn.expect(Receive(b"sunmontue"))
        conn.recv(3)  # b"sun"
        conn.recv(3)  # b"mon"
        conn.recv(3)  # b"tue"
        conn.recv(3)  # b""
    """

    data: bytes = b""
    kind: ActionKind = field(default=ActionKind.RECEIVE, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", to_bytes(self.data))


__all__ = ["Receive"]
