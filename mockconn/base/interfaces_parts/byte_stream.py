"""ByteStream Protocol (single-class module).

The socket-like surface code under test talks to. ``MockConnection``
satisfies it so it can be passed wherever a connected socket is expected.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class ByteStream(Protocol):
    """Bidirectional, ordered byte-stream endpoint."""

    def recv_into(self, buffer: Any) -> int:  # pragma: no cover - interface
        ...

    def recv(self, bufsize: int) -> bytes:  # pragma: no cover - interface
        ...

    def send(self, data: bytes) -> int:  # pragma: no cover - interface
        ...

    def sendall(self, data: bytes) -> None:  # pragma: no cover - interface
        ...

    def close(self) -> None:  # pragma: no cover - interface
        ...

    def getsockname(self) -> Tuple[str, int]:  # pragma: no cover - interface
        ...

    def getpeername(self) -> Tuple[str, int]:  # pragma: no cover - interface
        ...

    def settimeout(self, value: Optional[float]) -> None:  # pragma: no cover - interface
        ...
