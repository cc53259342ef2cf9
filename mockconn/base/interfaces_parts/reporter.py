"""Reporter Protocol (single-class module).

Test-reporting handle attached to a mock connection. It receives each
diagnostic the moment it is recorded and the rendered scenario summary when
``verify()`` runs.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """Sink for immediate failure notices and the final summary."""

    def error(self, message: str) -> None:  # pragma: no cover - interface
        """Report one diagnostic; implementations may mark the test failed."""
        ...

    def log(self, message: str) -> None:  # pragma: no cover - interface
        """Report informational text such as the scenario summary."""
        ...
