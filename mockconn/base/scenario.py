"""
Scenario: the ordered arena of expected actions plus the cursor.

Purpose
-------
Hold the declared actions unchanged and track consumption separately: each
action index owns a consumed-byte offset, so ``remaining(i)`` is always a
suffix of the declared payload and shrinks monotonically. Reporting code can
therefore read the original payload at any time without aliasing hazards.

Failure modes
-------------
None. Out-of-range indexes resolve to the ``END_OF_SCENARIO`` sentinel and
report an empty remaining payload. Callers own the validity of ``consume``
amounts; :class:`~mockconn.connection.MockConnection` never consumes more than
``remaining``.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .actions import END_OF_SCENARIO, SCRIPTABLE_ACTIONS, Action


class Scenario:
    """Ordered, fixed-at-install sequence of actions with a forward-only cursor."""

    def __init__(self, actions: Iterable[Action] = ()) -> None:
        self._actions: Tuple[Action, ...] = ()
        self._consumed: List[int] = []
        self.cursor = 0
        self.install(actions)

    def install(self, actions: Iterable[Action]) -> None:
        """Replace the declared actions and reset the cursor and offsets."""
        declared = tuple(actions)
        for action in declared:
            if not isinstance(action, SCRIPTABLE_ACTIONS):
                raise TypeError(f"not a scenario action: {action!r}")
        self._actions = declared
        self._consumed = [0] * len(declared)
        self.cursor = 0

    @property
    def actions(self) -> Sequence[Action]:
        return self._actions

    def __len__(self) -> int:
        return len(self._actions)

    def action_at(self, index: int) -> Action:
        if 0 <= index < len(self._actions):
            return self._actions[index]
        return END_OF_SCENARIO

    def current(self) -> Action:
        return self.action_at(self.cursor)

    def peek_next(self) -> Action:
        return self.action_at(self.cursor + 1)

    def consumed(self, index: int) -> int:
        if 0 <= index < len(self._consumed):
            return self._consumed[index]
        return 0

    def remaining(self, index: int) -> bytes:
        """Return the not-yet-consumed suffix of the action's payload."""
        return self.action_at(index).data[self.consumed(index):]

    def current_remaining(self) -> bytes:
        return self.remaining(self.cursor)

    def consume(self, amount: int) -> None:
        """Shrink the current action's remaining payload from the front."""
        self._consumed[self.cursor] += amount

    def advance(self) -> None:
        self.cursor += 1

    def at_end(self) -> bool:
        return self.cursor >= len(self._actions)


__all__ = ["Scenario"]
