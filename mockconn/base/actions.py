"""
Scenario actions: the closed set of expected operations.

An ``Action`` is exactly one of :class:`Receive`, :class:`Send`,
:class:`Terminate` or the internal :class:`EndOfScenario` sentinel. Actions are
immutable; how much of an action has been consumed is tracked by
:class:`~mockconn.base.scenario.Scenario`, never by the action itself.
"""
from __future__ import annotations

from typing import Union

from .actions_parts import (
    END_OF_SCENARIO,
    ActionKind,
    EndOfScenario,
    Receive,
    Send,
    Terminate,
)

Action = Union[Receive, Send, Terminate, EndOfScenario]

# Variants a test author may declare in a scenario.
SCRIPTABLE_ACTIONS = (Receive, Send, Terminate)


__all__ = [
    "Action",
    "ActionKind",
    "Receive",
    "Send",
    "Terminate",
    "EndOfScenario",
    "END_OF_SCENARIO",
    "SCRIPTABLE_ACTIONS",
]
