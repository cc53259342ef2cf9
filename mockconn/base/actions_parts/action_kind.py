"""
Scenario action kinds.

``ActionKind`` tags the closed set of action variants. ``END_OF_SCENARIO`` is
internal: it is what the scenario hands back once the cursor has moved past
the last declared action.
"""
from __future__ import annotations

from enum import Enum


class ActionKind(str, Enum):
    """Tag for each action variant."""

    RECEIVE = "receive"
    SEND = "send"
    TERMINATE = "terminate"
    END_OF_SCENARIO = "end_of_scenario"


__all__ = ["ActionKind"]
