"""Action variants split into single-class modules.

``mockconn.base.actions`` re-exports these under a stable import path.
"""

from .action_kind import ActionKind
from .receive import Receive
from .send import Send
from .terminate import Terminate
from .end_of_scenario import END_OF_SCENARIO, EndOfScenario

__all__ = [
    "ActionKind",
    "Receive",
    "Send",
    "Terminate",
    "EndOfScenario",
    "END_OF_SCENARIO",
]
