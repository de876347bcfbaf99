# File: hexmcts/utils/types.py
from typing import Callable, List, NamedTuple, Tuple

# Action representation: (row, col)
ActionType = Tuple[int, int]

# Flat action index: row * 11 + col
FlatActionType = int


class ActionPrior(NamedTuple):
    """A candidate move with its (unnormalised, positive) heuristic weight."""

    action: ActionType
    prior: float


ActionPriorList = List[ActionPrior]

# Millisecond clock, injectable so tests can drive the time budget
ClockFn = Callable[[], int]
