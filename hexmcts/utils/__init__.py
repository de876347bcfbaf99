# File: hexmcts/utils/__init__.py
from .helpers import current_time_millis, format_millis
from .types import (
    ActionType,
    FlatActionType,
    ActionPrior,
    ActionPriorList,
    ClockFn,
)

__all__ = [
    # helpers
    "current_time_millis",
    "format_millis",
    # types
    "ActionType",
    "FlatActionType",
    "ActionPrior",
    "ActionPriorList",
    "ClockFn",
]
