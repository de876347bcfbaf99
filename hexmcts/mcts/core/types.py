# File: hexmcts/mcts/core/types.py
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field


class SearchPhase(str, Enum):
    """Lifecycle of one move decision."""

    IDLE = "idle"
    SEARCHING = "searching"
    DONE = "done"


class SearchStats(BaseModel):
    """Pydantic model summarising one call to get_next_move."""

    playouts: int = Field(..., ge=0)
    rollouts: int = Field(..., ge=0)  # A playout may produce several (forks)
    batches: int = Field(..., ge=0)
    elapsed_ms: int = Field(..., ge=0)
    budget_ms: float = Field(..., gt=0)
    root_visits: int = Field(..., ge=0)
    chosen_move: Optional[Tuple[int, int]] = None
    chosen_visits: int = Field(0, ge=0)
    chosen_quality: float = 0.0
