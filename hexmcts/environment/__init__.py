# File: hexmcts/environment/__init__.py
"""
Environment module defining the Hex board, move encoding, win detection and
the candidate-move heuristic used by the search.
"""
# Core components
from .core.game_state import GameState
from .core.action_codec import encode_action, decode_action, is_on_board

# Grid connectivity
from .grid import logic as GridLogic  # Expose grid logic functions via a namespace

# Move generation
from .logic.actions import (
    CandidateSlice,
    compute_prior_weights,
    get_candidate_moves,
    greedy_move,
)

# Configuration (often needed alongside environment components)
from ..config import EnvConfig


__all__ = [
    # Core
    "GameState",
    "encode_action",
    "decode_action",
    "is_on_board",
    # Grid
    "GridLogic",
    # Logic
    "get_candidate_moves",
    "compute_prior_weights",
    "greedy_move",
    "CandidateSlice",
    # Config
    "EnvConfig",
]
