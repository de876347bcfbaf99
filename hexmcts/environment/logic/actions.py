# File: hexmcts/environment/logic/actions.py
import logging
from enum import Enum
from functools import lru_cache
from typing import List, Optional, Tuple, TYPE_CHECKING

import numpy as np

from ...structs import Cell, constants
from ...utils.types import ActionPrior, ActionType

if TYPE_CHECKING:
    from ..core.game_state import GameState

logger = logging.getLogger(__name__)


class CandidateSlice(Enum):
    """Which part of the row-major candidate list a greedy pick may use."""

    ALL = "all"
    FIRST_HALF = "first_half"
    SECOND_HALF = "second_half"


def _window_counts(stones: np.ndarray) -> np.ndarray:
    """
    Number of set cells in the 3x3 window around every cell, over the last
    two axes. Cells beyond the edge count as empty.
    """
    vertical = stones.copy()
    vertical[..., 1:, :] += stones[..., :-1, :]
    vertical[..., :-1, :] += stones[..., 1:, :]
    counts = vertical.copy()
    counts[..., :, 1:] += vertical[..., :, :-1]
    counts[..., :, :-1] += vertical[..., :, 1:]
    return counts


@lru_cache(maxsize=None)
def _band_mask(margin: int) -> np.ndarray:
    size = constants.BOARD_SIZE
    mask = np.zeros((size, size), dtype=bool)
    mask[margin : size - margin, margin : size - margin] = True
    mask.setflags(write=False)
    return mask


@lru_cache(maxsize=None)
def _center_weights(center_min: int, center_max: int, multiplier: float) -> np.ndarray:
    size = constants.BOARD_SIZE
    weights = np.ones((size, size), dtype=np.float64)
    weights[center_min : center_max + 1, center_min : center_max + 1] = multiplier
    weights.setflags(write=False)
    return weights


def compute_prior_weights(state: "GameState") -> np.ndarray:
    """
    Heuristic weight of every cell as if it were empty. Factors compose
    multiplicatively on a base weight of 1.0:
    - contact: both sides in the 1-ring and one of them with at least two stones
    - dense contact: at least DENSE_CONTACT_THRESHOLD stones in the 1-ring
    - center: row and col inside [CENTER_MIN, CENTER_MAX]
    """
    cfg = state.env_config
    board = state.board
    stones = np.stack((board == Cell.RED, board == Cell.BLUE)).astype(np.int8)
    red, blue = _window_counts(stones)
    total = red + blue

    # Both sides present and three stones in all means one side has a pair
    contact = (np.minimum(red, blue) >= 1) & (total >= 3)
    dense = total >= cfg.DENSE_CONTACT_THRESHOLD

    weights = _center_weights(cfg.CENTER_MIN, cfg.CENTER_MAX, cfg.CENTER_MULTIPLIER) * np.where(
        contact, cfg.CONTACT_MULTIPLIER, 1.0
    )
    weights *= np.where(dense, cfg.DENSE_CONTACT_MULTIPLIER, 1.0)
    return weights


def _candidate_cells(state: "GameState") -> np.ndarray:
    """Flat indices of the empty cells inside the current border band, row-major."""
    margin = state.env_config.border_margin(state.total_pieces)
    return np.flatnonzero(_band_mask(margin) & (state.board == Cell.EMPTY))


def _forced_opening(
    state: "GameState",
    force_opening: Optional[bool],
    opening_move: Optional[Tuple[int, int]],
) -> Optional[ActionType]:
    cfg = state.env_config
    if force_opening is None:
        force_opening = cfg.FORCE_OPENING_MOVE
    if state.total_pieces != 0 or not force_opening:
        return None
    if opening_move is None:
        opening_move = cfg.OPENING_MOVE
    return int(opening_move[0]), int(opening_move[1])


def get_candidate_moves(
    state: "GameState",
    force_opening: Optional[bool] = None,
    opening_move: Optional[Tuple[int, int]] = None,
) -> List[ActionPrior]:
    """
    Returns the candidate moves for the side to move with their heuristic
    weights, enumerated row-major.
    On an empty board with the forced opening enabled, the only candidate
    is the opening move.
    """
    opening = _forced_opening(state, force_opening, opening_move)
    if opening is not None:
        return [ActionPrior(opening, 1.0)]

    cells = _candidate_cells(state)
    if len(cells) == 0:
        if not state.is_full():
            logger.warning(
                f"No candidates inside the border band with {state.total_pieces} pieces placed."
            )
        return []

    weights = compute_prior_weights(state).ravel()[cells]
    rows, cols = np.divmod(cells, constants.BOARD_SIZE)
    return [
        ActionPrior((r, c), w)
        for r, c, w in zip(rows.tolist(), cols.tolist(), weights.tolist())
    ]


def greedy_move(
    state: "GameState", part: CandidateSlice = CandidateSlice.ALL
) -> Optional[ActionType]:
    """
    Highest-weighted candidate, computed on arrays without building the
    candidate list. `part` restricts the pick to the first or second half of
    the row-major candidate list; a single candidate always counts as the
    second half. Ties go to the earliest candidate. Returns None when there
    is no candidate.
    """
    opening = _forced_opening(state, None, None)
    if opening is not None:
        return opening

    cells = _candidate_cells(state)
    count = len(cells)
    if count == 0:
        return None
    mid = count // 2
    if part is CandidateSlice.FIRST_HALF and count > 1:
        cells = cells[:mid]
    elif part is not CandidateSlice.ALL:
        cells = cells[mid:]

    weights = compute_prior_weights(state).ravel()[cells]
    # argmax returns the first maximum
    row, col = divmod(int(cells[int(np.argmax(weights))]), constants.BOARD_SIZE)
    return row, col
