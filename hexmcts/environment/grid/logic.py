# File: hexmcts/environment/grid/logic.py
import logging
from typing import List, Set

import numpy as np

from ...structs import Cell, Winner, constants
from ...utils.types import ActionType

logger = logging.getLogger(__name__)


def hex_neighbors(row: int, col: int) -> List[ActionType]:
    """Returns the on-board hex neighbours of (row, col)."""
    neighbors = []
    for dr, dc in constants.HEX_NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < constants.BOARD_SIZE and 0 <= nc < constants.BOARD_SIZE:
            neighbors.append((nr, nc))
    return neighbors


def is_connected(board: np.ndarray, side: Cell) -> bool:
    """
    Checks whether `side` joins its two edges.
    RED joins row 0 to the last row, BLUE joins column 0 to the last column.

    Depth-first flood fill with an explicit stack: starts from every stone on
    the side's start edge and consumes stones from the remaining set as they
    are reached, so each stone is visited at most once.
    """
    if side == Cell.EMPTY:
        raise ValueError("Connectivity is only defined for RED or BLUE")

    own = board == side
    # axis 0 (rows) for RED, axis 1 (cols) for BLUE
    axis = 0 if side == Cell.RED else 1
    edges = own if axis == 0 else own.T
    if not (edges[0].any() and edges[constants.LAST_INDEX].any()):
        return False

    rows, cols = np.nonzero(own)
    if len(rows) < constants.MIN_WINNING_CHAIN:
        return False

    stack: List[ActionType] = []
    remaining: Set[ActionType] = set()
    for r, c in zip(rows.tolist(), cols.tolist()):
        if (r, c)[axis] == 0:
            stack.append((r, c))
        else:
            remaining.add((r, c))

    if not stack:
        return False

    while stack:
        r, c = stack.pop()
        if (r, c)[axis] == constants.LAST_INDEX:
            return True
        for neighbor in hex_neighbors(r, c):
            if neighbor in remaining:
                remaining.discard(neighbor)
                stack.append(neighbor)
    return False


def find_winner(board: np.ndarray) -> Winner:
    """RED is tested first; on a legal board at most one side can be connected."""
    if is_connected(board, Cell.RED):
        return Winner.RED
    if is_connected(board, Cell.BLUE):
        return Winner.BLUE
    return Winner.NONE
