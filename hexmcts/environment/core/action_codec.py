# File: hexmcts/environment/core/action_codec.py
from ...structs import constants
from ...utils.types import ActionType, FlatActionType


def is_on_board(row: int, col: int) -> bool:
    """True if (row, col) lies inside the board."""
    return 0 <= row < constants.BOARD_SIZE and 0 <= col < constants.BOARD_SIZE


def encode_action(row: int, col: int) -> FlatActionType:
    """Encodes a (row, col) move into a single flat index."""
    if not (0 <= row < constants.BOARD_SIZE):
        raise ValueError(f"Invalid row index: {row}, must be < {constants.BOARD_SIZE}")
    if not (0 <= col < constants.BOARD_SIZE):
        raise ValueError(
            f"Invalid column index: {col}, must be < {constants.BOARD_SIZE}"
        )

    # Action = Row * (NumCols) + Col
    return row * constants.BOARD_SIZE + col


def decode_action(action_index: FlatActionType) -> ActionType:
    """Decodes a flat index into (row, col)."""
    if not (0 <= action_index < constants.NUM_CELLS):
        raise ValueError(
            f"Invalid action index: {action_index}, must be < {constants.NUM_CELLS}"
        )
    return action_index // constants.BOARD_SIZE, action_index % constants.BOARD_SIZE
