# File: hexmcts/structs/constants.py
from typing import List, Tuple

BOARD_SIZE: int = 11
NUM_CELLS: int = BOARD_SIZE * BOARD_SIZE
LAST_INDEX: int = BOARD_SIZE - 1

# Minimum number of stones a side needs to span the board
MIN_WINNING_CHAIN: int = BOARD_SIZE

# Hex adjacency on the rhombus: same row +-1 col, same col +-1 row,
# plus the (row-1, col+1) / (row+1, col-1) diagonal.
HEX_NEIGHBOR_OFFSETS: List[Tuple[int, int]] = [
    (0, -1),
    (0, 1),
    (-1, 0),
    (-1, 1),
    (1, 0),
    (1, -1),
]

# Wire marker for "no move" (engine plays first)
NO_MOVE: Tuple[int, int] = (-1, -1)
