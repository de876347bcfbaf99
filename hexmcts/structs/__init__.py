# File: hexmcts/structs/__init__.py
"""
Module for core data structures shared by the board model, the search and
the viewer. Kept free of other package imports to avoid circular dependencies.
"""
from .cell import Cell, Winner
from .constants import (
    BOARD_SIZE,
    NUM_CELLS,
    LAST_INDEX,
    MIN_WINNING_CHAIN,
    HEX_NEIGHBOR_OFFSETS,
    NO_MOVE,
)

__all__ = [
    "Cell",
    "Winner",
    "BOARD_SIZE",
    "NUM_CELLS",
    "LAST_INDEX",
    "MIN_WINNING_CHAIN",
    "HEX_NEIGHBOR_OFFSETS",
    "NO_MOVE",
]
