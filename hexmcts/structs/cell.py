# File: hexmcts/structs/cell.py
from enum import IntEnum


class Cell(IntEnum):
    """Content of a board cell. RED moves first and joins rows, BLUE joins columns."""

    EMPTY = 0
    RED = 1
    BLUE = -1

    @property
    def opponent(self) -> "Cell":
        if self is Cell.EMPTY:
            return Cell.EMPTY
        return Cell.BLUE if self is Cell.RED else Cell.RED

    @property
    def symbol(self) -> str:
        return {Cell.EMPTY: ".", Cell.RED: "R", Cell.BLUE: "B"}[self]


class Winner(IntEnum):
    """Result of a connectivity test. Values double as the rollout outcome sign."""

    NONE = 0
    RED = 1
    BLUE = -1
