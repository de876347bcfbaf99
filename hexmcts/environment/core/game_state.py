# File: hexmcts/environment/core/game_state.py
from typing import Iterable, List, Optional, Tuple
import numpy as np
import logging

from ...config import EnvConfig
from ...errors import InvalidMoveError
from ...structs import Cell, Winner, constants
from ...utils.types import ActionPrior, ActionType, FlatActionType

from ..grid import logic as GridLogic
from ..logic.actions import get_candidate_moves
from .action_codec import decode_action, is_on_board

logger = logging.getLogger(__name__)


class GameState:
    """
    Mutable 11x11 Hex position. RED moves first and connects rows 0 and 10,
    BLUE connects columns 0 and 10. The side to move is derived from the
    piece count, never stored.
    """

    def __init__(self, config: Optional[EnvConfig] = None):
        self.env_config = config if config else EnvConfig()
        self.board: np.ndarray = np.zeros(
            (constants.BOARD_SIZE, constants.BOARD_SIZE), dtype=np.int8
        )
        self.total_pieces: int = 0

    @classmethod
    def from_moves(
        cls, moves: Iterable[ActionType], config: Optional[EnvConfig] = None
    ) -> "GameState":
        """
        Rebuilds a position by replaying moves from the empty board.
        The (-1, -1) 'no move' marker is skipped; any other move that cannot
        be played raises InvalidMoveError.
        """
        state = cls(config)
        for index, move in enumerate(moves):
            move = (int(move[0]), int(move[1]))
            if move == constants.NO_MOVE:
                logger.debug(f"Skipping 'no move' marker at position {index}.")
                continue
            if not state.apply_move(move):
                raise InvalidMoveError(
                    "Move in history is off the board or on an occupied cell.",
                    context={"action": move, "index": index},
                )
        return state

    def reset(self):
        """Clears the board."""
        self.board.fill(Cell.EMPTY)
        self.total_pieces = 0

    def red_plays_next(self) -> bool:
        return self.total_pieces % 2 == 0

    def red_played_last(self) -> bool:
        return self.total_pieces % 2 == 1

    def current_player(self) -> Cell:
        """The side whose turn it is."""
        return Cell.RED if self.red_plays_next() else Cell.BLUE

    def is_legal(self, action: ActionType) -> bool:
        row, col = action
        return is_on_board(row, col) and self.board[row, col] == Cell.EMPTY

    def apply_move(self, action: ActionType) -> bool:
        """
        Places the mover's stone at `action`.
        Returns False and leaves the state untouched if the cell is off the
        board or already occupied.
        """
        if not self.is_legal(action):
            return False
        row, col = action
        self.board[row, col] = self.current_player()
        self.total_pieces += 1
        return True

    def apply_flat_move(self, action_index: FlatActionType) -> bool:
        """Same as apply_move, for a flat action index."""
        try:
            action = decode_action(action_index)
        except ValueError:
            return False
        return self.apply_move(action)

    def is_full(self) -> bool:
        return self.total_pieces == constants.NUM_CELLS

    def is_empty(self) -> bool:
        return self.total_pieces == 0

    def check_winner(self) -> Winner:
        """Returns the side that connected its edges, or Winner.NONE."""
        return GridLogic.find_winner(self.board)

    def last_player_won(self) -> bool:
        """Connectivity test for the side that made the last move only."""
        if self.total_pieces == 0:
            return False
        last = Cell.RED if self.red_played_last() else Cell.BLUE
        return GridLogic.is_connected(self.board, last)

    def candidate_moves(
        self,
        force_opening: Optional[bool] = None,
        opening_move: Optional[Tuple[int, int]] = None,
    ) -> List[ActionPrior]:
        """Heuristically weighted moves for the side to move."""
        return get_candidate_moves(self, force_opening, opening_move)

    def copy(self) -> "GameState":
        """Creates an independent copy for simulations (e.g., MCTS)."""
        new_state = GameState.__new__(GameState)
        new_state.env_config = self.env_config
        new_state.board = self.board.copy()
        new_state.total_pieces = self.total_pieces
        return new_state

    def board_string(self) -> str:
        """Rhombus rendering: each row is shifted right to show the hex skew."""
        lines = []
        for r in range(constants.BOARD_SIZE):
            cells = " ".join(Cell(int(v)).symbol for v in self.board[r])
            lines.append(" " * r + cells)
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.total_pieces == other.total_pieces and bool(
            np.array_equal(self.board, other.board)
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        to_move = self.current_player().name
        return f"GameState(Pieces:{self.total_pieces}, ToMove:{to_move}, Winner:{self.check_winner().name})\n{self.board_string()}"
