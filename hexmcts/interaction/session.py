# File: hexmcts/interaction/session.py
import logging
from typing import Optional

from ..environment import GameState
from ..errors import InvalidMoveError
from ..mcts import SearchController, SearchStats
from ..structs import Cell, Winner
from ..utils.helpers import current_time_millis
from ..utils.types import ActionType

logger = logging.getLogger(__name__)


class PlaySession:
    """
    Game in progress in the viewer: the controller holding the real position,
    plus what the screen needs (hover, last move, last search summary).
    """

    def __init__(self, controller: SearchController, human_side: Cell = Cell.RED):
        if human_side == Cell.EMPTY:
            raise ValueError("human_side must be RED or BLUE")
        self.controller = controller
        self.human_side = human_side
        self.hover_pos: Optional[ActionType] = None
        self.hover_prior: Optional[float] = None
        self.last_move: Optional[ActionType] = None
        self.last_stats: Optional[SearchStats] = None
        self.winner: Winner = Winner.NONE

    @property
    def state(self) -> GameState:
        return self.controller.state

    def is_over(self) -> bool:
        return self.winner != Winner.NONE or self.state.is_full()

    def is_engine_turn(self) -> bool:
        return not self.is_over() and self.state.current_player() != self.human_side

    def play(self, action: ActionType) -> bool:
        """Applies a move for the side to move. Returns False if it was rejected."""
        if self.is_over():
            logger.info("Game is over, ignoring move.")
            return False
        mover = self.state.current_player()
        try:
            self.controller.advance_with_move(action)
        except InvalidMoveError as e:
            logger.info(f"Rejected move: {e}")
            return False
        self.last_move = action
        self.winner = self.state.check_winner()
        logger.info(f"{mover.name} played {action}.")
        if self.winner != Winner.NONE:
            logger.info(f"{self.winner.name} wins after {self.state.total_pieces} stones.")
        return True

    def play_engine_move(self) -> ActionType:
        """Searches from the current position and plays the result."""
        action = self.controller.get_next_move(current_time_millis())
        self.last_stats = self.controller.last_stats
        self.play(action)
        return action

    def reset(self) -> None:
        self.controller.set_state(GameState(self.state.env_config))
        self.hover_pos = None
        self.hover_prior = None
        self.last_move = None
        self.last_stats = None
        self.winner = Winner.NONE
        logger.info("Board reset.")
