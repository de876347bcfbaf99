# File: hexmcts/mcts/core/search.py
import logging
from typing import Optional

from ..strategy import selection, expansion, rollout
from .node import Node
from .types import SearchPhase, SearchStats
from ...config import MCTSConfig
from ...environment import GameState
from ...errors import HexMCTSError, InvalidMoveError, InvalidTreeError
from ...utils.helpers import current_time_millis
from ...utils.types import ActionType, ClockFn

logger = logging.getLogger(__name__)


class SearchController:
    """
    Owns the real game position and the search tree rooted at it.
    The root always belongs to the side that moved last, so its children are
    moves for the side to move. The tree is kept across moves: advancing with
    an explored move promotes that subtree to be the new root.
    """

    def __init__(
        self,
        config: Optional[MCTSConfig] = None,
        state: Optional[GameState] = None,
        clock: Optional[ClockFn] = None,
    ):
        self.config = config if config else MCTSConfig()
        self._clock: ClockFn = clock if clock else current_time_millis
        self.state: GameState = state.copy() if state is not None else GameState()
        self.root: Node = self._new_root()
        self.phase: SearchPhase = SearchPhase.IDLE
        self.rollout_count: int = 0  # Completed rollouts over the controller's lifetime
        self.last_stats: Optional[SearchStats] = None

    def _new_root(self) -> Node:
        return Node(
            parent=None,
            prior=self.config.root_prior,
            is_red=self.state.red_played_last(),
        )

    def set_state(self, state: GameState) -> None:
        """Installs a position and discards the tree."""
        self.state = state.copy()
        self.root = self._new_root()
        self.phase = SearchPhase.IDLE

    def playout(self, state_copy: GameState) -> int:
        """
        One MCTS iteration on `state_copy`, a private copy of the real position:
        descend to a leaf, expand it with heuristic priors, roll out from it.
        Returns the number of rollout results backpropagated.
        """
        leaf, path = selection.traverse_to_leaf(self.root, self.config)
        for action in path:
            if not state_copy.apply_move(action):
                raise InvalidTreeError(
                    "Tree move is not playable on the playout board.",
                    context={"action": action, "depth": len(path)},
                )
        expansion.expand_node_with_candidates(leaf, state_copy)
        produced = rollout.run_rollout(leaf, state_copy, self.config)
        self.rollout_count += produced
        return produced

    def get_next_move(
        self, start_time_ms: int, time_multiplier: float = 1.0
    ) -> ActionType:
        """
        Runs playouts in batches until `time_budget_fraction` of the budget
        (time_limit_ms * time_multiplier, counted from `start_time_ms`) is
        used, then returns the most visited root move. The clock is only
        read between batches, and at least one batch always runs.
        """
        cfg = self.config
        budget_ms = cfg.time_limit_ms * time_multiplier
        deadline_ms = budget_ms * cfg.time_budget_fraction

        self.phase = SearchPhase.SEARCHING
        playouts = 0
        rollouts = 0
        batches = 0
        elapsed_ms = 0
        try:
            while batches == 0 or elapsed_ms < deadline_ms:
                for _ in range(cfg.playout_batch_size):
                    rollouts += self.playout(self.state.copy())
                    playouts += 1
                batches += 1
                elapsed_ms = self._clock() - start_time_ms

            action, child = selection.select_most_visited(self.root)
        except HexMCTSError:
            self.phase = SearchPhase.IDLE
            raise

        self.phase = SearchPhase.DONE
        self.last_stats = SearchStats(
            playouts=playouts,
            rollouts=rollouts,
            batches=batches,
            elapsed_ms=max(0, elapsed_ms),
            budget_ms=budget_ms,
            root_visits=self.root.visit_count,
            chosen_move=action,
            chosen_visits=child.visit_count,
            chosen_quality=child.quality,
        )
        logger.info(
            f"Search finished: {playouts} playouts ({rollouts} rollouts) in {batches} batches, "
            f"{elapsed_ms}ms of {budget_ms:.0f}ms. Move {action}: "
            f"Visits={child.visit_count}, Q={child.quality:.3f}"
        )
        return action

    def advance_with_move(self, action: ActionType) -> None:
        """
        Plays `action` on the real board (either side's move) and re-roots
        the tree. An explored move keeps its subtree statistics; an
        unexplored one starts a fresh tree.
        """
        action = (int(action[0]), int(action[1]))
        if not self.state.is_legal(action):
            raise InvalidMoveError(
                "Move is off the board or on an occupied cell.",
                context={"action": action, "pieces": self.state.total_pieces},
            )

        child = self.root.children.get(action)
        self.state.apply_move(action)
        if child is not None:
            child.parent = None
            self.root = child
            logger.debug(
                f"Re-rooted on {action}: kept {child.visit_count} visits, {len(child.children)} children."
            )
        else:
            self.root = self._new_root()
            logger.debug(f"Move {action} was not explored; starting a fresh tree.")
        self.phase = SearchPhase.IDLE
