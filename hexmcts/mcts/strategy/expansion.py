# File: hexmcts/mcts/strategy/expansion.py
import logging
from typing import List

from ..core.node import Node
from ...environment import GameState
from ...utils.types import ActionPrior

logger = logging.getLogger(__name__)


def expand_node_with_candidates(node: Node, state: GameState) -> int:
    """
    Expands a node with the heuristic candidates of `state`, the position the
    node represents. Returns the number of children created.
    """
    action_priors: List[ActionPrior] = state.candidate_moves()
    if not action_priors:
        # Only on a full board; the rollout scores it directly
        logger.debug(f"No candidates to expand at {state.total_pieces} pieces.")
        return 0
    return node.expand(action_priors)
