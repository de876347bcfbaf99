# File: hexmcts/mcts/strategy/selection.py
import logging
from typing import Callable, List, Tuple

from ..core.node import Node
from ...config import MCTSConfig
from ...errors import NoChildrenError
from ...utils.types import ActionType

logger = logging.getLogger(__name__)


def select_best_child(
    node: Node, scorer: Callable[[Node], float]
) -> Tuple[ActionType, Node]:
    """
    Arg-max over the children of `node` under `scorer`.
    Ties resolve to the first child in insertion order.
    """
    if not node.children:
        raise NoChildrenError(
            "Cannot select child from a node with no children.",
            context={"visits": node.visit_count},
        )

    items = iter(node.children.items())
    best_action, best_child = next(items)
    best_score = scorer(best_child)
    for action, child in items:
        score = scorer(child)
        if score > best_score:
            best_score = score
            best_action, best_child = action, child
    return best_action, best_child


def select_child_node(node: Node, config: MCTSConfig) -> Tuple[ActionType, Node]:
    """Search-mode selection: highest UCT score."""
    action, child = select_best_child(
        node, lambda c: c.evaluate(config.exploration_coefficient)
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"  Selected {action}: Q={child.quality:.3f}, P={child.prior:.3f}, "
            f"N={child.visit_count}, ParentN={node.visit_count}, UCT={child.uct:.4f}"
        )
    return action, child


def select_most_visited(node: Node) -> Tuple[ActionType, Node]:
    """Final-choice selection: highest visit count."""
    return select_best_child(node, lambda c: c.visit_count)


def traverse_to_leaf(root_node: Node, config: MCTSConfig) -> Tuple[Node, List[ActionType]]:
    """
    Descends from the root by UCT selection until a leaf is reached.
    Returns the leaf and the moves taken to reach it.
    """
    current_node = root_node
    path: List[ActionType] = []
    while not current_node.is_leaf():
        action, current_node = select_child_node(current_node, config)
        path.append(action)
    return current_node, path
