# File: hexmcts/mcts/strategy/backpropagation.py
import logging
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.node import Node

logger = logging.getLogger(__name__)


def backpropagate_value(leaf_node: "Node", value: float, discount: float) -> None:
    """
    Propagates a rollout result from `leaf_node` up to the root.
    The leaf receives `value`; each ancestor receives the previous level's
    value negated and multiplied by `discount`. Ancestors are updated before
    their descendants, root first.
    """
    path: List["Node"] = []
    current_node: "Node" | None = leaf_node
    while current_node is not None:
        path.append(current_node)
        current_node = current_node.parent

    # Value seen by the node at depth i above the leaf: value * (-discount)^i
    values = [value]
    for _ in range(1, len(path)):
        values.append(-values[-1] * discount)

    for node, node_value in zip(reversed(path), reversed(values)):
        node.update(node_value)

    logger.debug(
        f"Backpropagated {value:.3f} over {len(path)} nodes (root received {values[-1]:.4f})"
    )
