# File: hexmcts/mcts/core/node.py
from __future__ import annotations  # For type hinting Node within Node
import logging
import math
from typing import Callable, Dict, Iterable, Optional, Tuple

from ...errors import InvalidTreeError
from ...utils.types import ActionPrior, ActionType

logger = logging.getLogger(__name__)


class Node:
    """
    Represents a node in the Monte Carlo Search Tree.
    The node belongs to the side whose move produced it; children belong to
    the opponent. The tree holds statistics only, positions are replayed on
    a board copy during descent.
    """

    def __init__(
        self,
        parent: Optional[Node] = None,
        prior: float = 1.0,  # Heuristic weight of the move *leading* to this node
        is_red: bool = False,  # Side that made the move leading to this node
    ):
        self.parent = parent  # Non-owning; cleared when promoted to root
        self.children: Dict[ActionType, Node] = {}

        self.visit_count: int = 0
        self.quality: float = 0.0  # Running mean of backpropagated results
        self.uct: float = 0.0  # Last computed exploration term
        self.prior = prior
        self.is_red = is_red

    def is_leaf(self) -> bool:
        return not self.children

    def is_root(self) -> bool:
        return self.parent is None

    def expand(self, action_priors: Iterable[ActionPrior]) -> int:
        """
        Adds one child per (action, prior) not already present, owned by the
        opposite side. Existing children and their statistics are kept.
        Returns the number of children created.
        """
        created = 0
        for action, prior in action_priors:
            if action in self.children:
                continue
            self.children[action] = Node(parent=self, prior=prior, is_red=not self.is_red)
            created += 1
        return created

    def evaluate(self, exploration_coefficient: float) -> float:
        """
        UCT score with a heuristic prior:
        quality + prior * c * sqrt(2 * ln(N_parent)) / (1 + N).
        """
        if self.parent is None:
            raise InvalidTreeError("Cannot evaluate the root node.")
        parent_visits = max(1, self.parent.visit_count)
        self.uct = (
            self.prior
            * exploration_coefficient
            * math.sqrt(2.0 * math.log(parent_visits))
            / (1 + self.visit_count)
        )
        return self.quality + self.uct

    def select(
        self, exploration_coefficient: float, for_final_choice: bool = False
    ) -> Tuple[ActionType, Node]:
        """
        Returns (action, child): highest evaluate() during search, highest
        visit count for the final move choice.
        """
        # Local import: the strategy module imports Node
        from ..strategy.selection import select_best_child

        scorer: Callable[[Node], float]
        if for_final_choice:
            scorer = lambda child: child.visit_count  # noqa: E731
        else:
            scorer = lambda child: child.evaluate(exploration_coefficient)  # noqa: E731
        return select_best_child(self, scorer)

    def update(self, result: float) -> None:
        """Incremental mean update."""
        self.visit_count += 1
        self.quality += (result - self.quality) / self.visit_count

    def backpropagate(self, result: float, discount: float = 0.95) -> None:
        """
        Updates ancestors first, each level seeing the result negated and
        scaled by `discount`, then updates this node with the raw result.
        """
        # Local import: the strategy module imports Node
        from ..strategy.backpropagation import backpropagate_value

        backpropagate_value(self, result, discount)

    def __repr__(self) -> str:
        side = "RED" if self.is_red else "BLUE"
        return (
            f"Node(Side={side}, Visits={self.visit_count}, "
            f"Quality={self.quality:.3f}, Prior={self.prior:.3f}, "
            f"Children={len(self.children)})"
        )
