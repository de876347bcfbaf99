# File: hexmcts/mcts/__init__.py
"""
Monte Carlo Tree Search (MCTS) module.
Provides the search tree, the greedy rollout policies and the time-boxed
search controller.
"""

# Core MCTS components
from .core.node import Node
from .core.search import SearchController
from .core.types import SearchPhase, SearchStats

from ..config import MCTSConfig

# Rollout strategies
from .strategy.rollout import branching_rollout, single_rollout, run_rollout

__all__ = [
    # Core
    "Node",
    "SearchController",
    "SearchPhase",
    "SearchStats",
    "MCTSConfig",
    # Strategy
    "branching_rollout",
    "single_rollout",
    "run_rollout",
]
