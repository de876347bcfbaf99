"""
Shared pytest fixtures for HexMCTS tests.

Game state fixtures are function-scoped to keep tests isolated. Search tests
use a fake millisecond clock so the time budget is deterministic.
"""

from typing import Iterable, Tuple

import numpy as np
import pytest

from hexmcts.config import EnvConfig, MCTSConfig
from hexmcts.environment import GameState
from hexmcts.structs import Cell


class FakeClock:
    """Millisecond clock advancing by a fixed step on every read."""

    def __init__(self, start: int = 0, step: int = 10):
        self.now = start
        self.step = step
        self.reads = 0

    def __call__(self) -> int:
        self.now += self.step
        self.reads += 1
        return self.now


def place_stones(
    state: GameState,
    red: Iterable[Tuple[int, int]] = (),
    blue: Iterable[Tuple[int, int]] = (),
) -> GameState:
    """Writes stones straight onto the board, bypassing turn order."""
    for r, c in red:
        state.board[r, c] = Cell.RED
    for r, c in blue:
        state.board[r, c] = Cell.BLUE
    state.total_pieces = int(np.count_nonzero(state.board))
    return state


@pytest.fixture
def env_config() -> EnvConfig:
    return EnvConfig()


@pytest.fixture
def empty_state(env_config) -> GameState:
    return GameState(env_config)


@pytest.fixture
def fast_mcts_config() -> MCTSConfig:
    """Small batches so a single search finishes quickly."""
    return MCTSConfig(time_limit_ms=100, playout_batch_size=4)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def midgame_state(env_config) -> GameState:
    """A legal position after 6 moves, RED to move."""
    return GameState.from_moves(
        [(5, 5), (4, 6), (6, 4), (5, 6), (3, 6), (6, 5)], env_config
    )
