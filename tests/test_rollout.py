"""Tests for the greedy rollout policies."""

import numpy as np
import pytest

from hexmcts.config import MCTSConfig
from hexmcts.environment import GameState
from hexmcts.errors import RolloutError
from hexmcts.mcts import Node, branching_rollout, run_rollout, single_rollout

from conftest import place_stones


@pytest.fixture
def red_won_state(empty_state) -> GameState:
    """RED has already joined its edges; BLUE has scattered stones."""
    return place_stones(
        empty_state,
        red=[(r, 5) for r in range(11)],
        blue=[(r, 0) for r in range(10)],
    )


class TestEarlyTermination:
    def test_branching_reward_for_immediate_win(self, red_won_state):
        node = Node(is_red=True)
        produced = branching_rollout(node, red_won_state, MCTSConfig())
        assert produced == 1
        assert node.visit_count == 1
        assert node.quality == pytest.approx(16.0)

    def test_branching_reward_sign_for_losing_side(self, red_won_state):
        node = Node(is_red=False)
        branching_rollout(node, red_won_state, MCTSConfig())
        assert node.quality == pytest.approx(-16.0)

    def test_branching_early_reward_scales_with_ply(self, red_won_state):
        node = Node(is_red=True)
        branching_rollout(node, red_won_state, MCTSConfig(), counter=3)
        assert node.quality == pytest.approx(16.0 / 4)

    def test_single_reward_for_immediate_win(self, red_won_state):
        node = Node(is_red=True)
        produced = single_rollout(node, red_won_state, MCTSConfig())
        assert produced == 1
        assert node.quality == pytest.approx(10.0)


class TestFullGame:
    def test_branching_forks_and_backpropagates_each_line(self, midgame_state):
        node = Node(is_red=midgame_state.red_played_last())
        produced = branching_rollout(node, midgame_state.copy(), MCTSConfig())
        # One fork at ply 0, at most one more per 32 plies on the main line
        assert 2 <= produced <= 5
        assert node.visit_count == produced

    def test_rollouts_are_deterministic(self, midgame_state):
        results = []
        for _ in range(2):
            node = Node(is_red=True)
            branching_rollout(node, midgame_state.copy(), MCTSConfig())
            results.append((node.visit_count, node.quality))
        assert results[0][0] == results[1][0]
        assert results[0][1] == pytest.approx(results[1][1])

    def test_single_rollout_plays_to_a_result(self, midgame_state):
        node = Node(is_red=False)
        state = midgame_state.copy()
        assert single_rollout(node, state, MCTSConfig()) == 1
        assert node.visit_count == 1
        assert state.check_winner() != 0
        assert abs(node.quality) > 0

    def test_rollout_consumes_only_its_own_state(self, midgame_state):
        original = midgame_state.copy()
        branching_rollout(Node(), midgame_state.copy(), MCTSConfig())
        assert midgame_state == original

    def test_run_rollout_dispatches_on_policy(self, red_won_state):
        node = Node(is_red=True)
        run_rollout(node, red_won_state.copy(), MCTSConfig(rollout_policy="single"))
        assert node.quality == pytest.approx(10.0)
        node = Node(is_red=True)
        run_rollout(node, red_won_state.copy(), MCTSConfig(rollout_policy="branching"))
        assert node.quality == pytest.approx(16.0)


class TestFullBoardWithoutWinner:
    @pytest.fixture
    def broken_full_state(self, empty_state) -> GameState:
        # Counter claims a full board while the grid is empty
        empty_state.board = np.zeros_like(empty_state.board)
        empty_state.total_pieces = 121
        return empty_state

    def test_branching_raises(self, broken_full_state):
        with pytest.raises(RolloutError):
            branching_rollout(Node(), broken_full_state, MCTSConfig())

    def test_single_raises(self, broken_full_state):
        with pytest.raises(RolloutError):
            single_rollout(Node(), broken_full_state, MCTSConfig())


def _first_best(candidates):
    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate.prior > best.prior:
            best = candidate
    return best.action


class TestForkAndCheckSchedule:
    def test_fork_ply_splits_the_candidate_list(self, midgame_state, monkeypatch):
        candidates = midgame_state.candidate_moves()
        mid = len(candidates) // 2
        played = []
        real_apply = GameState.apply_move

        def recording_apply(self, action):
            played.append((self, action))
            return real_apply(self, action)

        monkeypatch.setattr(GameState, "apply_move", recording_apply)
        main_line = midgame_state.copy()
        branching_rollout(Node(is_red=True), main_line, MCTSConfig())

        # The forked copy runs to completion before the main line moves
        fork_board, fork_move = played[0]
        assert fork_board is not main_line
        assert fork_move == _first_best(candidates[mid:])
        main_moves = [action for board, action in played if board is main_line]
        assert main_moves[0] == _first_best(candidates[:mid])

    def test_forked_line_never_forks(self, midgame_state, monkeypatch):
        copies = []
        real_copy = GameState.copy

        def counting_copy(self):
            copies.append(self.total_pieces)
            return real_copy(self)

        monkeypatch.setattr(GameState, "copy", counting_copy)
        produced = branching_rollout(Node(is_red=True), midgame_state, MCTSConfig())
        # Only the main line copies its board, once per fork
        assert produced == len(copies) + 1
        assert all((pieces - 6) % 32 == 0 for pieces in copies)

    def test_winner_checks_follow_schedule(self, midgame_state, monkeypatch):
        main_line = midgame_state
        start = main_line.total_pieces
        checked_plies = []
        real_check = GameState.check_winner

        def recording_check(self):
            if self is main_line:
                checked_plies.append(self.total_pieces - start)
            return real_check(self)

        monkeypatch.setattr(GameState, "check_winner", recording_check)
        branching_rollout(Node(is_red=True), main_line, MCTSConfig())

        # Every ply up to 10, then nothing until ply 16
        assert [p for p in checked_plies if p <= 16] == list(range(11)) + [16]
        last_ply = 121 - start
        assert all(p % 16 == 0 for p in checked_plies if 10 < p < last_ply)
