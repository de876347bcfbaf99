"""Tests for GameState: move application, turn order, recovery and copies."""

import pytest

from hexmcts.environment import GameState
from hexmcts.errors import InvalidMoveError
from hexmcts.structs import Cell


class TestApplyMove:
    def test_counter_and_alternation(self, empty_state):
        moves = [(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)]
        expected_side = Cell.RED
        for n, move in enumerate(moves, start=1):
            assert empty_state.current_player() == expected_side
            assert empty_state.apply_move(move)
            assert empty_state.board[move] == expected_side
            assert empty_state.total_pieces == n
            expected_side = expected_side.opponent

    def test_red_moves_first(self, empty_state):
        assert empty_state.red_plays_next()
        assert not empty_state.red_played_last()
        empty_state.apply_move((5, 5))
        assert not empty_state.red_plays_next()
        assert empty_state.red_played_last()

    def test_out_of_range_is_rejected(self, empty_state):
        for move in [(-1, -1), (11, 0), (0, 11), (-1, 5)]:
            assert not empty_state.apply_move(move)
        assert empty_state.total_pieces == 0
        assert not empty_state.board.any()

    def test_occupied_cell_is_rejected(self, empty_state):
        assert empty_state.apply_move((3, 3))
        assert not empty_state.apply_move((3, 3))
        assert empty_state.total_pieces == 1
        assert empty_state.board[3, 3] == Cell.RED

    def test_apply_flat_move(self, empty_state):
        assert empty_state.apply_flat_move(12)
        assert empty_state.board[1, 1] == Cell.RED
        assert not empty_state.apply_flat_move(121)
        assert not empty_state.apply_flat_move(-1)
        assert empty_state.total_pieces == 1

    def test_is_full(self, empty_state):
        for r in range(11):
            for c in range(11):
                assert not empty_state.is_full()
                empty_state.apply_move((r, c))
        assert empty_state.is_full()
        assert empty_state.total_pieces == 121


class TestRecoveryAndCopy:
    def test_from_moves_skips_no_move_marker(self, env_config):
        state = GameState.from_moves([(-1, -1), (1, 2), (5, 5)], env_config)
        assert state.total_pieces == 2
        assert state.board[1, 2] == Cell.RED
        assert state.board[5, 5] == Cell.BLUE

    def test_from_moves_rejects_occupied_cell(self, env_config):
        with pytest.raises(InvalidMoveError):
            GameState.from_moves([(5, 5), (4, 6), (5, 5)], env_config)

    @pytest.mark.parametrize("move", [(11, 0), (-1, 3), (0, -1)])
    def test_from_moves_rejects_off_board(self, env_config, move):
        with pytest.raises(InvalidMoveError):
            GameState.from_moves([(1, 2), move], env_config)

    def test_from_moves_matches_manual_replay(self, env_config):
        moves = [(1, 2), (5, 5), (2, 2), (6, 6)]
        manual = GameState(env_config)
        for move in moves:
            manual.apply_move(move)
        assert GameState.from_moves(moves, env_config) == manual

    def test_copy_is_independent(self, midgame_state):
        copy = midgame_state.copy()
        assert copy == midgame_state
        copy.apply_move((0, 0))
        assert midgame_state.board[0, 0] == Cell.EMPTY
        assert midgame_state.total_pieces == 6
        assert copy.env_config is midgame_state.env_config

    def test_reset(self, midgame_state):
        midgame_state.reset()
        assert midgame_state.total_pieces == 0
        assert not midgame_state.board.any()

    def test_board_string(self, midgame_state):
        lines = midgame_state.board_string().splitlines()
        assert len(lines) == 11
        assert lines[5].startswith(" " * 5)
        assert "R" in lines[5] and "B" in lines[4]


class TestLastPlayerWon:
    def test_empty_board(self, empty_state):
        assert not empty_state.last_player_won()

    def test_red_chain_completed_by_red(self, empty_state):
        # RED plays down column 0, BLUE answers in column 10
        for r in range(11):
            empty_state.apply_move((r, 0))
            if r < 10:
                empty_state.apply_move((r, 10))
        assert empty_state.red_played_last()
        assert empty_state.last_player_won()
