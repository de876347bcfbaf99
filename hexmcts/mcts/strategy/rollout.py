# File: hexmcts/mcts/strategy/rollout.py
"""
Deterministic greedy rollouts. Every ply plays the highest-weighted
candidate move; the result is backpropagated into the node the rollout
started from, signed from that node's point of view.
"""
import logging

from ..core.node import Node
from ...config import MCTSConfig
from ...environment import CandidateSlice, GameState, greedy_move
from ...errors import RolloutError
from ...structs import Winner

logger = logging.getLogger(__name__)


def _side_sign(node: Node) -> int:
    return 1 if node.is_red else -1


def _play_greedy(state: GameState, part: CandidateSlice) -> None:
    action = greedy_move(state, part)
    if action is None:
        raise RolloutError(
            "No candidate moves on a non-full board.",
            context={"pieces": state.total_pieces},
        )
    state.apply_move(action)


def _full_board_result(
    start_node: Node, state: GameState, counter: int, decay: float
) -> float:
    winner = state.check_winner()
    if winner == Winner.NONE:
        raise RolloutError(
            "Board filled without a winner.",
            context={"plies": counter, "pieces": state.total_pieces},
        )
    return int(winner) * _side_sign(start_node) * decay**counter


def branching_rollout(
    start_node: Node,
    state: GameState,
    config: MCTSConfig,
    counter: int = 0,
    forked: bool = False,
) -> int:
    """
    Greedy rollout that forks into a second line every `branch_interval`
    plies. At a fork the board is copied: the forked line picks its next
    move from the second half of the candidates, this line from the first
    half. Forked lines never fork again. Each line backpropagates its own
    result into `start_node`.

    `state` is consumed. Returns the number of results backpropagated.

    Rewards, with sign +1 when the winner is the start node's side:
      - win detected at ply <= early_check_plies: winner * scale / (ply + 1)
      - later (checked every termination_check_interval plies): winner * decay^ply
    """
    sign = _side_sign(start_node)
    discount = config.backprop_discount
    completed = 0
    # The forked line's first ply is restricted to the second half
    part = CandidateSlice.SECOND_HALF if forked else CandidateSlice.ALL

    while not state.is_full():
        if counter <= config.early_check_plies:
            winner = state.check_winner()
            if winner != Winner.NONE:
                reward = int(winner) * config.early_reward_scale / (counter + 1) * sign
                start_node.backpropagate(reward, discount)
                return completed + 1

        if counter != 0 and (counter & config.termination_check_mask) == 0:
            winner = state.check_winner()
            if winner != Winner.NONE:
                reward = int(winner) * sign * config.reward_decay**counter
                start_node.backpropagate(reward, discount)
                return completed + 1

        if not forked and (counter & config.branch_mask) == 0:
            completed += branching_rollout(
                start_node, state.copy(), config, counter, forked=True
            )
            part = CandidateSlice.FIRST_HALF

        _play_greedy(state, part)
        counter += 1
        part = CandidateSlice.ALL

    reward = _full_board_result(start_node, state, counter, config.reward_decay)
    start_node.backpropagate(reward, discount)
    return completed + 1


def single_rollout(
    start_node: Node, state: GameState, config: MCTSConfig, counter: int = 0
) -> int:
    """
    Straight-line greedy rollout without forking. Wins are looked for during
    the first `single_early_check_plies` plies (reward scale / (ply + 1)),
    otherwise only once the board is full.
    `state` is consumed. Returns the number of results backpropagated (1).
    """
    sign = _side_sign(start_node)
    while not state.is_full():
        if counter <= config.single_early_check_plies:
            winner = state.check_winner()
            if winner != Winner.NONE:
                reward = (
                    int(winner) * config.single_early_reward_scale / (counter + 1) * sign
                )
                start_node.backpropagate(reward, config.backprop_discount)
                return 1
        _play_greedy(state, CandidateSlice.ALL)
        counter += 1

    reward = _full_board_result(start_node, state, counter, 1.0)
    start_node.backpropagate(reward, config.backprop_discount)
    return 1


def run_rollout(start_node: Node, state: GameState, config: MCTSConfig) -> int:
    """Dispatches to the rollout policy named by `config.rollout_policy`."""
    if config.rollout_policy == "single":
        return single_rollout(start_node, state, config)
    return branching_rollout(start_node, state, config)
