# File: hexmcts/interaction/play_mode_handler.py
import pygame
import logging
from typing import TYPE_CHECKING, Tuple

from ..visualization.core import coord_mapper

if TYPE_CHECKING:
    from .session import PlaySession
    from ..visualization.core.visualizer import Visualizer

logger = logging.getLogger(__name__)


def handle_play_click(
    event: pygame.event.Event,
    mouse_pos: Tuple[int, int],
    session: "PlaySession",
    visualizer: "Visualizer",
) -> None:
    """Places the human's stone on the clicked cell when it is their turn."""
    if not (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1):
        return  # Only handle left clicks

    if session.is_over():
        logger.info("Game is over, ignoring click.")
        return
    if session.is_engine_turn():
        logger.info("Engine is to move, ignoring click.")
        return

    board_rect = visualizer.ensure_layout().get("board")
    if not board_rect:
        return
    cell = coord_mapper.get_cell_coords_from_screen(mouse_pos, board_rect)
    if cell is None:
        return
    session.play(cell)


def update_play_hover(
    mouse_pos: Tuple[int, int], session: "PlaySession", visualizer: "Visualizer"
) -> None:
    """Highlights the empty cell under the mouse while the human is to move."""
    session.hover_pos = None
    if session.is_over() or session.is_engine_turn():
        return

    board_rect = visualizer.ensure_layout().get("board")
    if not board_rect:
        return
    cell = coord_mapper.get_cell_coords_from_screen(mouse_pos, board_rect)
    if cell is not None and session.state.is_legal(cell):
        session.hover_pos = cell


def run_engine_turn(session: "PlaySession") -> None:
    """Lets the engine answer if it is its turn. Blocks for the search budget."""
    if session.is_engine_turn():
        action = session.play_engine_move()
        logger.info(f"Engine answered {action}.")
