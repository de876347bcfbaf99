# File: hexmcts/interaction/debug_mode_handler.py
import pygame
import logging
from typing import TYPE_CHECKING, Tuple

from ..environment import compute_prior_weights
from ..visualization.core import coord_mapper

if TYPE_CHECKING:
    from .session import PlaySession
    from ..visualization.core.visualizer import Visualizer

logger = logging.getLogger(__name__)


def handle_debug_click(
    event: pygame.event.Event,
    mouse_pos: Tuple[int, int],
    session: "PlaySession",
    visualizer: "Visualizer",
) -> None:
    """Places a stone for whichever side is to move. The engine does not reply."""
    if not (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1):
        return

    board_rect = visualizer.ensure_layout().get("board")
    if not board_rect:
        logger.error("Board layout rectangle not available for debug click.")
        return

    cell = coord_mapper.get_cell_coords_from_screen(mouse_pos, board_rect)
    if cell is None:
        return
    if session.play(cell):
        logger.info(f"DEBUG: Winner check -> {session.winner.name}")


def update_debug_hover(
    mouse_pos: Tuple[int, int], session: "PlaySession", visualizer: "Visualizer"
) -> None:
    """Tracks the hovered cell and its heuristic weight for the side to move."""
    session.hover_pos = None
    session.hover_prior = None

    board_rect = visualizer.ensure_layout().get("board")
    if not board_rect:
        return

    cell = coord_mapper.get_cell_coords_from_screen(mouse_pos, board_rect)
    if cell is None:
        return
    session.hover_pos = cell
    if session.state.is_legal(cell):
        weights = compute_prior_weights(session.state)
        session.hover_prior = float(weights[cell])
