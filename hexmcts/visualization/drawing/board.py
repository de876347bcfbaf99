# File: hexmcts/visualization/drawing/board.py
import pygame
from typing import Optional, TYPE_CHECKING

from ..core import colors, coord_mapper
from ...structs import Cell, constants
from ...utils.types import ActionType

if TYPE_CHECKING:
    from ...environment import GameState


def draw_board_background(surface: pygame.Surface, bg_color: tuple) -> None:
    """Fills the board area surface with a background color."""
    surface.fill(bg_color)


def draw_edges(surface: pygame.Surface, width: int) -> None:
    """
    Draws the goal edges: RED along the top and bottom rows, BLUE along the
    left and right columns.
    """
    radius, ox, oy = coord_mapper._calculate_render_params(
        surface.get_width(), surface.get_height()
    )
    if radius <= 0 or width <= 0:
        return
    last = constants.LAST_INDEX
    offset = radius * 1.1
    edges = [
        (Cell.RED, (0, 0), (0, last), (0, -offset)),
        (Cell.RED, (last, 0), (last, last), (0, offset)),
        (Cell.BLUE, (0, 0), (last, 0), (-offset, 0)),
        (Cell.BLUE, (0, last), (last, last), (offset, 0)),
    ]
    for side, start, end, (dx, dy) in edges:
        sx, sy = coord_mapper.cell_center(start[0], start[1], radius, ox, oy)
        ex, ey = coord_mapper.cell_center(end[0], end[1], radius, ox, oy)
        pygame.draw.line(
            surface,
            colors.STONE_COLORS[int(side)],
            (sx + dx, sy + dy),
            (ex + dx, ey + dy),
            width,
        )


def draw_cells(
    surface: pygame.Surface,
    game_state: "GameState",
    last_move: Optional[ActionType] = None,
) -> None:
    """Draws every hex cell, filled with the stone color when occupied."""
    radius, ox, oy = coord_mapper._calculate_render_params(
        surface.get_width(), surface.get_height()
    )
    if radius <= 0:
        return

    for r in range(constants.BOARD_SIZE):
        for c in range(constants.BOARD_SIZE):
            center = coord_mapper.cell_center(r, c, radius, ox, oy)
            pts = coord_mapper.hex_points(center, radius * 0.95)
            value = int(game_state.board[r, c])
            color = colors.STONE_COLORS.get(value, colors.CELL_EMPTY_COLOR)
            pygame.draw.polygon(surface, color, pts)
            pygame.draw.polygon(surface, colors.CELL_BORDER_COLOR, pts, 1)

    if last_move is not None:
        center = coord_mapper.cell_center(last_move[0], last_move[1], radius, ox, oy)
        pygame.draw.circle(
            surface,
            colors.LAST_MOVE_COLOR,
            (int(center[0]), int(center[1])),
            max(2, int(radius * 0.25)),
        )
