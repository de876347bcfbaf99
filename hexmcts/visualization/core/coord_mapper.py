# File: hexmcts/visualization/core/coord_mapper.py
import math
from typing import List, Optional, Tuple

import pygame

from ...structs import constants
from ...utils.types import ActionType

SQRT3 = math.sqrt(3.0)

# Board extent in units of the hex radius (pointy-top hexes on a rhombus):
# each row is shifted half a cell to the right of the one above.
_SPAN_COLS = constants.LAST_INDEX * 1.5 + 1.0  # in multiples of sqrt(3) * radius
_SPAN_ROWS = constants.LAST_INDEX * 1.5 + 2.0  # in multiples of radius


def _calculate_render_params(width: int, height: int) -> Tuple[float, float, float]:
    """Returns (hex radius, x of cell (0,0) center, y of cell (0,0) center)."""
    if width <= 0 or height <= 0:
        return 0.0, 0.0, 0.0
    radius = min(width / (SQRT3 * _SPAN_COLS), height / _SPAN_ROWS)
    board_w = SQRT3 * radius * _SPAN_COLS
    board_h = radius * _SPAN_ROWS
    ox = (width - board_w) / 2 + SQRT3 * radius / 2
    oy = (height - board_h) / 2 + radius
    return radius, ox, oy


def cell_center(
    row: int, col: int, radius: float, ox: float, oy: float
) -> Tuple[float, float]:
    """Center of cell (row, col) relative to the board surface."""
    x = ox + SQRT3 * radius * (col + row / 2.0)
    y = oy + 1.5 * radius * row
    return x, y


def hex_points(
    center: Tuple[float, float], radius: float
) -> List[Tuple[float, float]]:
    """Corner points of a pointy-top hexagon."""
    cx, cy = center
    return [
        (
            cx + radius * math.cos(math.radians(60 * i - 30)),
            cy + radius * math.sin(math.radians(60 * i - 30)),
        )
        for i in range(6)
    ]


def _round_axial(q: float, r: float) -> Tuple[int, int]:
    """Rounds fractional axial coordinates to the containing hex (cube rounding)."""
    s = -q - r
    rq, rr, rs = round(q), round(r), round(s)
    dq, dr, ds = abs(rq - q), abs(rr - r), abs(rs - s)
    if dq > dr and dq > ds:
        rq = -rr - rs
    elif dr > ds:
        rr = -rq - rs
    return int(rq), int(rr)


def get_cell_coords_from_screen(
    screen_pos: Tuple[int, int], board_rect: pygame.Rect
) -> Optional[ActionType]:
    """Maps a screen position to the (row, col) of the hex under it, if any."""
    if not board_rect.collidepoint(screen_pos):
        return None
    radius, ox, oy = _calculate_render_params(board_rect.width, board_rect.height)
    if radius <= 0:
        return None

    x = screen_pos[0] - board_rect.left - ox
    y = screen_pos[1] - board_rect.top - oy
    r_frac = y / (1.5 * radius)
    q_frac = x / (SQRT3 * radius) - r_frac / 2.0
    col, row = _round_axial(q_frac, r_frac)

    if 0 <= row < constants.BOARD_SIZE and 0 <= col < constants.BOARD_SIZE:
        return row, col
    return None
