import pygame
import pytest

from hexmcts.config import VisConfig
from hexmcts.structs import constants
from hexmcts.visualization.core.coord_mapper import (
    _calculate_render_params,
    cell_center,
    get_cell_coords_from_screen,
)
from hexmcts.visualization.core.layout import calculate_layout

ALL_CELLS = [
    (r, c) for r in range(constants.BOARD_SIZE) for c in range(constants.BOARD_SIZE)
]


@pytest.fixture(params=[(960, 600), (600, 900)])
def board_rect(request) -> pygame.Rect:
    width, height = request.param
    return pygame.Rect(20, 20, width, height)


def test_cell_centers_map_back(board_rect):
    radius, ox, oy = _calculate_render_params(board_rect.width, board_rect.height)
    assert radius > 0
    for row, col in ALL_CELLS:
        x, y = cell_center(row, col, radius, ox, oy)
        pos = (int(round(board_rect.left + x)), int(round(board_rect.top + y)))
        assert get_cell_coords_from_screen(pos, board_rect) == (row, col)


def test_board_fits_inside_rect(board_rect):
    radius, ox, oy = _calculate_render_params(board_rect.width, board_rect.height)
    for row, col in [(0, 0), (0, 10), (10, 0), (10, 10)]:
        x, y = cell_center(row, col, radius, ox, oy)
        assert radius * 0.8 <= x <= board_rect.width - radius * 0.8
        assert radius * 0.9 <= y <= board_rect.height - radius * 0.9


def test_outside_rect_is_none(board_rect):
    assert get_cell_coords_from_screen((0, 0), board_rect) is None
    assert get_cell_coords_from_screen((board_rect.right + 5, 30), board_rect) is None


def test_blank_area_of_rhombus_is_none(board_rect):
    radius, ox, oy = _calculate_render_params(board_rect.width, board_rect.height)
    # Left of cell (10, 0), beyond the slanted board edge
    x, y = cell_center(10, 0, radius, ox, oy)
    pos = (int(board_rect.left + x - 3 * radius), int(board_rect.top + y))
    assert get_cell_coords_from_screen(pos, board_rect) is None


def test_degenerate_rect():
    assert _calculate_render_params(0, 100) == (0.0, 0.0, 0.0)


def test_layout_splits_board_and_hud():
    cfg = VisConfig()
    layout = calculate_layout(1000, 700, cfg)
    board, hud = layout["board"], layout["hud"]
    assert hud.bottom == 700
    assert hud.height == cfg.HUD_HEIGHT
    assert board.left == cfg.PADDING
    assert board.bottom <= hud.top
    assert board.width == 1000 - 2 * cfg.PADDING
