# File: hexmcts/visualization/core/colors.py
"""
Colors (RGB tuples 0-255) shared by the drawing modules.
"""

WHITE: tuple[int, int, int] = (255, 255, 255)
BLACK: tuple[int, int, int] = (0, 0, 0)
LIGHT_GRAY: tuple[int, int, int] = (180, 180, 180)
GRAY: tuple[int, int, int] = (50, 50, 50)
DARK_GRAY: tuple[int, int, int] = (30, 30, 30)
RED: tuple[int, int, int] = (220, 50, 50)
BLUE: tuple[int, int, int] = (50, 90, 230)
YELLOW: tuple[int, int, int] = (255, 255, 100)
CYAN: tuple[int, int, int] = (0, 255, 255)

BOARD_BG_COLOR: tuple[int, int, int] = (25, 25, 30)
BOARD_BG_GAME_OVER: tuple[int, int, int] = (45, 20, 20)
CELL_EMPTY_COLOR: tuple[int, int, int] = (70, 70, 80)
CELL_BORDER_COLOR: tuple[int, int, int] = (110, 110, 120)
CELL_TEXT_COLOR: tuple[int, int, int] = WHITE

# Indexed by Cell value
STONE_COLORS: dict[int, tuple[int, int, int]] = {1: RED, -1: BLUE}

HOVER_HIGHLIGHT_COLOR: tuple[int, int, int] = YELLOW
LAST_MOVE_COLOR: tuple[int, int, int] = WHITE
