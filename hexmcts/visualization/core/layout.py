# File: hexmcts/visualization/core/layout.py
import pygame
from typing import Dict
import logging

from ...config import VisConfig

logger = logging.getLogger(__name__)


def calculate_layout(
    screen_width: int,
    screen_height: int,
    vis_config: VisConfig,
) -> Dict[str, pygame.Rect]:
    """
    Splits the screen into the board area and the HUD strip at the bottom.
    """
    sw, sh = screen_width, screen_height
    pad = vis_config.PADDING
    hud_h = vis_config.HUD_HEIGHT

    board_h = max(0, sh - hud_h - 2 * pad)
    board_w = max(0, sw - 2 * pad)
    board_rect = pygame.Rect(pad, pad, board_w, board_h)
    hud_rect = pygame.Rect(0, max(0, sh - hud_h), sw, hud_h)

    # Clip rectangles to screen bounds just in case
    screen_rect = pygame.Rect(0, 0, sw, sh)
    board_rect = board_rect.clip(screen_rect)
    hud_rect = hud_rect.clip(screen_rect)

    logger.debug(f"Layout calculated: Board={board_rect}, HUD={hud_rect}")
    return {"board": board_rect, "hud": hud_rect}
