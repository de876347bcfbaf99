# File: hexmcts/visualization/core/fonts.py
import pygame
import logging
from typing import Dict, Optional

from ...config import VisConfig

logger = logging.getLogger(__name__)

DEFAULT_FONT_NAME = None  # Use Pygame default
# Fallback font if default fails (common system font)
FALLBACK_FONT_NAME = "arial,freesans"


def load_single_font(name: Optional[str], size: int) -> Optional[pygame.font.Font]:
    """Loads a single font, falling back to a common system font."""
    try:
        return pygame.font.SysFont(name, size)
    except pygame.error as e:
        logger.error(f"Error loading font '{name}' size {size}: {e}")
        if name != FALLBACK_FONT_NAME:
            logger.warning(f"Attempting fallback font: {FALLBACK_FONT_NAME}")
            try:
                return pygame.font.SysFont(FALLBACK_FONT_NAME, size)
            except pygame.error as e_fallback:
                logger.error(f"Fallback font failed: {e_fallback}")
        return None


def load_fonts(vis_config: VisConfig) -> Dict[str, Optional[pygame.font.Font]]:
    """Loads the viewer fonts keyed by role ('ui', 'help', 'cell')."""
    font_sizes = {
        "ui": vis_config.FONT_UI_SIZE,
        "help": vis_config.FONT_HELP_SIZE,
        "cell": vis_config.FONT_CELL_SIZE,
    }
    fonts: Dict[str, Optional[pygame.font.Font]] = {}
    logger.info("Loading fonts...")
    for name, size in font_sizes.items():
        fonts[name] = load_single_font(DEFAULT_FONT_NAME, size)

    for name in ("ui", "help"):
        if fonts.get(name) is None:
            logger.critical(
                f"Essential font '{name}' failed to load. Text rendering will be affected."
            )
    return fonts
