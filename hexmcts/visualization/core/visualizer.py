# File: hexmcts/visualization/core/visualizer.py
import pygame
import logging
from typing import TYPE_CHECKING, Dict, Optional

from . import colors, layout

from ..drawing import board as board_drawing
from ..drawing import hud as hud_drawing
from ..drawing import highlight as highlight_drawing

if TYPE_CHECKING:
    from ...config import VisConfig
    from ...interaction.session import PlaySession

logger = logging.getLogger(__name__)


class Visualizer:
    """Orchestrates rendering of a play session."""

    def __init__(
        self,
        screen: pygame.Surface,
        vis_config: "VisConfig",
        fonts: Dict[str, Optional[pygame.font.Font]],
    ):
        self.screen = screen
        self.vis_config = vis_config
        self.fonts = fonts
        self.layout_rects: Optional[Dict[str, pygame.Rect]] = None
        self._layout_size = (0, 0)
        self.ensure_layout()

    def ensure_layout(self) -> Dict[str, pygame.Rect]:
        """Returns cached layout or calculates it if the screen size changed."""
        current_size = self.screen.get_size()
        if self.layout_rects is None or current_size != self._layout_size:
            self.layout_rects = layout.calculate_layout(
                current_size[0], current_size[1], self.vis_config
            )
            self._layout_size = current_size
            logger.info(f"Recalculated layout: {self.layout_rects}")
        return self.layout_rects

    def render(self, session: "PlaySession", mode: str):
        """Renders the board and the HUD."""
        self.screen.fill(colors.DARK_GRAY)
        layout_rects = self.ensure_layout()
        board_rect = layout_rects.get("board")

        if board_rect and board_rect.width > 0 and board_rect.height > 0:
            try:
                board_surf = self.screen.subsurface(board_rect)
                self._render_board_area(board_surf, session, mode)
            except ValueError as e:
                logger.error(f"Error creating board subsurface ({board_rect}): {e}")
                pygame.draw.rect(self.screen, colors.RED, board_rect, 1)

        hud_drawing.render_hud(self.screen, session, mode, self.fonts)

    def _render_board_area(
        self, board_surf: pygame.Surface, session: "PlaySession", mode: str
    ):
        bg_color = (
            colors.BOARD_BG_GAME_OVER if session.is_over() else colors.BOARD_BG_COLOR
        )
        board_drawing.draw_board_background(board_surf, bg_color)
        board_drawing.draw_edges(board_surf, self.vis_config.EDGE_WIDTH)
        board_drawing.draw_cells(board_surf, session.state, session.last_move)

        if session.hover_pos is not None:
            r, c = session.hover_pos
            label = None
            if mode == "debug" and session.hover_prior is not None:
                label = f"{session.hover_prior:g}"
            highlight_drawing.draw_hover_highlight(
                board_surf, r, c, self.fonts.get("cell"), label
            )
