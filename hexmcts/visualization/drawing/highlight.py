# File: hexmcts/visualization/drawing/highlight.py
import pygame
from typing import Optional

from ..core import colors, coord_mapper


def draw_hover_highlight(
    surface: pygame.Surface,
    r: int,
    c: int,
    font: Optional[pygame.font.Font] = None,
    label: Optional[str] = None,
) -> None:
    """Outlines the hovered cell and optionally writes a short label inside it."""
    if surface.get_width() <= 0 or surface.get_height() <= 0:
        return

    radius, ox, oy = coord_mapper._calculate_render_params(
        surface.get_width(), surface.get_height()
    )
    if radius <= 0:
        return

    center = coord_mapper.cell_center(r, c, radius, ox, oy)
    pts = coord_mapper.hex_points(center, radius * 0.95)
    pygame.draw.polygon(surface, colors.HOVER_HIGHLIGHT_COLOR, pts, 3)

    if font and label:
        text_surf = font.render(label, True, colors.CELL_TEXT_COLOR)
        surface.blit(text_surf, text_surf.get_rect(center=(int(center[0]), int(center[1]))))
