# File: hexmcts/visualization/drawing/hud.py
import pygame
from typing import TYPE_CHECKING, Dict, Optional

from ..core import colors
from ...structs import Winner
from ...utils.helpers import format_millis

if TYPE_CHECKING:
    from ...interaction.session import PlaySession


def render_hud(
    surface: pygame.Surface,
    session: "PlaySession",
    mode: str,
    fonts: Dict[str, Optional[pygame.font.Font]],
) -> None:
    """
    Renders the status line (side to move or winner, hover info) and the
    last search summary at the bottom of the screen, help text on the right.
    """
    screen_w, screen_h = surface.get_size()
    ui_font = fonts.get("ui")
    help_font = fonts.get("help")
    bottom_y = screen_h - 10

    state = session.state
    stats_rect = None
    if ui_font:
        winner = session.winner
        if winner != Winner.NONE:
            status = f"{winner.name} wins"
            status_color = colors.STONE_COLORS[int(winner)]
        else:
            side = state.current_player()
            status = f"{side.name} to move ({state.total_pieces} stones)"
            status_color = colors.STONE_COLORS[int(side)]
        if mode == "debug" and session.hover_pos is not None:
            status += f" | Hover {session.hover_pos}"
            if session.hover_prior is not None:
                status += f" prior={session.hover_prior:.2f}"

        status_surf = ui_font.render(status, True, status_color)
        status_rect = status_surf.get_rect(
            bottomleft=(15, bottom_y - (help_font.get_height() + 4 if help_font else 0))
        )
        surface.blit(status_surf, status_rect)

    stats = session.last_stats
    if help_font and stats is not None:
        stats_text = (
            f"Engine: {stats.chosen_move} | Playouts: {stats.playouts} "
            f"| Rollouts: {stats.rollouts} | {format_millis(stats.elapsed_ms)} "
            f"| N={stats.chosen_visits} Q={stats.chosen_quality:.3f}"
        )
        stats_surf = help_font.render(stats_text, True, colors.CYAN)
        stats_rect = stats_surf.get_rect(bottomleft=(15, bottom_y))
        surface.blit(stats_surf, stats_rect)

    if help_font:
        help_text = "[R] Reset | [ESC] Quit"
        help_surf = help_font.render(help_text, True, colors.LIGHT_GRAY)
        help_rect = help_surf.get_rect(bottomright=(screen_w - 15, bottom_y))
        # Move up if overlapping with stats
        if stats_rect and stats_rect.right > help_rect.left - 10:
            help_rect.bottom = bottom_y - stats_rect.height - 5
        surface.blit(help_surf, help_rect)
