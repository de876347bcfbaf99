# File: hexmcts/visualization/__init__.py
"""
Visualization module for rendering the Hex board using Pygame.
"""

# Core components
from .core.visualizer import Visualizer
from .core.layout import calculate_layout
from .core.fonts import load_fonts
from .core import colors  # Expose colors directly
from .core.coord_mapper import get_cell_coords_from_screen, cell_center

# Drawing functions
from .drawing.board import draw_board_background, draw_edges, draw_cells
from .drawing.hud import render_hud
from .drawing.highlight import draw_hover_highlight

# Configuration
from ..config import VisConfig

__all__ = [
    # Core Classes & Functions
    "Visualizer",
    "calculate_layout",
    "load_fonts",
    "colors",
    "get_cell_coords_from_screen",
    "cell_center",
    # Drawing Functions
    "draw_board_background",
    "draw_edges",
    "draw_cells",
    "render_hud",
    "draw_hover_highlight",
    # Config
    "VisConfig",
]
