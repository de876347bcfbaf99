# File: hexmcts/config/vis_config.py
from pydantic import BaseModel, Field


class VisConfig(BaseModel):
    """Configuration for the pygame viewer (Pydantic model)."""

    FPS: int = Field(30, gt=0)
    SCREEN_WIDTH: int = Field(1000, gt=0)
    SCREEN_HEIGHT: int = Field(700, gt=0)

    # Layout
    PADDING: int = Field(20, ge=0)
    HUD_HEIGHT: int = Field(60, ge=0)
    EDGE_WIDTH: int = Field(6, ge=0)

    # Fonts (sizes)
    FONT_UI_SIZE: int = Field(24, gt=0)
    FONT_HELP_SIZE: int = Field(18, gt=0)
    FONT_CELL_SIZE: int = Field(14, gt=0)
