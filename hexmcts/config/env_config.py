# File: hexmcts/config/env_config.py
from typing import List, Tuple
from pydantic import BaseModel, Field, computed_field, field_validator

from ..structs import constants


class EnvConfig(BaseModel):
    """Configuration for the board model and its move heuristic (Pydantic model)."""

    # Opening: the first stone is forced away from the corners
    FORCE_OPENING_MOVE: bool = Field(True)
    OPENING_MOVE: Tuple[int, int] = Field((1, 2))

    # (max pieces on board, border margin) - margins shrink as the game fills up
    BORDER_BANDS: List[Tuple[int, int]] = Field(default=[(4, 3), (8, 2), (12, 1)])

    # Candidate weights compose multiplicatively
    CONTACT_MULTIPLIER: float = Field(2.0, gt=0)
    DENSE_CONTACT_THRESHOLD: int = Field(4, ge=1, le=9)
    DENSE_CONTACT_MULTIPLIER: float = Field(2.0, gt=0)
    CENTER_MIN: int = Field(2, ge=0)
    CENTER_MAX: int = Field(9, ge=0)
    CENTER_MULTIPLIER: float = Field(1.5, gt=0)

    @field_validator("OPENING_MOVE")
    @classmethod
    def check_opening_on_board(cls, v: Tuple[int, int]) -> Tuple[int, int]:
        row, col = v
        if not (0 <= row < constants.BOARD_SIZE and 0 <= col < constants.BOARD_SIZE):
            raise ValueError(f"OPENING_MOVE {v} is outside the {constants.BOARD_SIZE}x{constants.BOARD_SIZE} board")
        return v

    @field_validator("BORDER_BANDS")
    @classmethod
    def check_border_bands(cls, v: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
        thresholds = [max_pieces for max_pieces, _ in v]
        if thresholds != sorted(thresholds):
            raise ValueError("BORDER_BANDS must be ordered by increasing piece count")
        for _, margin in v:
            if not (0 <= margin <= constants.BOARD_SIZE // 2):
                raise ValueError(f"Border margin {margin} out of range")
        return v

    @field_validator("CENTER_MAX")
    @classmethod
    def check_center_range(cls, v: int, info) -> int:
        center_min = info.data.get("CENTER_MIN")
        if center_min is not None and v < center_min:
            raise ValueError("CENTER_MAX cannot be smaller than CENTER_MIN")
        if v >= constants.BOARD_SIZE:
            raise ValueError(f"CENTER_MAX must be < {constants.BOARD_SIZE}")
        return v

    @computed_field  # type: ignore[misc]
    @property
    def BOARD_SIZE(self) -> int:
        """Side length of the (fixed) board."""
        return constants.BOARD_SIZE

    @computed_field  # type: ignore[misc]
    @property
    def ACTION_DIM(self) -> int:
        """Total number of cells / flat action indices."""
        return constants.NUM_CELLS

    def border_margin(self, total_pieces: int) -> int:
        """Margin of border rows/cols excluded from candidates at this ply."""
        for max_pieces, margin in self.BORDER_BANDS:
            if total_pieces <= max_pieces:
                return margin
        return 0
