# File: hexmcts/config/mcts_config.py
from typing import Literal
from pydantic import BaseModel, Field, field_validator


class MCTSConfig(BaseModel):
    """Configuration for Monte Carlo Tree Search (Pydantic model)."""

    exploration_coefficient: float = Field(0.5, ge=0)
    root_prior: float = Field(1.0, gt=0)

    # Time budget: time_limit_ms * multiplier, stop once this fraction is used
    time_limit_ms: int = Field(1000, gt=0)
    time_budget_fraction: float = Field(0.87, gt=0, le=1.0)
    playout_batch_size: int = Field(50, ge=1)

    backprop_discount: float = Field(0.95, ge=0, le=1.0)

    rollout_policy: Literal["branching", "single"] = Field("branching")

    # Branching rollout
    early_check_plies: int = Field(10, ge=0)
    early_reward_scale: float = Field(16.0, gt=0)
    termination_check_interval: int = Field(16, ge=1)
    branch_interval: int = Field(32, ge=1)
    reward_decay: float = Field(0.995, gt=0, le=1.0)

    # Single (non-branching) rollout
    single_early_check_plies: int = Field(8, ge=0)
    single_early_reward_scale: float = Field(10.0, gt=0)

    @field_validator("termination_check_interval", "branch_interval")
    @classmethod
    def check_power_of_two(cls, v: int) -> int:
        # Intervals are applied as bitmasks on the ply counter
        if v & (v - 1) != 0:
            raise ValueError(f"Interval must be a power of two, got {v}")
        return v

    @property
    def termination_check_mask(self) -> int:
        return self.termination_check_interval - 1

    @property
    def branch_mask(self) -> int:
        return self.branch_interval - 1
