# File: hexmcts/config/protocol_config.py
from pydantic import BaseModel, Field


class ProtocolConfig(BaseModel):
    """Configuration for the line-delimited JSON match protocol (Pydantic model)."""

    KEEP_RUNNING_MARKER: str = Field(">>>BOTZONE_REQUEST_KEEP_RUNNING<<<")
    # The first turn also pays for process start-up, so it gets a larger budget
    FIRST_TURN_TIME_MULTIPLIER: float = Field(1.9, gt=0)
    TURN_TIME_MULTIPLIER: float = Field(1.0, gt=0)
