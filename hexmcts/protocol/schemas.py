# File: hexmcts/protocol/schemas.py
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.types import ActionType


class Coordinate(BaseModel):
    """A move on the wire. `x` is the row, `y` the column; (-1, -1) means no move."""

    model_config = ConfigDict(extra="ignore")

    x: int = Field(..., ge=-1)
    y: int = Field(..., ge=-1)

    @classmethod
    def from_action(cls, action: ActionType) -> "Coordinate":
        return cls(x=action[0], y=action[1])

    def to_action(self) -> ActionType:
        return self.x, self.y


class BotzoneRequest(BaseModel):
    """
    First input of a match. `requests[i]` is the opponent move that prompted
    turn i, `responses[i]` the move this engine answered with.
    """

    model_config = ConfigDict(extra="ignore")

    requests: List[Coordinate] = Field(..., min_length=1)
    responses: List[Coordinate] = Field(default_factory=list, validate_default=True)

    @field_validator("responses")
    @classmethod
    def check_one_pending_request(cls, v: List[Coordinate], info) -> List[Coordinate]:
        requests = info.data.get("requests")
        if requests is not None and len(requests) != len(v) + 1:
            raise ValueError(
                f"Expected exactly one unanswered request, got {len(requests)} requests for {len(v)} responses"
            )
        return v

    @property
    def turn_id(self) -> int:
        return len(self.responses)

    def history(self) -> List[ActionType]:
        """Moves to replay, in order, before answering the latest request."""
        moves: List[ActionType] = []
        for request, response in zip(self.requests, self.responses):
            moves.append(request.to_action())
            moves.append(response.to_action())
        moves.append(self.requests[self.turn_id].to_action())
        return moves


class BotzoneResponse(BaseModel):
    """One answer line: {"response": {"x": row, "y": col}}."""

    response: Coordinate
