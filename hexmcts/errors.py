# File: hexmcts/errors.py
"""
HexMCTS error hierarchy.

All engine exceptions inherit from HexMCTSError so callers (the protocol
loop, the viewer) can catch engine failures in one place:

    from hexmcts.errors import HexMCTSError, InvalidMoveError

    try:
        controller.advance_with_move(action)
    except InvalidMoveError as e:
        logger.warning(f"Rejected move: {e.message}")
"""

from typing import Any, Dict, Optional

__all__ = [
    "HexMCTSError",
    "InvalidMoveError",
    "InvalidTreeError",
    "NoChildrenError",
    "RolloutError",
    "ProtocolError",
]


class HexMCTSError(Exception):
    """Base exception for all engine errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error description
        context: Additional context for debugging
    """

    code: str = "HEXMCTS_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class InvalidMoveError(HexMCTSError):
    """Move outside the board or onto an occupied cell.

    Recoverable: the move is rejected and no state changes.
    """

    code: str = "INVALID_MOVE"


class InvalidTreeError(HexMCTSError):
    """Search tree invariant violation (e.g. evaluating the root)."""

    code: str = "INVALID_TREE"


class NoChildrenError(InvalidTreeError):
    """Selection was requested on a node that has never been expanded."""

    code: str = "NO_CHILDREN"


class RolloutError(HexMCTSError):
    """A rollout filled the board without producing a winner.

    Hex cannot end in a draw, so this indicates a broken board model.
    """

    code: str = "ROLLOUT_FAILED"


class ProtocolError(HexMCTSError):
    """Malformed or unexpected input on the match protocol."""

    code: str = "PROTOCOL_ERROR"
