# File: hexmcts/protocol/adapter.py
import logging
from typing import List, Optional, TextIO, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..config import ProtocolConfig
from ..environment import GameState
from ..errors import ProtocolError
from ..mcts import SearchController
from ..utils.helpers import current_time_millis
from ..utils.types import ClockFn
from .schemas import BotzoneRequest, BotzoneResponse, Coordinate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_message(model: Type[ModelT], line: str) -> ModelT:
    """Validates one JSON line against `model`, raising ProtocolError on failure."""
    try:
        return model.model_validate_json(line)
    except ValidationError as e:
        raise ProtocolError(
            f"Malformed {model.__name__} message.",
            context={"line": line.strip()[:200], "errors": e.error_count()},
        ) from e


class BotzoneAdapter:
    """
    Drives a SearchController over the keep-running line protocol.
    The first line carries the whole match history, every later line a
    single opponent move. Each answer is a response line followed by the
    keep-running marker.
    """

    def __init__(
        self,
        controller: Optional[SearchController] = None,
        config: Optional[ProtocolConfig] = None,
        clock: Optional[ClockFn] = None,
    ):
        self.controller = controller if controller else SearchController()
        self.config = config if config else ProtocolConfig()
        self._clock: ClockFn = clock if clock else current_time_millis
        self.turns_answered: int = 0

    def handle_first_request(self, line: str, start_ms: int) -> List[str]:
        """Recovers the position from the match history and answers it."""
        request = parse_message(BotzoneRequest, line)
        history = request.history()
        state = GameState.from_moves(history, self.controller.state.env_config)
        self.controller.set_state(state)
        logger.info(
            f"Recovered turn {request.turn_id} from {len(history)} moves ({state.total_pieces} pieces on board)."
        )
        return self._answer(start_ms, self.config.FIRST_TURN_TIME_MULTIPLIER)

    def handle_request(self, line: str, start_ms: int) -> List[str]:
        """Applies the opponent's move and answers it."""
        move = parse_message(Coordinate, line)
        self.controller.advance_with_move(move.to_action())
        return self._answer(start_ms, self.config.TURN_TIME_MULTIPLIER)

    def _answer(self, start_ms: int, time_multiplier: float) -> List[str]:
        action = self.controller.get_next_move(start_ms, time_multiplier)
        self.controller.advance_with_move(action)
        self.turns_answered += 1
        response = BotzoneResponse(response=Coordinate.from_action(action))
        return [response.model_dump_json(), self.config.KEEP_RUNNING_MARKER]

    def run(self, stdin: TextIO, stdout: TextIO) -> int:
        """
        Serves the protocol until `stdin` is exhausted.
        Output is flushed after every answer. Returns the number of turns answered.
        """
        for raw_line in stdin:
            line = raw_line.strip()
            if not line:
                continue
            # Budget starts when the request arrives
            start_ms = self._clock()
            if self.turns_answered == 0:
                lines = self.handle_first_request(line, start_ms)
            else:
                lines = self.handle_request(line, start_ms)
            for out in lines:
                stdout.write(out + "\n")
            stdout.flush()
        logger.info(f"Input closed after {self.turns_answered} turns.")
        return self.turns_answered
