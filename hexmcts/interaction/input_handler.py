# File: hexmcts/interaction/input_handler.py
import pygame
import logging

from . import event_processor, play_mode_handler, debug_mode_handler
from .session import PlaySession
from .. import visualization

logger = logging.getLogger(__name__)

_CLICK_HANDLERS = {
    "play": play_mode_handler.handle_play_click,
    "debug": debug_mode_handler.handle_debug_click,
}
_HOVER_HANDLERS = {
    "play": play_mode_handler.update_play_hover,
    "debug": debug_mode_handler.update_debug_hover,
}


class InputHandler:
    """Routes pygame input to the handlers of the active mode. R resets the board."""

    def __init__(
        self,
        session: PlaySession,
        visualizer: visualization.Visualizer,
        mode: str,
    ):
        if mode not in _CLICK_HANDLERS:
            raise ValueError(f"No input handlers for mode '{mode}'")
        self.session = session
        self.visualizer = visualizer
        self.mode = mode
        self._on_click = _CLICK_HANDLERS[mode]
        self._on_hover = _HOVER_HANDLERS[mode]

    def handle_input(self) -> bool:
        """Consumes this frame's events. Returns False when the app should quit."""
        mouse_pos = pygame.mouse.get_pos()

        events = event_processor.process_pygame_events(self.visualizer)
        try:
            while True:
                event = next(events)
                if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    self.session.reset()
                    continue
                self._on_click(event, mouse_pos, self.session, self.visualizer)
        except StopIteration as stop:
            if not stop.value:
                return False

        self._on_hover(mouse_pos, self.session, self.visualizer)
        return True
