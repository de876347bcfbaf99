# File: hexmcts/interaction/__init__.py
from .session import PlaySession
from .input_handler import InputHandler
from .event_processor import process_pygame_events
from .play_mode_handler import handle_play_click, update_play_hover, run_engine_turn
from .debug_mode_handler import handle_debug_click, update_debug_hover

__all__ = [
    "PlaySession",
    "InputHandler",
    "process_pygame_events",
    "handle_play_click",
    "update_play_hover",
    "run_engine_turn",
    "handle_debug_click",
    "update_debug_hover",
]
