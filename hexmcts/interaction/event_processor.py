# File: hexmcts/interaction/event_processor.py
import pygame
import logging
from typing import TYPE_CHECKING, Generator, Any

if TYPE_CHECKING:
    from ..visualization.core.visualizer import Visualizer

logger = logging.getLogger(__name__)

# Below this the hexes become too small to click reliably
MIN_WINDOW_SIZE = (480, 360)


def _is_quit_event(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


def _resize_window(visualizer: "Visualizer", width: int, height: int) -> None:
    w = max(MIN_WINDOW_SIZE[0], width)
    h = max(MIN_WINDOW_SIZE[1], height)
    try:
        visualizer.screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
    except pygame.error as e:
        logger.error(f"Could not resize window to {w}x{h}: {e}")
        return
    visualizer.layout_rects = None
    logger.info(f"Window resized to {w}x{h}")


def process_pygame_events(
    visualizer: "Visualizer",
) -> Generator[pygame.event.Event, Any, bool]:
    """
    Drains the pygame queue. Quit requests (window close, Escape) end the
    generator with a False return value; resizes are applied to the
    visualizer and passed on like every other event.
    """
    for event in pygame.event.get():
        if _is_quit_event(event):
            logger.info(f"Quit requested ({pygame.event.event_name(event.type)}).")
            return False
        if event.type == pygame.VIDEORESIZE:
            _resize_window(visualizer, event.w, event.h)
        yield event
    return True
