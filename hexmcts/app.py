# File: hexmcts/app.py
import pygame
import logging
from typing import Optional

from . import config
from . import environment
from . import interaction
from . import mcts
from . import visualization
from .structs import Cell

logger = logging.getLogger(__name__)


class Application:
    """Main application integrating visualization, interaction and the engine."""

    def __init__(
        self,
        mode: str = "play",
        human_side: Cell = Cell.RED,
        mcts_config: Optional[config.MCTSConfig] = None,
    ):
        if mode not in ("play", "debug"):
            raise ValueError(f"Unsupported application mode: {mode}")
        self.vis_config = config.VisConfig()
        self.env_config = config.EnvConfig()
        self.mode = mode

        pygame.init()
        pygame.font.init()
        self.screen = self._setup_screen()
        self.clock = pygame.time.Clock()
        self.fonts = visualization.load_fonts(self.vis_config)

        controller = mcts.SearchController(
            config=mcts_config, state=environment.GameState(self.env_config)
        )
        self.session = interaction.PlaySession(controller, human_side)
        self.visualizer = visualization.Visualizer(
            self.screen, self.vis_config, self.fonts
        )
        self.input_handler = interaction.InputHandler(
            self.session, self.visualizer, self.mode
        )
        self.running = True

    def _setup_screen(self) -> pygame.Surface:
        """Initializes the Pygame screen."""
        screen = pygame.display.set_mode(
            (self.vis_config.SCREEN_WIDTH, self.vis_config.SCREEN_HEIGHT),
            pygame.RESIZABLE,
        )
        pygame.display.set_caption(f"{config.APP_NAME} - {self.mode.capitalize()} Mode")
        return screen

    def run(self):
        """Main application loop."""
        logger.info(f"Starting application in {self.mode} mode.")
        while self.running:
            self.clock.tick(self.vis_config.FPS)

            self.running = self.input_handler.handle_input()
            if not self.running:
                break

            self.visualizer.render(self.session, self.mode)
            pygame.display.flip()

            # Search runs synchronously after the human's move is on screen
            if self.mode == "play" and self.session.is_engine_turn():
                interaction.run_engine_turn(self.session)

        logger.info("Application loop finished.")
        pygame.quit()
