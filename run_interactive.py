# File: run_interactive.py
import sys
import argparse
import logging
import traceback

from hexmcts import app, config
from hexmcts.structs import Cell


logging.basicConfig(
    level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="HexMCTS Interactive Modes")
    parser.add_argument(
        "--mode",
        type=str,
        default="play",
        choices=["play", "debug"],
        help="Interaction mode ('play' or 'debug')",
    )
    parser.add_argument(
        "--human-side",
        type=str,
        default="red",
        choices=["red", "blue"],
        help="Side played by the human in play mode (red moves first)",
    )
    parser.add_argument(
        "--time-limit-ms", type=int, default=1000, help="Engine time budget per move"
    )
    args = parser.parse_args()

    logger.info(f"Running in {args.mode.capitalize()} mode...")

    mcts_config = config.MCTSConfig(time_limit_ms=args.time_limit_ms)
    config.log_config_info_and_validate(mcts_config)

    try:
        app_instance = app.Application(
            mode=args.mode,
            human_side=Cell[args.human_side.upper()],
            mcts_config=mcts_config,
        )
        app_instance.run()
    except ImportError as e:
        logger.error(f"ImportError: {e}")
        logger.error("Please ensure:")
        logger.error("1. You are running from the project root directory.")
        logger.error("2. Dependencies are installed (`pip install -e .`).")
        sys.exit(1)
    except Exception as e:
        logger.critical(f"An unhandled error occurred: {e}")
        traceback.print_exc()
        sys.exit(1)

    logger.info("Exiting.")
