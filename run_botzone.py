# File: run_botzone.py
import sys
import argparse
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from hexmcts import config
from hexmcts.errors import HexMCTSError
from hexmcts.mcts import SearchController
from hexmcts.protocol import BotzoneAdapter

from logger import TeeLogger

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="HexMCTS engine speaking the keep-running JSON protocol on stdin/stdout"
    )
    parser.add_argument(
        "--time-limit-ms", type=int, default=None, help="Base time budget per move"
    )
    parser.add_argument(
        "--exploration", type=float, default=None, help="UCT exploration coefficient"
    )
    parser.add_argument(
        "--rollout-policy",
        type=str,
        default=None,
        choices=["branching", "single"],
        help="Rollout policy used by the search",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--log-file", type=str, default=None, help="Also write stderr to this file"
    )
    return parser.parse_args(argv)


def serve(args: argparse.Namespace) -> int:
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        # stdout is the protocol channel: logs go to stderr only
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    overrides: Dict[str, Any] = {}
    if args.time_limit_ms is not None:
        overrides["time_limit_ms"] = args.time_limit_ms
    if args.exploration is not None:
        overrides["exploration_coefficient"] = args.exploration
    if args.rollout_policy is not None:
        overrides["rollout_policy"] = args.rollout_policy

    try:
        mcts_config = config.MCTSConfig(**overrides)
        validated = config.log_config_info_and_validate(mcts_config)
    except (ValidationError, ValueError) as e:
        logger.critical(f"Invalid configuration: {e}")
        return 2

    adapter = BotzoneAdapter(
        controller=SearchController(config=validated["MCTS"]),  # type: ignore[arg-type]
        config=validated["Protocol"],  # type: ignore[arg-type]
    )
    try:
        adapter.run(sys.stdin, sys.stdout)
    except HexMCTSError as e:
        logger.critical(f"Engine failure: {e}", exc_info=True)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if not args.log_file:
        return serve(args)
    # The handler is created inside the block so it writes through the tee
    with TeeLogger(args.log_file):
        return serve(args)


if __name__ == "__main__":
    sys.exit(main())
