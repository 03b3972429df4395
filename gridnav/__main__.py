"""
Interactive grid navigation demo.

Run: python -m gridnav --seed 7
"""

from __future__ import annotations

import argparse
import asyncio
import os
from typing import List, Optional

from pydantic import ValidationError

from .config import Config
from .logging_utils import log_error, log_info
from .render import TerminalRenderer
from .schemas import SessionSummary
from .session import Session


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Grid navigation with A* pathfinding")
    parser.add_argument("--width", type=int, help=f"Number of columns (default {Config.GRID_WIDTH})")
    parser.add_argument("--height", type=int, help=f"Number of rows (default {Config.GRID_HEIGHT})")
    parser.add_argument(
        "--density",
        type=float,
        help=f"Obstacle probability per cell (default {Config.OBSTACLE_DENSITY})",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument(
        "--step-delay",
        type=float,
        help=f"Seconds between movement steps (default {Config.STEP_DELAY})",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument(
        "--clear-target-on-no-path",
        action="store_true",
        default=None,
        help="Forget the target when no path to it exists",
    )
    return parser.parse_args(argv)


async def main(args: argparse.Namespace) -> Optional[SessionSummary]:
    """Main entry point."""
    if args.no_color:
        os.environ["GRIDNAV_NO_COLOR"] = "1"

    try:
        Config.validate()
        settings = Config.session_settings(
            width=args.width,
            height=args.height,
            obstacle_density=args.density,
            seed=args.seed,
            step_delay=args.step_delay,
            clear_target_on_no_path=args.clear_target_on_no_path,
        )
    except (ValueError, ValidationError) as exc:
        log_error(f"Invalid configuration: {exc}")
        return None

    session = Session.create(settings, renderer=TerminalRenderer(color=not args.no_color))
    summary = await session.run()
    log_info(
        f"Moves: {summary.moves}, arrivals: {summary.arrivals}, "
        f"failed searches: {summary.failed_searches}"
    )
    return summary


def cli(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        summary = asyncio.run(main(args))
    except KeyboardInterrupt:
        return 130
    return 0 if summary is not None else 2


if __name__ == "__main__":
    raise SystemExit(cli())
