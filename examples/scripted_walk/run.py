"""
Scripted walk

Replays a fixed list of targets on a hand-drawn board so the animation can be
watched without typing. Shows a normal walk, a malformed line, an out-of-range
target, a target inside a walled-off pocket and an obstacle target.

Run: python examples/scripted_walk/run.py
"""

import argparse
import asyncio

from gridnav import Grid, ScriptedInput, Session, SessionSettings, TerminalRenderer
from gridnav.logging_utils import log_info

LAYOUT = [
    "P.......#...........",
    "..####..#...........",
    ".....#..#....###....",
    ".....#.......#.#....",
    ".....#.......###....",
    "..........#.........",
    "...####...#.........",
    "..........#....##...",
    "...................#",
    "..................#.",
]

SCRIPT = [
    "0 3",      # short hop along the top row
    "nonsense",
    "10 0",     # row 10 does not exist on a 10-row board
    "3 14",     # enclosed by obstacles: no path
    "1 2",      # obstacle
    "9 19",     # corner cut off by two obstacles: no path
    "9 0",
    "q",
]


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Scripted gridnav walk")
    parser.add_argument("--step-delay", type=float, default=0.15, help="Seconds between steps")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    return parser.parse_args()


async def main(args: argparse.Namespace) -> None:
    grid = Grid.from_rows(LAYOUT)
    settings = SessionSettings(
        width=grid.width,
        height=grid.height,
        step_delay=args.step_delay,
        message_delay=0.8,
        invalid_delay=0.8,
    )
    session = Session(
        grid,
        settings=settings,
        renderer=TerminalRenderer(color=not args.no_color),
        input_source=ScriptedInput(SCRIPT, echo=True),
    )
    summary = await session.run()
    log_info(summary.model_dump_json(indent=2))


if __name__ == "__main__":
    asyncio.run(main(parse_args()))
