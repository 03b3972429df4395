"""
gridnav - turn-based grid navigation with A* pathfinding.

A player token crosses a fixed-size obstacle grid toward a chosen target,
walking the shortest orthogonal path and redrawing the board after each step.

No global config inside the library: settings, renderer, input source and
sleep function are all injected.
"""

__version__ = "0.1.0"

from .environment import (
    Cell,
    Coordinate,
    Grid,
    GridState,
    OutOfBoundsError,
    grid_shortest_path,
    manhattan_distance,
)
from .pathfinding import SearchResult, find_path, search
from .schemas import SessionSettings, SessionState, SessionSummary, TargetInput
from .session import Session, SessionError
from .input import ConsoleInput, ScriptedInput, parse_target_input
from .render import TerminalRenderer, render_grid

__all__ = [
    # Grid
    "Cell",
    "Coordinate",
    "Grid",
    "GridState",
    "OutOfBoundsError",
    "grid_shortest_path",
    "manhattan_distance",
    # Pathfinding
    "SearchResult",
    "find_path",
    "search",
    # Session
    "Session",
    "SessionError",
    "SessionSettings",
    "SessionState",
    "SessionSummary",
    # Collaborators
    "TargetInput",
    "ConsoleInput",
    "ScriptedInput",
    "parse_target_input",
    "TerminalRenderer",
    "render_grid",
]
