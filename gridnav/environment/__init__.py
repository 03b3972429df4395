"""Grid environment for gridnav: cells, the grid itself, snapshots and helpers."""

from .schemas import Cell, GridState
from .grid import CELL_SYMBOLS, Coordinate, Grid, OutOfBoundsError
from .helpers import (
    DIRECTIONS,
    bfs_distance,
    grid_shortest_path,
    is_adjacent,
    is_orthogonal_path,
    manhattan_distance,
    neighbors4,
    render_ascii,
    validate_target,
)

__all__ = [
    "Cell",
    "CELL_SYMBOLS",
    "Coordinate",
    "Grid",
    "GridState",
    "OutOfBoundsError",
    "DIRECTIONS",
    "bfs_distance",
    "grid_shortest_path",
    "is_adjacent",
    "is_orthogonal_path",
    "manhattan_distance",
    "neighbors4",
    "render_ascii",
    "validate_target",
]
