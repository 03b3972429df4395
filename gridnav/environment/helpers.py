"""Utilities for grid movement: neighbours, distances, validation, ASCII views."""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .grid import Cell, Coordinate, Grid, SYMBOL_FOR_CELL
from .schemas import GridState

# Four-directional movement in a fixed order: up, down, left, right. The order
# feeds every search so equal-length paths are always chosen the same way.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def manhattan_distance(a: Coordinate, b: Coordinate) -> int:
    """Sum of absolute row and column differences."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def neighbors4(grid: Grid, coord: Coordinate) -> Iterator[Coordinate]:
    """Yield in-bounds, non-obstacle orthogonal neighbours of ``coord``."""
    r, c = coord
    for dr, dc in DIRECTIONS:
        nb = (r + dr, c + dc)
        # is_walkable checks bounds first, so off-grid neighbours never index the table
        if grid.is_walkable(nb):
            yield nb


def is_adjacent(a: Coordinate, b: Coordinate) -> bool:
    """True when ``a`` and ``b`` differ by one unit along exactly one axis."""
    return manhattan_distance(a, b) == 1


def grid_shortest_path(grid: Grid, start: Coordinate, goal: Coordinate) -> Optional[List[Coordinate]]:
    """Return a path of (row, col) coordinates avoiding obstacles.

    Uses BFS to find the shortest path. Returns None if the goal is unreachable.
    The returned path includes both start and goal. This is the plain
    brute-force reference for the A* search in ``gridnav.pathfinding``.
    """

    # Trivial case: already at goal
    if start == goal:
        return [start]

    visited = {start}
    queue: deque[Tuple[Coordinate, List[Coordinate]]] = deque([(start, [start])])

    while queue:
        # Process cells in FIFO order (BFS). First path to reach goal is shortest.
        coord, path = queue.popleft()
        for nb in neighbors4(grid, coord):
            if nb in visited:
                continue
            visited.add(nb)
            new_path = path + [nb]
            if nb == goal:
                return new_path
            queue.append((nb, new_path))
    # No path exists - goal blocked or disconnected
    return None


def bfs_distance(grid: Grid, start: Coordinate, goal: Coordinate) -> Optional[int]:
    """Number of steps on the shortest path from start to goal, or None."""
    path = grid_shortest_path(grid, start, goal)
    return None if path is None else len(path) - 1


def is_orthogonal_path(grid: Grid, start: Coordinate, path: Sequence[Coordinate]) -> bool:
    """Check that ``path`` walks from ``start`` one orthogonal step at a time.

    ``path`` excludes ``start`` (the shape returned by ``find_path``). Every
    coordinate must be in bounds and walkable.
    """
    previous = start
    for coord in path:
        if not grid.is_walkable(coord) or not is_adjacent(previous, coord):
            return False
        previous = coord
    return True


def validate_target(grid: Grid, target: Coordinate | List[int]) -> bool:
    """Validate whether ``target`` may be chosen as a destination.

    Checks two constraints:
    1. Target position is within grid bounds
    2. Target position is not an obstacle

    Reachability is deliberately not checked here; an unreachable target is a
    legitimate search outcome reported by the pathfinder.
    """
    # Normalize to tuples for consistent indexing
    coord = tuple(target) if isinstance(target, list) else target
    if len(coord) != 2:
        return False
    return grid.is_walkable(coord)


def render_ascii(state: GridState, *, symbols: Optional[Dict[Cell, str]] = None) -> str:
    """Render a plain-text view of a grid snapshot, one character per cell.

    Suitable for logs, test failure messages and non-ANSI terminals. Uses the
    same symbols as ``Grid.from_rows`` unless ``symbols`` overrides some.
    """
    mapping = {**SYMBOL_FOR_CELL}
    if symbols:
        mapping.update(symbols)
    return "\n".join("".join(mapping.get(cell, "?") for cell in row) for row in state.rows)
