"""
A* shortest-path search over a ``Grid``.

Movement is 4-connected with unit step cost, so the Manhattan distance is an
admissible and consistent heuristic: exact on open terrain, a lower bound
everywhere else.

Frontier entries are ``(f, h, seq, coord)`` tuples on a ``heapq`` min-heap:
lower f first, then lower h (closer to the target), then FIFO by insertion
sequence. Stale duplicates are skipped on pop (lazy deletion) and a closed
coordinate is never expanded twice.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .environment.grid import Coordinate, Grid
from .environment.helpers import manhattan_distance, neighbors4

FrontierEntry = Tuple[int, int, int, Coordinate]  # (f, h, seq, coord)


@dataclass
class SearchResult:
    """Outcome of one search.

    ``path`` runs from the first step after ``start`` up to and including
    ``target``; it is empty when ``start == target`` and ``None`` when the target
    cannot be reached.
    """

    start: Coordinate
    target: Coordinate
    path: Optional[List[Coordinate]]
    expanded: int = 0
    pushed: int = 0

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def length(self) -> int:
        return len(self.path) if self.path is not None else 0


@dataclass
class _SearchState:
    frontier: List[FrontierEntry] = field(default_factory=list)
    closed: set = field(default_factory=set)
    g: Dict[Coordinate, int] = field(default_factory=dict)
    parent: Dict[Coordinate, Coordinate] = field(default_factory=dict)
    seq: int = 0
    pushed: int = 0

    def push(self, coord: Coordinate, g: int, h: int) -> None:
        self.seq += 1
        self.pushed += 1
        heapq.heappush(self.frontier, (g + h, h, self.seq, coord))


def _reconstruct_path(parent: Dict[Coordinate, Coordinate], start: Coordinate, end: Coordinate) -> List[Coordinate]:
    """Follow predecessor links back to ``start``; the result excludes ``start``."""
    path: List[Coordinate] = []
    cur = end
    while cur != start:
        path.append(cur)
        cur = parent[cur]
    path.reverse()
    return path


def search(grid: Grid, start: Coordinate, target: Coordinate) -> SearchResult:
    """Run A* from ``start`` to ``target`` and report the path plus counters.

    Both endpoints are assumed walkable; validating them is the caller's job.
    """
    start = tuple(start)
    target = tuple(target)
    if start == target:
        return SearchResult(start=start, target=target, path=[])

    state = _SearchState()
    state.g[start] = 0
    state.push(start, 0, manhattan_distance(start, target))

    while state.frontier:
        _, _, _, current = heapq.heappop(state.frontier)

        # Ignore stale entries for coordinates already finalized
        if current in state.closed:
            continue

        if current == target:
            return SearchResult(
                start=start,
                target=target,
                path=_reconstruct_path(state.parent, start, target),
                expanded=len(state.closed),
                pushed=state.pushed,
            )

        state.closed.add(current)
        tentative = state.g[current] + 1

        for neighbor in neighbors4(grid, current):
            if neighbor in state.closed:
                continue
            known = state.g.get(neighbor)
            if known is None or tentative < known:
                state.parent[neighbor] = current
                state.g[neighbor] = tentative
                state.push(neighbor, tentative, manhattan_distance(neighbor, target))

    # Frontier exhausted: obstacles separate start from target
    return SearchResult(
        start=start,
        target=target,
        path=None,
        expanded=len(state.closed),
        pushed=state.pushed,
    )


def find_path(grid: Grid, start: Coordinate, target: Coordinate) -> Optional[List[Coordinate]]:
    """Shortest orthogonal path from ``start`` to ``target``, or None if unreachable."""
    return search(grid, start, target).path
