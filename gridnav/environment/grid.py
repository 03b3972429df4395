"""Fixed-size obstacle grid.

The grid is a dense ``height x width`` table of :class:`Cell` values addressed by
``(row, col)`` coordinates. Obstacles are seeded once when the grid is
generated; afterwards only the session writes to it (player, target and the
transient path trail).
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple

from .schemas import Cell, GridState

Coordinate = Tuple[int, int]  # (row, col)


# Text layout symbols accepted by Grid.from_rows / produced by Grid.to_rows
CELL_SYMBOLS = {
    ".": Cell.EMPTY,
    "#": Cell.OBSTACLE,
    "P": Cell.PLAYER,
    "T": Cell.TARGET,
    "*": Cell.PATH,
}
SYMBOL_FOR_CELL = {cell: symbol for symbol, cell in CELL_SYMBOLS.items()}


class OutOfBoundsError(IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, coord: Coordinate, width: int, height: int) -> None:
        self.coord = coord
        self.width = width
        self.height = height
        super().__init__(
            f"Coordinate {coord} is outside the {height}x{width} grid "
            f"(rows 0..{height - 1}, cols 0..{width - 1})"
        )


@dataclass
class Grid:
    """Dense 2D grid of cells stored as ``cells[row][col]``."""

    width: int
    height: int
    cells: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if not self.cells:
            self.cells = [[Cell.EMPTY] * self.width for _ in range(self.height)]
        if len(self.cells) != self.height or any(len(row) != self.width for row in self.cells):
            raise ValueError(f"Cell table does not match {self.height}x{self.width} dimensions")

    # -------------------- construction --------------------

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        return cls(width=width, height=height)

    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        *,
        obstacle_density: float = 0.2,
        rng: random.Random | None = None,
    ) -> "Grid":
        """Create a grid with obstacles seeded independently per cell.

        Each cell becomes an obstacle with probability ``obstacle_density``.
        There is no connectivity check: two walkable cells may be unreachable
        from each other, and callers must handle that.
        """
        if not 0.0 <= obstacle_density < 1.0:
            raise ValueError(f"obstacle_density must be in [0, 1), got {obstacle_density}")
        rng = rng or random.Random()
        grid = cls.empty(width, height)
        for row in grid.cells:
            for col in range(width):
                if rng.random() < obstacle_density:
                    row[col] = Cell.OBSTACLE
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Grid":
        """Build a grid from a text layout (``.`` empty, ``#`` obstacle, ``P``, ``T``, ``*``)."""
        if not rows:
            raise ValueError("Layout must contain at least one row")
        width = len(rows[0])
        cells: List[List[Cell]] = []
        for r, line in enumerate(rows):
            if len(line) != width:
                raise ValueError(f"Row {r} has length {len(line)}, expected {width}")
            try:
                cells.append([CELL_SYMBOLS[ch] for ch in line])
            except KeyError as exc:
                raise ValueError(f"Unknown layout symbol {exc.args[0]!r} in row {r}") from exc
        return cls(width=width, height=len(rows), cells=cells)

    # -------------------- queries --------------------

    def is_within_bounds(self, coord: Coordinate) -> bool:
        row, col = coord
        return 0 <= row < self.height and 0 <= col < self.width

    def _check_bounds(self, coord: Coordinate) -> None:
        if not self.is_within_bounds(coord):
            raise OutOfBoundsError(tuple(coord), self.width, self.height)

    def cell_at(self, coord: Coordinate) -> Cell:
        self._check_bounds(coord)
        row, col = coord
        return self.cells[row][col]

    def is_walkable(self, coord: Coordinate) -> bool:
        """True for in-bounds cells that are not obstacles."""
        if not self.is_within_bounds(coord):
            return False
        row, col = coord
        return self.cells[row][col] is not Cell.OBSTACLE

    def coordinates(self) -> Iterator[Coordinate]:
        for row in range(self.height):
            for col in range(self.width):
                yield row, col

    def coordinates_of(self, cell: Cell) -> List[Coordinate]:
        return [coord for coord in self.coordinates() if self.cells[coord[0]][coord[1]] is cell]

    def count(self, cell: Cell) -> int:
        return sum(row.count(cell) for row in self.cells)

    def random_empty_coordinate(self, rng: random.Random | None = None) -> Coordinate:
        """Pick a uniformly random ``EMPTY`` coordinate."""
        candidates = self.coordinates_of(Cell.EMPTY)
        if not candidates:
            raise ValueError("Grid has no empty cell")
        return (rng or random.Random()).choice(candidates)

    # -------------------- mutation --------------------

    def set_cell(self, coord: Coordinate, value: Cell) -> None:
        """Write ``value`` at ``coord``. Callers keep the Player/Target invariants."""
        self._check_bounds(coord)
        row, col = coord
        self.cells[row][col] = value

    def mark_path(self, path: Iterable[Coordinate]) -> int:
        """Draw the trail for ``path`` over empty cells. Returns the number marked."""
        marked = 0
        for coord in path:
            if self.cell_at(coord) is Cell.EMPTY:
                self.set_cell(coord, Cell.PATH)
                marked += 1
        return marked

    def clear_transient_markers(self) -> int:
        """Reset every ``PATH`` cell to ``EMPTY``. Returns the number cleared."""
        cleared = 0
        for row in self.cells:
            for col, cell in enumerate(row):
                if cell is Cell.PATH:
                    row[col] = Cell.EMPTY
                    cleared += 1
        return cleared

    # -------------------- snapshots --------------------

    def to_rows(self) -> List[str]:
        return ["".join(SYMBOL_FOR_CELL[cell] for cell in row) for row in self.cells]

    def copy(self) -> "Grid":
        return Grid(width=self.width, height=self.height, cells=[list(row) for row in self.cells])

    def snapshot(self) -> GridState:
        """Return a serializable, read-only copy for renderers."""
        return GridState(
            width=self.width,
            height=self.height,
            rows=[list(row) for row in self.cells],
        )
