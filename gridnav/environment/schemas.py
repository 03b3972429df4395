"""Pydantic schemas for grid snapshots.

These models mirror the dense ``Grid`` dataclass in ``grid.py`` but are
read-only and serializable, so renderers and listeners can be handed a copy of
the board without being able to mutate the live session.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Cell(str, Enum):
    """Mutually exclusive states a grid position can hold."""

    EMPTY = "empty"
    OBSTACLE = "obstacle"
    PLAYER = "player"
    TARGET = "target"
    PATH = "path"  # render-only trail marker


class GridState(BaseModel):
    """Dense snapshot of a grid: ``rows[row][col]`` → cell state."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    rows: List[List[Cell]] = Field(
        default_factory=list,
        description="Cell states in row-major order; height rows of width cells",
    )

    @model_validator(mode="after")
    def _check_dimensions(self) -> "GridState":
        if len(self.rows) != self.height:
            raise ValueError(f"expected {self.height} rows, got {len(self.rows)}")
        for index, row in enumerate(self.rows):
            if len(row) != self.width:
                raise ValueError(f"row {index} has {len(row)} cells, expected {self.width}")
        return self

    def cell_at(self, row: int, col: int) -> Cell:
        return self.rows[row][col]

    def positions_of(self, cell: Cell) -> List[Tuple[int, int]]:
        return [
            (r, c)
            for r, row in enumerate(self.rows)
            for c, value in enumerate(row)
            if value is cell
        ]
