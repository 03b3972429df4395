"""
Pydantic schemas for gridnav sessions.

Design Philosophy:
- Settings are validated once at construction; the session never re-checks them
- Snapshots are plain data, safe to hand to renderers and listeners
- Input parsing produces a tagged ``TargetInput`` instead of raising
"""

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gridnav.environment import GridState


# ============================================================================
# Settings
# ============================================================================

class SessionSettings(BaseModel):
    """Tunable parameters for a session.

    The reference configuration is a 20-column by 10-row board with roughly 20%
    obstacles and a 300 ms pause between animation steps.
    """

    width: int = Field(20, gt=0, description="Number of columns")
    height: int = Field(10, gt=0, description="Number of rows")
    obstacle_density: float = Field(
        0.2, ge=0.0, lt=1.0, description="Per-cell obstacle probability"
    )
    seed: Optional[int] = Field(None, description="Seed for obstacle layout and player placement")
    step_delay: float = Field(0.3, ge=0.0, description="Seconds between movement steps")
    message_delay: float = Field(
        1.0, ge=0.0, description="Seconds to keep arrival and no-path messages visible"
    )
    invalid_delay: float = Field(
        0.5, ge=0.0, description="Seconds to keep invalid-target messages visible"
    )
    # Reference behaviour keeps an unreachable target on the board after a failed
    # search; the next accepted target replaces it.
    clear_target_on_no_path: bool = Field(
        False, description="Clear the target when no path to it exists"
    )


# ============================================================================
# Session Snapshots
# ============================================================================

class SessionState(BaseModel):
    """Read-only view of a session: the board plus player and target positions."""

    model_config = ConfigDict(frozen=True)

    grid: GridState
    player: Tuple[int, int]
    target: Optional[Tuple[int, int]] = None

    @property
    def arrived(self) -> bool:
        return self.target is not None and self.player == self.target


class SessionSummary(BaseModel):
    """Counters reported when the turn loop ends."""

    turns: int = 0
    moves: int = 0
    arrivals: int = 0
    invalid_targets: int = 0
    malformed_inputs: int = 0
    failed_searches: int = 0
    final_player: Optional[Tuple[int, int]] = None
    final_target: Optional[Tuple[int, int]] = None


# ============================================================================
# Input
# ============================================================================

class TargetInput(BaseModel):
    """One parsed line from the input collaborator.

    ``kind`` is ``"target"`` with ``coordinate`` set, ``"quit"`` on the quit token
    or end of input, or ``"invalid"`` with a human-readable ``reason``.
    """

    kind: Literal["target", "quit", "invalid"]
    coordinate: Optional[Tuple[int, int]] = None
    reason: Optional[str] = None
    raw: str = ""

    @model_validator(mode="after")
    def _coordinate_matches_kind(self) -> "TargetInput":
        if self.kind == "target" and self.coordinate is None:
            raise ValueError("target input requires a coordinate")
        if self.kind != "target" and self.coordinate is not None:
            raise ValueError(f"{self.kind} input must not carry a coordinate")
        return self

    @classmethod
    def target(cls, row: int, col: int, raw: str = "") -> "TargetInput":
        return cls(kind="target", coordinate=(row, col), raw=raw)

    @classmethod
    def quit(cls, raw: str = "") -> "TargetInput":
        return cls(kind="quit", raw=raw)

    @classmethod
    def invalid(cls, reason: str, raw: str = "") -> "TargetInput":
        return cls(kind="invalid", reason=reason, raw=raw)
