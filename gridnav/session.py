"""
Session orchestrator.

Owns the board, the player position and the optional target, and drives the
turn loop:
1. Render the board
2. If the player stands on the target, clear it and report arrival
3. Otherwise ask the input collaborator for a target
4. Validate the target against the grid
5. Search for a path (A*)
6. Walk the path one step at a time, rendering and pausing after each step

Renderer, input source and sleep function are injected so the loop can run
headless in tests.
"""

import asyncio
import random
from typing import Awaitable, Callable, List, Optional

from .environment import Cell, Coordinate, Grid, validate_target
from .input import ConsoleInput, InputSource
from .logging_utils import (
    colored,
    Color,
    LOG_TAG_DETERMINISTIC,
    is_verbose,
    log_error,
    log_info,
    log_success,
)
from .pathfinding import SearchResult, search
from .render import Renderer, TerminalRenderer
from .schemas import SessionSettings, SessionState, SessionSummary

SleepFn = Callable[[float], Awaitable[None]]
StepListener = Callable[[int, Coordinate, "Session"], None]


# =============================
# Module-level Exceptions
# =============================

class SessionError(Exception):
    """Raised when a session is constructed or driven inconsistently.

    User-facing outcomes (bad targets, unreachable targets, malformed input)
    never raise; they are reported and the turn loop continues.
    """


class Session:
    """Single-player navigation session over one generated grid."""

    def __init__(
        self,
        grid: Grid,
        player: Optional[Coordinate] = None,
        *,
        settings: Optional[SessionSettings] = None,
        renderer: Optional[Renderer] = None,
        input_source: Optional[InputSource] = None,
        sleep: Optional[SleepFn] = None,
        step_listeners: Optional[List[StepListener]] = None,
    ):
        """Initialize a session around an existing grid.

        Args:
            grid: Board to play on; the session mutates it in place
            player: Starting coordinate. When omitted the grid must already hold
                exactly one ``PLAYER`` cell.
            settings: Pauses and no-path behaviour (defaults to SessionSettings())
            renderer: Render collaborator (defaults to TerminalRenderer)
            input_source: Input collaborator (defaults to ConsoleInput)
            sleep: Coroutine used for pacing pauses (defaults to asyncio.sleep)
            step_listeners: Callables invoked after every movement step with
                (step_index, coordinate, session).
        """
        self.grid = grid
        self.settings = settings or SessionSettings(width=grid.width, height=grid.height)
        self.renderer = renderer or TerminalRenderer()
        self.input_source = input_source or ConsoleInput()
        self.sleep = sleep or asyncio.sleep
        self.step_listeners = step_listeners or []

        self._player = self._place_player(player)
        self._target = self._adopt_target()
        self.last_search: Optional[SearchResult] = None

    @classmethod
    def create(
        cls,
        settings: SessionSettings,
        *,
        rng: Optional[random.Random] = None,
        **kwargs,
    ) -> "Session":
        """Generate a board from ``settings`` and drop the player on an empty cell."""
        rng = rng or random.Random(settings.seed)
        grid = Grid.generate(
            settings.width,
            settings.height,
            obstacle_density=settings.obstacle_density,
            rng=rng,
        )
        player = grid.random_empty_coordinate(rng)
        return cls(grid, player, settings=settings, **kwargs)

    def _place_player(self, player: Optional[Coordinate]) -> Coordinate:
        existing = self.grid.coordinates_of(Cell.PLAYER)
        if player is None:
            if len(existing) != 1:
                raise SessionError(
                    f"Grid must contain exactly one player cell when no start is given, found {len(existing)}"
                )
            return existing[0]

        player = tuple(player)
        if not self.grid.is_walkable(player):
            raise SessionError(f"Player start {player} is out of bounds or on an obstacle")
        stray = [coord for coord in existing if coord != player]
        if stray:
            raise SessionError(f"Grid already holds a player at {stray[0]}")
        self.grid.set_cell(player, Cell.PLAYER)
        return player

    def _adopt_target(self) -> Optional[Coordinate]:
        targets = self.grid.coordinates_of(Cell.TARGET)
        if len(targets) > 1:
            raise SessionError(f"Grid holds {len(targets)} target cells, expected at most one")
        return targets[0] if targets else None

    # -------------------- state --------------------

    @property
    def player(self) -> Coordinate:
        return self._player

    @property
    def target(self) -> Optional[Coordinate]:
        return self._target

    @property
    def has_arrived(self) -> bool:
        return self._target is not None and self._player == self._target

    def snapshot(self) -> SessionState:
        return SessionState(grid=self.grid.snapshot(), player=self._player, target=self._target)

    # -------------------- targets --------------------

    def set_target(self, coord: Coordinate) -> bool:
        """Mark ``coord`` as the new target.

        Returns False (and changes nothing) when the coordinate is out of bounds
        or on an obstacle. Re-setting the current target is a no-op success.
        """
        if not validate_target(self.grid, coord):
            return False
        coord = tuple(coord)

        self._clear_target_cell()
        # The player cell stays PLAYER; arrival is detected from positions
        if coord != self._player:
            self.grid.set_cell(coord, Cell.TARGET)
        self._target = coord
        return True

    def clear_target(self) -> None:
        self._clear_target_cell()
        self._target = None

    def _clear_target_cell(self) -> None:
        if self._target is not None and self.grid.cell_at(self._target) is Cell.TARGET:
            self.grid.set_cell(self._target, Cell.EMPTY)

    # -------------------- movement --------------------

    def plan_path(self) -> SearchResult:
        """Search from the player to the current target."""
        if self._target is None:
            raise SessionError("No target set")
        result = search(self.grid, self._player, self._target)
        self.last_search = result
        if is_verbose():
            outcome = f"{result.length} step(s)" if result.found else "no path"
            print(
                colored(
                    f"  {LOG_TAG_DETERMINISTIC} [Search] {self._player} -> {self._target}: {outcome} "
                    f"(expanded={result.expanded}, pushed={result.pushed})",
                    Color.BLUE,
                )
            )
        return result

    async def apply_path(self, path: List[Coordinate]) -> int:
        """Walk the player along ``path``, rendering and pausing after each step.

        Returns the number of steps taken. The trail drawn over empty cells is
        erased once the walk completes.
        """
        self.grid.mark_path(path)

        steps = 0
        for coord in path:
            coord = tuple(coord)
            self.grid.set_cell(self._player, Cell.EMPTY)
            self.grid.set_cell(coord, Cell.PLAYER)
            self._player = coord
            steps += 1

            self._render()
            self._notify_step(steps, coord)
            await self._pause(self.settings.step_delay)

        self.grid.clear_transient_markers()
        return steps

    def _notify_step(self, index: int, coord: Coordinate) -> None:
        # Listener failures are reported but never interrupt the walk
        for listener in self.step_listeners:
            try:
                listener(index, coord, self)
            except Exception as exc:  # pragma: no cover - diagnostic hook
                print(f"  [Listener] Step listener failed: {exc}")

    # -------------------- loop --------------------

    def _render(self) -> None:
        self.renderer.render(self.grid.snapshot())

    async def _pause(self, seconds: float) -> None:
        await self.sleep(seconds)

    async def run(self) -> SessionSummary:
        """Run turns until the input collaborator signals quit or end of input."""
        summary = SessionSummary()

        while True:
            self._render()

            if self.has_arrived:
                self.clear_target()
                summary.arrivals += 1
                log_success("Arrived at the target!")
                await self._pause(self.settings.message_delay)
                continue

            request = await self.input_source.read()
            summary.turns += 1

            if request.kind == "quit":
                log_info("Game over")
                break

            if request.kind == "invalid":
                summary.malformed_inputs += 1
                log_error(request.reason or "Could not read coordinates")
                await self._pause(self.settings.invalid_delay)
                continue

            if not self.set_target(request.coordinate):
                summary.invalid_targets += 1
                log_error(
                    f"Invalid target {request.coordinate}: rows 0..{self.grid.height - 1}, "
                    f"cols 0..{self.grid.width - 1}, and not an obstacle"
                )
                await self._pause(self.settings.invalid_delay)
                continue

            result = self.plan_path()
            if result.path is None:
                summary.failed_searches += 1
                log_error(f"No path from {self._player} to {self._target}")
                if self.settings.clear_target_on_no_path:
                    self.clear_target()
                await self._pause(self.settings.message_delay)
                continue

            summary.moves += await self.apply_path(result.path)

        summary.final_player = self._player
        summary.final_target = self._target
        return summary
