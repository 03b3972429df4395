"""Terminal render collaborator.

Every redraw clears the screen and prints the whole board inside a border sized
to the grid. Each cell is two characters wide so the board looks square in most
terminal fonts.
"""

from __future__ import annotations

import sys
from typing import Dict, List, Optional, Protocol, TextIO, Tuple

from .environment import Cell, GridState
from .logging_utils import Color, colors_enabled

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"

# Cell → (glyph, color). Glyphs are two columns wide.
DEFAULT_GLYPHS: Dict[Cell, Tuple[str, Optional[Color]]] = {
    Cell.EMPTY: ("  ", None),
    Cell.OBSTACLE: ("██", Color.RED),
    Cell.PLAYER: ("⛄", Color.GREEN),
    Cell.TARGET: ("⭐", Color.YELLOW),
    Cell.PATH: ("··", Color.BLUE),
}


class Renderer(Protocol):
    """Anything the session can hand a board snapshot to."""

    def render(self, state: GridState) -> None:  # pragma: no cover - protocol
        ...


def _paint(glyph: str, color: Optional[Color], use_color: bool) -> str:
    if not use_color or color is None:
        return glyph
    return f"{color.value}{glyph}{Color.RESET.value}"


def render_grid(
    state: GridState,
    *,
    color: bool = True,
    glyphs: Optional[Dict[Cell, Tuple[str, Optional[Color]]]] = None,
) -> str:
    """Return the bordered board for ``state`` as a single string."""
    mapping = {**DEFAULT_GLYPHS}
    if glyphs:
        mapping.update(glyphs)

    border = "+" + "-" * (state.width * 2) + "+"
    lines: List[str] = [border]
    for row in state.rows:
        painted = "".join(_paint(*mapping[cell], use_color=color) for cell in row)
        lines.append(f"|{painted}|")
    lines.append(border)
    return "\n".join(lines)


class TerminalRenderer:
    """Full-screen redraw of the board on a text stream."""

    def __init__(
        self,
        *,
        color: bool = True,
        clear_screen: bool = True,
        stream: Optional[TextIO] = None,
    ) -> None:
        # GRIDNAV_NO_COLOR wins over the constructor flag
        self.color = color and colors_enabled()
        self.clear_screen = clear_screen
        self.stream = stream or sys.stdout
        self.frames = 0

    def render(self, state: GridState) -> None:
        if self.clear_screen:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(render_grid(state, color=self.color) + "\n")
        self.stream.flush()
        self.frames += 1
