"""Input collaborators: parse target coordinates typed by the user."""

from __future__ import annotations

import asyncio
from typing import Iterable, List, Optional, Protocol

from .schemas import TargetInput

QUIT_TOKEN = "Q"
DEFAULT_PROMPT = "Enter target coordinates (e.g. 5 10, Q to quit): "


class InputSource(Protocol):
    """Anything the turn loop can ask for the next target."""

    async def read(self) -> TargetInput:  # pragma: no cover - protocol
        ...


def parse_target_input(line: str) -> TargetInput:
    """Parse one line into a target request, a quit request or a parse failure.

    Exactly two whitespace-separated integers form a ``(row, col)`` target. The
    single letter ``q`` (any case) quits. Anything else is reported as invalid;
    range checks belong to the session, so negative or oversized numbers still
    parse as a target.
    """
    raw = line.rstrip("\r\n")
    text = raw.strip()
    if text.upper() == QUIT_TOKEN:
        return TargetInput.quit(raw=raw)

    tokens = text.split()
    if len(tokens) != 2:
        return TargetInput.invalid(
            f"Please enter two numbers separated by a space (got {len(tokens)} value(s))",
            raw=raw,
        )
    try:
        row, col = (int(token) for token in tokens)
    except ValueError:
        return TargetInput.invalid(f"Coordinates must be whole numbers: {text!r}", raw=raw)
    return TargetInput.target(row, col, raw=raw)


class ConsoleInput:
    """Reads targets from stdin without blocking the event loop."""

    def __init__(self, prompt: str = DEFAULT_PROMPT) -> None:
        self.prompt = prompt

    async def read(self) -> TargetInput:
        try:
            line = await asyncio.to_thread(input, self.prompt)
        except EOFError:
            return TargetInput.quit()
        return parse_target_input(line)


class ScriptedInput:
    """Replays a fixed list of lines, then behaves like end of input."""

    def __init__(self, lines: Iterable[str], *, echo: bool = False) -> None:
        self._lines: List[str] = list(lines)
        self._index = 0
        self.echo = echo

    @property
    def remaining(self) -> int:
        return len(self._lines) - self._index

    def _next_line(self) -> Optional[str]:
        if self._index >= len(self._lines):
            return None
        line = self._lines[self._index]
        self._index += 1
        return line

    async def read(self) -> TargetInput:
        line = self._next_line()
        if line is None:
            return TargetInput.quit()
        if self.echo:
            print(f"{DEFAULT_PROMPT}{line}")
        return parse_target_input(line)
