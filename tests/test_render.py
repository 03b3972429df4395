"""Tests for the terminal render collaborator."""

import io

from gridnav.environment import Grid
from gridnav.logging_utils import Color
from gridnav.render import CLEAR_SCREEN, TerminalRenderer, render_grid


def test_render_grid_plain_layout():
    state = Grid.from_rows(["P#", "*T"]).snapshot()

    text = render_grid(state, color=False)

    assert text.splitlines() == [
        "+----+",
        "|⛄██|",
        "|··⭐|",
        "+----+",
    ]


def test_border_matches_grid_width():
    state = Grid.empty(20, 10).snapshot()

    lines = render_grid(state, color=False).splitlines()

    assert len(lines) == 12
    assert lines[0] == "+" + "-" * 40 + "+"
    assert all(line == "|" + " " * 40 + "|" for line in lines[1:-1])


def test_render_grid_colors_cells():
    state = Grid.from_rows(["#."]).snapshot()

    text = render_grid(state, color=True)

    assert f"{Color.RED.value}██{Color.RESET.value}" in text
    # Empty cells are never wrapped in escape codes
    assert text.splitlines()[1].endswith(f"{Color.RESET.value}  |")


def test_terminal_renderer_clears_and_draws():
    stream = io.StringIO()
    renderer = TerminalRenderer(color=False, stream=stream)

    renderer.render(Grid.from_rows(["P."]).snapshot())

    output = stream.getvalue()
    assert output.startswith(CLEAR_SCREEN)
    assert "|⛄  |" in output
    assert renderer.frames == 1


def test_terminal_renderer_respects_no_color_env(monkeypatch):
    monkeypatch.setenv("GRIDNAV_NO_COLOR", "1")
    stream = io.StringIO()
    renderer = TerminalRenderer(color=True, clear_screen=False, stream=stream)

    renderer.render(Grid.from_rows(["#"]).snapshot())

    assert "\x1b[" not in stream.getvalue()
