"""Tests for target input parsing and input collaborators."""

import builtins

import pytest

from gridnav.input import ConsoleInput, ScriptedInput, parse_target_input


@pytest.mark.parametrize(
    "line, expected",
    [
        ("5 10", (5, 10)),
        ("  0   3  \n", (0, 3)),
        ("9\t19", (9, 19)),
        # Range checks belong to the session
        ("-1 4", (-1, 4)),
        ("10 0", (10, 0)),
    ],
)
def test_two_integers_form_a_target(line, expected):
    request = parse_target_input(line)

    assert request.kind == "target"
    assert request.coordinate == expected


@pytest.mark.parametrize("line", ["q", "Q", "  q  ", "Q\n"])
def test_quit_token_is_case_insensitive(line):
    request = parse_target_input(line)

    assert request.kind == "quit"
    assert request.coordinate is None


@pytest.mark.parametrize("line", ["", "5", "1 2 3", "a b", "1.5 2", "quit", "qq"])
def test_everything_else_is_invalid(line):
    request = parse_target_input(line)

    assert request.kind == "invalid"
    assert request.coordinate is None
    assert request.reason


@pytest.mark.asyncio
async def test_scripted_input_replays_then_quits():
    source = ScriptedInput(["1 2", "oops"])

    first = await source.read()
    second = await source.read()
    third = await source.read()

    assert first.coordinate == (1, 2)
    assert second.kind == "invalid"
    assert third.kind == "quit"
    assert source.remaining == 0


@pytest.mark.asyncio
async def test_console_input_reads_a_line(monkeypatch):
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        return "4 7"

    monkeypatch.setattr(builtins, "input", fake_input)

    request = await ConsoleInput(prompt="> ").read()

    assert request.coordinate == (4, 7)
    assert prompts == ["> "]


@pytest.mark.asyncio
async def test_console_input_end_of_file_quits(monkeypatch):
    def closed_stdin(prompt=""):
        raise EOFError

    monkeypatch.setattr(builtins, "input", closed_stdin)

    request = await ConsoleInput().read()

    assert request.kind == "quit"
