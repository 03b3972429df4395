"""Tests for colored console logging helpers."""

from gridnav.logging_utils import (
    Color,
    LOG_TAG_ERROR,
    LOG_TAG_SUCCESS,
    colored,
    log_error,
    log_success,
)


def test_colored_wraps_text(monkeypatch):
    monkeypatch.delenv("GRIDNAV_NO_COLOR", raising=False)

    assert colored("hi", Color.GREEN) == f"{Color.GREEN.value}hi{Color.RESET.value}"
    assert colored("hi", Color.RED, bold=True).startswith(Color.BOLD.value + Color.RED.value)


def test_colored_respects_no_color(monkeypatch):
    monkeypatch.setenv("GRIDNAV_NO_COLOR", "1")

    assert colored("hi", Color.GREEN) == "hi"


def test_log_helpers_prefix_tags(monkeypatch, capsys):
    monkeypatch.setenv("GRIDNAV_NO_COLOR", "1")

    log_error("No path")
    log_success("Arrived")

    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"{LOG_TAG_ERROR} No path", f"{LOG_TAG_SUCCESS} Arrived"]
