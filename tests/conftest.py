"""Shared fixtures: a rich Console writing to memory stands in for the terminal."""

import io

import pytest
from rich.console import Console

from canvas import Canvas
from cli import Controller
from logic import FoodRecord

COLUMNS = 100
ROWS = 40


@pytest.fixture
def console(monkeypatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        width=COLUMNS,
        height=ROWS,
        color_system=None,
        highlight=False,
    )


@pytest.fixture
def canvas(console):
    return Canvas(console)


@pytest.fixture
def foods():
    return [
        FoodRecord("Egg", 70.0, 1.0, 5.0, 6.0, "each"),
        FoodRecord("Banana", 108.0, 28.8, 0.6, 1.4, "100g"),
    ]


@pytest.fixture
def controller(canvas, foods):
    return Controller(canvas, foods)
