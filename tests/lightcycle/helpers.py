from __future__ import annotations

import random

import numpy as np

from lightcycle.ai.strategy import DirectionStrategy
from lightcycle.core.board import Board
from lightcycle.core.models import Direction
from lightcycle.core.trail import Agent, Trail


class KeepHeading(DirectionStrategy):
    """Never turns on its own; used to force collisions."""

    def choose_direction(self, agent: Agent, board: Board, rival: Trail) -> Direction:
        return agent.heading


class ScriptedRandom(random.Random):
    """Random source with a fixed randrange result and recorded choices."""

    def __init__(self, draw: int) -> None:
        super().__init__(0)
        self.draw = draw
        self.choices: list[list[object]] = []

    def randrange(self, *args, **kwargs) -> int:  # type: ignore[override]
        return self.draw

    def choice(self, seq):  # type: ignore[override]
        self.choices.append(list(seq))
        return seq[0]


def open_board(width: int, height: int) -> Board:
    return Board(cells=np.ones((height, width), dtype=bool))


def board_from_rows(*rows: str) -> Board:
    """Build a board from strings where '.' is open and '#' is wall."""
    return Board(cells=np.array([[ch == "." for ch in row] for row in rows], dtype=bool))
