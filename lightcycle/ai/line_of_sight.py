"""Weighted-continue steering policy."""

from __future__ import annotations

import random

from lightcycle.ai.strategy import DirectionStrategy
from lightcycle.core.board import Board
from lightcycle.core.models import ALL_DIRECTIONS, DEFAULT_RANDOMNESS_DIVISOR, Direction
from lightcycle.core.movement import collides, move
from lightcycle.core.trail import Agent, Trail

FALLBACK_DIRECTION = Direction.NORTH


class LineOfSightPolicy(DirectionStrategy):
    """Keep going straight most of the time, otherwise turn at random.

    A free straight step is kept unless a uniform draw in
    ``[0, randomness_divisor)`` comes up zero; then, or when the straight
    step is blocked, a uniformly random free direction is chosen. A drawn
    turn excludes the current heading unless it is the only free way. With
    no free direction the cycle heads north and crashes.
    """

    def __init__(self, rng: random.Random, randomness_divisor: int = DEFAULT_RANDOMNESS_DIVISOR) -> None:
        if randomness_divisor < 1:
            raise ValueError("randomness_divisor must be >= 1")
        self._rng = rng
        self._randomness_divisor = randomness_divisor

    @property
    def randomness_divisor(self) -> int:
        return self._randomness_divisor

    def choose_direction(self, agent: Agent, board: Board, rival: Trail) -> Direction:
        head = agent.head
        if head is None:
            return agent.heading

        straight_free = not collides(move(head, agent.heading), board, rival, agent.trail)
        if straight_free and self._rng.randrange(self._randomness_divisor) != 0:
            return agent.heading

        valid = [
            direction
            for direction in ALL_DIRECTIONS
            if not collides(move(head, direction), board, rival, agent.trail)
        ]
        if not valid:
            return FALLBACK_DIRECTION
        if straight_free:
            # A drawn turn must leave the line whenever another way is open.
            turns = [direction for direction in valid if direction is not agent.heading]
            if turns:
                return self._rng.choice(turns)
        return self._rng.choice(valid)
