"""Steering strategy contract shared by both light cycles."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from lightcycle.core.board import Board
from lightcycle.core.models import Direction
from lightcycle.core.movement import collides, move
from lightcycle.core.trail import Agent, Trail

logger = logging.getLogger(__name__)


class DirectionStrategy(ABC):
    """Resolves one heading per tick for an agent.

    The player's desired direction is honoured here for every strategy:
    it is adopted whenever the step is free, and dropped once the strategy
    is forced onto a different heading.
    """

    def steer(self, agent: Agent, board: Board, rival: Trail) -> Direction:
        """Resolve and store the agent heading for this tick."""
        head = agent.head
        if head is None:
            return agent.heading

        desired = agent.desired_direction if agent.is_player else None
        if desired is not None and not collides(move(head, desired), board, rival, agent.trail):
            agent.heading = desired
            return desired

        direction = self.choose_direction(agent, board, rival)
        if desired is not None and direction is not agent.heading:
            logger.debug(
                "desired_direction_cleared desired=%s heading=%s resolved=%s",
                desired.value,
                agent.heading.value,
                direction.value,
            )
            agent.desired_direction = None
        agent.heading = direction
        return direction

    @abstractmethod
    def choose_direction(self, agent: Agent, board: Board, rival: Trail) -> Direction:
        """Return the next heading for an agent with a non-empty trail."""
