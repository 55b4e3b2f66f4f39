"""Round orchestration: ticking, resets and reconfiguration."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto

from lightcycle.ai.line_of_sight import LineOfSightPolicy
from lightcycle.ai.strategy import DirectionStrategy
from lightcycle.core.board import Board, generate_board
from lightcycle.core.models import AgentRole, Cell, Direction, LayoutConfig, WallRect
from lightcycle.core.movement import collides, move
from lightcycle.core.trail import Agent
from lightcycle.rendering.viewport import Viewport, resize

logger = logging.getLogger(__name__)

PLAYER_START_HEADING = Direction.EAST


class SimulationState(Enum):
    """Round lifecycle."""

    RUNNING = auto()
    ROUND_OVER = auto()


class TickOutcome(Enum):
    """Result of a single tick."""

    ADVANCED = auto()
    PLAYER_CRASHED = auto()
    OPPONENT_CRASHED = auto()
    IDLE = auto()

    @property
    def ended_round(self) -> bool:
        return self in (TickOutcome.PLAYER_CRASHED, TickOutcome.OPPONENT_CRASHED)


@dataclass(frozen=True, slots=True)
class ReconfigureResult:
    """What a reconfigure call re-derived."""

    board_changed: bool
    viewport_changed: bool
    policy_changed: bool

    @property
    def changed(self) -> bool:
        return self.board_changed or self.viewport_changed or self.policy_changed


class Simulation:
    """Two light cycles chasing each other over a generated board.

    Not reentrant: ``tick``, ``resize`` and ``reconfigure`` must be called from
    one logical timeline.
    """

    def __init__(
        self,
        layout: LayoutConfig,
        rng: random.Random,
        *,
        player_strategy: DirectionStrategy | None = None,
        opponent_strategy: DirectionStrategy | None = None,
    ) -> None:
        self._rng = rng
        self._custom_player_strategy = player_strategy is not None
        self._custom_opponent_strategy = opponent_strategy is not None
        self._player_strategy = player_strategy or LineOfSightPolicy(rng, layout.randomness_divisor)
        self._opponent_strategy = opponent_strategy or LineOfSightPolicy(rng, layout.randomness_divisor)
        self._layout = layout
        self._board, self._wall_rects = generate_board(layout)
        self._player = Agent(role=AgentRole.PLAYER, heading=PLAYER_START_HEADING)
        self._opponent = Agent(role=AgentRole.OPPONENT, heading=PLAYER_START_HEADING.opposite())
        self._state = SimulationState.RUNNING
        self._surface_size: tuple[int, int] | None = None
        self._viewport: Viewport | None = None
        self._round_index = 0
        self._tick_count = 0
        self._reset_agents()

    @property
    def layout(self) -> LayoutConfig:
        return self._layout

    @property
    def board(self) -> Board:
        return self._board

    @property
    def wall_rects(self) -> tuple[WallRect, ...]:
        return self._wall_rects

    @property
    def player(self) -> Agent:
        return self._player

    @property
    def opponent(self) -> Agent:
        return self._opponent

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def viewport(self) -> Viewport | None:
        return self._viewport

    @property
    def round_index(self) -> int:
        return self._round_index

    @property
    def tick_count(self) -> int:
        return self._tick_count

    def tick(self) -> TickOutcome:
        """Advance both cycles by one cell, ending the round on any collision."""
        player_head = self._player.head
        opponent_head = self._opponent.head
        if player_head is None or opponent_head is None:
            return TickOutcome.IDLE
        self._tick_count += 1

        self._player_strategy.steer(self._player, self._board, self._opponent.trail)
        candidate = move(player_head, self._player.heading)
        if collides(candidate, self._board, self._opponent.trail, self._player.trail):
            self._end_round(AgentRole.PLAYER, candidate)
            return TickOutcome.PLAYER_CRASHED
        self._player.trail.append(candidate)

        self._opponent_strategy.steer(self._opponent, self._board, self._player.trail)
        candidate = move(opponent_head, self._opponent.heading)
        if collides(candidate, self._board, self._player.trail, self._opponent.trail):
            self._end_round(AgentRole.OPPONENT, candidate)
            return TickOutcome.OPPONENT_CRASHED
        self._opponent.trail.append(candidate)
        return TickOutcome.ADVANCED

    def set_desired_direction(self, direction: Direction | None) -> None:
        """Record the direction the user wants the player to take."""
        self._player.desired_direction = direction
        logger.debug("desired_direction=%s", direction.value if direction else None)

    def request_new_board(self) -> None:
        """Restart both cycles on the current board."""
        logger.info("new_board_requested round=%d", self._round_index)
        self._reset_agents()

    def resize(self, width: int, height: int) -> Viewport:
        """Recompute the viewport for a new surface size."""
        self._viewport = resize(self._board, width, height, self._layout.padding)
        self._surface_size = (width, height)
        logger.debug(
            "resize width=%d height=%d landscape=%s scale_x=%.3f scale_y=%.3f",
            width,
            height,
            self._viewport.landscape,
            self._viewport.scale_x,
            self._viewport.scale_y,
        )
        return self._viewport

    def reconfigure(self, layout: LayoutConfig) -> ReconfigureResult:
        """Swap in a new layout, re-deriving only what the differences require."""
        previous = self._layout
        board_changed = layout.shape_key() != previous.shape_key()
        padding_changed = layout.padding != previous.padding
        policy_changed = layout.randomness_divisor != previous.randomness_divisor

        if board_changed:
            try:
                board, wall_rects = generate_board(layout)
            except ValueError:
                logger.warning(
                    "reconfigure_rejected icon_rows=%d icon_cols=%d",
                    layout.icon_rows,
                    layout.icon_cols,
                )
                raise
            self._board, self._wall_rects = board, wall_rects

        self._layout = layout
        if policy_changed:
            self._rebuild_default_strategies()

        viewport_changed = False
        if (board_changed or padding_changed) and self._surface_size is not None:
            self.resize(*self._surface_size)
            viewport_changed = True

        if board_changed:
            self._reset_agents()

        result = ReconfigureResult(
            board_changed=board_changed,
            viewport_changed=viewport_changed,
            policy_changed=policy_changed,
        )
        if result.changed:
            logger.info(
                "reconfigured board_changed=%s viewport_changed=%s policy_changed=%s width=%d height=%d",
                board_changed,
                viewport_changed,
                policy_changed,
                self._board.width,
                self._board.height,
            )
        return result

    def _rebuild_default_strategies(self) -> None:
        divisor = self._layout.randomness_divisor
        if not self._custom_player_strategy:
            self._player_strategy = LineOfSightPolicy(self._rng, divisor)
        if not self._custom_opponent_strategy:
            self._opponent_strategy = LineOfSightPolicy(self._rng, divisor)

    def _end_round(self, role: AgentRole, crash_cell: Cell) -> None:
        self._state = SimulationState.ROUND_OVER
        logger.info(
            "round_over round=%d crashed=%s x=%d y=%d player_len=%d opponent_len=%d",
            self._round_index,
            role.value,
            crash_cell.x,
            crash_cell.y,
            len(self._player.trail),
            len(self._opponent.trail),
        )
        self._reset_agents()

    def _reset_agents(self) -> None:
        open_cells = self._board.open_cells()
        player_start = self._rng.choice(open_cells) if open_cells else None
        self._player.trail.reset(player_start)
        opponent_choices = [cell for cell in open_cells if cell != player_start]
        opponent_start = self._rng.choice(opponent_choices) if opponent_choices else None
        self._opponent.trail.reset(opponent_start)

        self._player.heading = PLAYER_START_HEADING
        self._opponent.heading = PLAYER_START_HEADING.opposite()
        self._player.desired_direction = None
        self._round_index += 1
        self._state = SimulationState.RUNNING
        if player_start is None or opponent_start is None:
            logger.warning(
                "no_start_cells open=%d width=%d height=%d",
                len(open_cells),
                self._board.width,
                self._board.height,
            )
