"""Host-side tick pacing and input routing."""

from __future__ import annotations

import logging
from collections.abc import Callable
from time import monotonic

from lightcycle.app.input_policy import DoubleTapDetector, direction_from_touch
from lightcycle.core.rules import Simulation, TickOutcome
from lightcycle.infra.config import DriverSettings
from lightcycle.rendering.viewport import RenderFrame, Viewport, build_render_frame

logger = logging.getLogger(__name__)


class FixedStepAccumulator:
    """Accumulates variable deltas into fixed-step tick counts."""

    def __init__(self, step_seconds: float, *, max_steps_per_frame: int = 8) -> None:
        if step_seconds <= 0.0:
            raise ValueError("step_seconds must be > 0")
        if max_steps_per_frame <= 0:
            raise ValueError("max_steps_per_frame must be > 0")
        self._step_seconds = step_seconds
        self._max_steps_per_frame = max_steps_per_frame
        self._accumulated_seconds = 0.0

    @property
    def step_seconds(self) -> float:
        return self._step_seconds

    def consume(self, delta_seconds: float) -> int:
        """Return number of fixed steps to execute for this frame."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        self._accumulated_seconds += delta_seconds
        steps = int(self._accumulated_seconds // self._step_seconds)
        bounded_steps = min(steps, self._max_steps_per_frame)
        self._accumulated_seconds -= bounded_steps * self._step_seconds
        return bounded_steps


class TickDriver:
    """Paces simulation ticks at a fixed rate and routes host input.

    All calls are expected on the host's single event thread, which keeps
    ``resize`` serialized against ``tick``.
    """

    def __init__(
        self,
        simulation: Simulation,
        settings: DriverSettings,
        *,
        time_source: Callable[[], float] | None = None,
        max_delta_seconds: float = 0.25,
    ) -> None:
        if settings.fps <= 0:
            raise ValueError("fps must be > 0")
        if max_delta_seconds <= 0.0:
            raise ValueError("max_delta_seconds must be > 0")
        self._simulation = simulation
        self._settings = settings
        self._time_source = time_source or monotonic
        self._max_delta_seconds = max_delta_seconds
        self._visible = True
        self._accumulator = FixedStepAccumulator(1.0 / settings.fps)
        self._double_tap = DoubleTapDetector(settings.double_tap_ms)
        self._last_seconds: float | None = None
        self._surface_size: tuple[int, int] | None = None
        self._rounds_completed = 0

    @property
    def simulation(self) -> Simulation:
        return self._simulation

    @property
    def rounds_completed(self) -> int:
        return self._rounds_completed

    @property
    def visible(self) -> bool:
        return self._visible

    def advance(self, delta_seconds: float) -> list[TickOutcome]:
        """Run however many ticks the elapsed time calls for."""
        outcomes: list[TickOutcome] = []
        for _ in range(self._accumulator.consume(delta_seconds)):
            outcome = self._simulation.tick()
            if outcome.ended_round:
                self._rounds_completed += 1
                logger.debug(
                    "round_completed outcome=%s rounds=%d ticks=%d",
                    outcome.name,
                    self._rounds_completed,
                    self._simulation.tick_count,
                )
            outcomes.append(outcome)
        return outcomes

    def pump(self) -> list[TickOutcome]:
        """Advance by the wall-clock time since the previous pump.

        Nothing runs while hidden, and a single pump never covers more than
        ``max_delta_seconds`` of elapsed time.
        """
        if not self._visible:
            return []
        now = self._time_source()
        if self._last_seconds is None:
            delta = 0.0
        else:
            delta = min(max(0.0, now - self._last_seconds), self._max_delta_seconds)
        self._last_seconds = now
        return self.advance(delta)

    def on_visibility_changed(self, visible: bool) -> None:
        """Pause ticking while the surface is hidden."""
        if visible == self._visible:
            return
        self._visible = visible
        self._last_seconds = None
        logger.debug("visibility_changed visible=%s", visible)

    def on_surface_changed(self, width: int, height: int) -> Viewport:
        viewport = self._simulation.resize(width, height)
        self._surface_size = (width, height)
        return viewport

    def on_touch(self, x: float, y: float, timestamp_ms: int) -> None:
        """Handle a touch-down: double taps restart, single taps steer.

        Double taps are honoured even with ``user_control`` off; only
        single-tap steering is gated on it.
        """
        if self._double_tap.register(timestamp_ms):
            self._simulation.request_new_board()
            return
        if not self._settings.user_control or self._surface_size is None:
            return
        width, height = self._surface_size
        self._simulation.set_desired_direction(direction_from_touch(x, y, width, height))

    def render_frame(self) -> RenderFrame:
        return build_render_frame(self._simulation, show_walls=self._settings.show_walls)
