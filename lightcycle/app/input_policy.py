"""Touch input translation for the host surface."""

from __future__ import annotations

from lightcycle.core.models import Direction


def direction_from_touch(x: float, y: float, surface_width: float, surface_height: float) -> Direction:
    """Map a touch to the heading pointing from the surface center toward it."""
    delta_x = surface_width / 2.0 - x
    delta_y = surface_height / 2.0 - y
    if abs(delta_x) > abs(delta_y):
        return Direction.WEST if delta_x > 0 else Direction.EAST
    return Direction.NORTH if delta_y > 0 else Direction.SOUTH


class DoubleTapDetector:
    """Detects two taps landing within a short threshold of each other."""

    def __init__(self, threshold_ms: int = 100) -> None:
        if threshold_ms < 0:
            raise ValueError("threshold_ms must be >= 0")
        self._threshold_ms = threshold_ms
        self._last_tap_ms: int | None = None

    def register(self, timestamp_ms: int) -> bool:
        """Record a tap; return True when it completes a double tap."""
        last = self._last_tap_ms
        if last is not None and timestamp_ms - last < self._threshold_ms:
            self._last_tap_ms = None
            return True
        self._last_tap_ms = timestamp_ms
        return False
