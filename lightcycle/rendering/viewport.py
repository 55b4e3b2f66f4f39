"""Grid-to-surface transform and render frame assembly."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lightcycle.core.board import Board
from lightcycle.core.models import AgentRole, Cell, Padding, WallRect

if TYPE_CHECKING:
    from lightcycle.core.rules import Simulation


@dataclass(frozen=True, slots=True)
class Viewport:
    """Scale, translation and rotation from grid units to surface pixels.

    ``surface_width``/``surface_height`` are the oriented dimensions: in
    landscape they are swapped relative to the physical surface.
    """

    scale_x: float
    scale_y: float
    offset_x: float
    offset_y: float
    landscape: bool
    rotation_degrees: float
    pivot_x: float
    pivot_y: float
    surface_width: int
    surface_height: int

    def to_surface(self, x: float, y: float) -> tuple[float, float]:
        """Map a grid point to surface pixels."""
        px = x * self.scale_x + self.offset_x
        py = y * self.scale_y + self.offset_y
        if not self.landscape:
            return px, py
        # Counter-clockwise quarter turn about the pivot, y axis pointing down.
        return (
            self.pivot_x + (py - self.pivot_y),
            self.pivot_y - (px - self.pivot_x),
        )


def resize(board: Board, surface_width: int, surface_height: int, padding: Padding) -> Viewport:
    """Fit the board into a surface, rotating the layout when wider than tall."""
    if surface_width <= 0 or surface_height <= 0:
        raise ValueError("surface dimensions must be > 0")
    landscape = surface_width > surface_height
    width, height = (surface_height, surface_width) if landscape else (surface_width, surface_height)

    if landscape:
        scale_x = (width - padding.top) / float(board.width)
        scale_y = (height - (padding.bottom + padding.left + padding.right)) / float(board.height)
        offset_x, offset_y = 0.0, float(padding.left)
        rotation = -90.0
    else:
        scale_x = (width - (padding.left + padding.right)) / float(board.width)
        scale_y = (height - (padding.top + padding.bottom)) / float(board.height)
        offset_x, offset_y = float(padding.left), float(padding.top)
        rotation = 0.0

    pivot = width / 2.0
    return Viewport(
        scale_x=scale_x,
        scale_y=scale_y,
        offset_x=offset_x,
        offset_y=offset_y,
        landscape=landscape,
        rotation_degrees=rotation,
        pivot_x=pivot,
        pivot_y=pivot,
        surface_width=width,
        surface_height=height,
    )


@dataclass(frozen=True, slots=True)
class RenderFrame:
    """Everything a renderer needs for one frame, in grid units."""

    viewport: Viewport | None
    trails: dict[AgentRole, tuple[Cell, ...]]
    wall_rects: tuple[WallRect, ...]


def build_render_frame(simulation: Simulation, *, show_walls: bool = True) -> RenderFrame:
    """Snapshot trails and walls for the renderer."""
    return RenderFrame(
        viewport=simulation.viewport,
        trails={
            AgentRole.PLAYER: simulation.player.trail.cells(),
            AgentRole.OPPONENT: simulation.opponent.trail.cells(),
        },
        wall_rects=simulation.wall_rects if show_walls else (),
    )
