"""Core domain models used by simulation logic."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

CORRIDOR_WIDTH = 1
DEFAULT_RANDOMNESS_DIVISOR = 250


class InvalidLayout(ValueError):
    """Raised when a layout cannot produce a board."""


class Direction(StrEnum):
    """Heading of a light cycle. Grid y grows downward."""

    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    def opposite(self) -> Direction:
        """Return the direction facing the other way."""
        return _OPPOSITES[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

ALL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
)


class AgentRole(StrEnum):
    """Owner of a trail."""

    PLAYER = "PLAYER"
    OPPONENT = "OPPONENT"


@dataclass(frozen=True, slots=True)
class Cell:
    """Grid coordinate."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class ExcludedRegion:
    """Launcher widget footprint in icon-grid units, inclusive on every edge."""

    left: int
    top: int
    right: int
    bottom: int

    def __post_init__(self) -> None:
        if min(self.left, self.top, self.right, self.bottom) < 0:
            raise ValueError("excluded region coordinates must be >= 0")
        if self.left > self.right:
            left, right = self.right, self.left
            object.__setattr__(self, "left", left)
            object.__setattr__(self, "right", right)
        if self.top > self.bottom:
            top, bottom = self.bottom, self.top
            object.__setattr__(self, "top", top)
            object.__setattr__(self, "bottom", bottom)

    def covers(self, col: int, row: int) -> bool:
        """Return whether the icon slot at (col, row) lies under this region."""
        return self.left <= col <= self.right and self.top <= row <= self.bottom


@dataclass(frozen=True, slots=True)
class WallRect:
    """Renderable wall rectangle in grid units; right/bottom are exclusive."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


@dataclass(frozen=True, slots=True)
class Padding:
    """Pixel padding between the surface edges and the grid."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    def __post_init__(self) -> None:
        if min(self.left, self.top, self.right, self.bottom) < 0:
            raise ValueError("padding values must be >= 0")


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Immutable snapshot of everything that shapes the board and its AI."""

    icon_rows: int
    icon_cols: int
    row_spacing: int = 0
    col_spacing: int = 0
    padding: Padding = field(default_factory=Padding)
    excluded_regions: tuple[ExcludedRegion, ...] = ()
    randomness_divisor: int = DEFAULT_RANDOMNESS_DIVISOR
    corridor_width: int = CORRIDOR_WIDTH

    def __post_init__(self) -> None:
        if self.row_spacing < 0:
            raise ValueError("row_spacing must be >= 0")
        if self.col_spacing < 0:
            raise ValueError("col_spacing must be >= 0")
        if self.randomness_divisor < 1:
            raise ValueError("randomness_divisor must be >= 1")
        if self.corridor_width < 1:
            raise ValueError("corridor_width must be >= 1")
        if not isinstance(self.excluded_regions, tuple):
            object.__setattr__(self, "excluded_regions", tuple(self.excluded_regions))

    @property
    def column_period(self) -> int:
        return self.col_spacing + self.corridor_width

    @property
    def row_period(self) -> int:
        return self.row_spacing + self.corridor_width

    def shape_key(self) -> tuple[object, ...]:
        """Fields that change the generated board when they differ."""
        return (
            self.icon_rows,
            self.icon_cols,
            self.row_spacing,
            self.col_spacing,
            self.excluded_regions,
            self.corridor_width,
        )
