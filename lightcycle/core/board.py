"""Board generation from icon layouts."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from lightcycle.core.models import Cell, InvalidLayout, LayoutConfig, WallRect

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Board:
    """Numpy-backed open/wall grid indexed as ``cells[y, x]``; True is open."""

    cells: np.ndarray

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    def in_bounds(self, cell: Cell) -> bool:
        """Return whether the cell lies on the grid."""
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def is_open(self, cell: Cell) -> bool:
        """Return whether the cell is on the grid and not a wall."""
        return self.in_bounds(cell) and bool(self.cells[cell.y, cell.x])

    def open_cells(self) -> list[Cell]:
        """List every open cell in row-major order."""
        ys, xs = np.nonzero(self.cells)
        return [Cell(int(x), int(y)) for y, x in zip(ys, xs, strict=True)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells.shape == other.cells.shape and bool(np.array_equal(self.cells, other.cells))

    def __hash__(self) -> int:
        return hash((self.cells.shape, self.cells.tobytes()))


def board_dimensions(layout: LayoutConfig) -> tuple[int, int]:
    """Return (width, height) in cells for the layout."""
    width = layout.icon_cols * layout.column_period + layout.corridor_width
    height = layout.icon_rows * layout.row_period + layout.corridor_width
    return width, height


def generate_board(layout: LayoutConfig) -> tuple[Board, tuple[WallRect, ...]]:
    """Build the corridor grid and its wall rectangles for a layout."""
    if layout.icon_rows <= 0 or layout.icon_cols <= 0:
        raise InvalidLayout(
            f"icon rows/cols must be positive, got {layout.icon_rows}x{layout.icon_cols}"
        )
    width, height = board_dimensions(layout)
    corridor = layout.corridor_width

    open_cols = np.arange(width) % layout.column_period < corridor
    open_rows = np.arange(height) % layout.row_period < corridor
    cells = open_rows[:, np.newaxis] | open_cols[np.newaxis, :]

    wall_rects: list[WallRect] = []
    for region in layout.excluded_regions:
        rect = _region_footprint(layout, region.left, region.top, region.right, region.bottom)
        rect = _clip(rect, width, height)
        if rect is None:
            continue
        cells[rect.top : rect.bottom, rect.left : rect.right] = False
        wall_rects.append(rect)

    # Zero spacing leaves slot interiors empty; nothing to draw.
    has_slot_interiors = layout.row_spacing > 0 and layout.col_spacing > 0
    for row in range(layout.icon_rows if has_slot_interiors else 0):
        for col in range(layout.icon_cols):
            if any(region.covers(col, row) for region in layout.excluded_regions):
                continue
            left = col * layout.column_period + corridor
            top = row * layout.row_period + corridor
            wall_rects.append(
                WallRect(left, top, left + layout.col_spacing, top + layout.row_spacing)
            )

    cells.setflags(write=False)
    logger.debug(
        "board_generated width=%d height=%d open=%d wall_rects=%d",
        width,
        height,
        int(np.count_nonzero(cells)),
        len(wall_rects),
    )
    return Board(cells=cells), tuple(wall_rects)


def _region_footprint(layout: LayoutConfig, left: int, top: int, right: int, bottom: int) -> WallRect:
    # Slots plus one corridor on every edge.
    return WallRect(
        left * layout.column_period,
        top * layout.row_period,
        (right + 1) * layout.column_period + layout.corridor_width,
        (bottom + 1) * layout.row_period + layout.corridor_width,
    )


def _clip(rect: WallRect, width: int, height: int) -> WallRect | None:
    left = min(rect.left, width)
    top = min(rect.top, height)
    right = min(rect.right, width)
    bottom = min(rect.bottom, height)
    if right <= left or bottom <= top:
        return None
    return WallRect(left, top, right, bottom)
