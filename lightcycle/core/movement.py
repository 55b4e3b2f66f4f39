"""Single-step movement and collision checks."""

from __future__ import annotations

from lightcycle.core.board import Board
from lightcycle.core.models import Cell, Direction
from lightcycle.core.trail import Trail


def move(cell: Cell, direction: Direction | None) -> Cell:
    """Translate a cell one unit along the direction; None leaves it in place."""
    if direction is None:
        return cell
    dx, dy = direction.delta
    return Cell(cell.x + dx, cell.y + dy)


def is_open(board: Board, cell: Cell) -> bool:
    """Return whether the cell is in bounds and not a wall."""
    return board.is_open(cell)


def collides(cell: Cell, board: Board, *trails: Trail) -> bool:
    """Return whether entering the cell ends the round."""
    if not board.is_open(cell):
        return True
    return any(cell in trail for trail in trails)
