"""Trail and agent state."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from lightcycle.core.models import AgentRole, Cell, Direction


class Trail:
    """Ordered occupation history with set-backed membership checks.

    Oldest cell first; the head is the most recently appended cell.
    """

    __slots__ = ("_cells", "_occupied")

    def __init__(self, cells: list[Cell] | None = None) -> None:
        self._cells: list[Cell] = []
        self._occupied: set[Cell] = set()
        for cell in cells or ():
            self.append(cell)

    @property
    def head(self) -> Cell | None:
        return self._cells[-1] if self._cells else None

    @property
    def tail(self) -> Cell | None:
        return self._cells[0] if self._cells else None

    def append(self, cell: Cell) -> None:
        """Occupy a new head cell."""
        if cell in self._occupied:
            raise ValueError(f"cell already in trail: ({cell.x}, {cell.y})")
        self._cells.append(cell)
        self._occupied.add(cell)

    def reset(self, start: Cell | None) -> None:
        """Drop the history and optionally seed a single starting cell."""
        self._cells.clear()
        self._occupied.clear()
        if start is not None:
            self.append(start)

    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._occupied

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Trail(len={len(self._cells)}, head={self.head!r})"


@dataclass(slots=True)
class Agent:
    """Light cycle: a trail, a heading and, for the player, a desired heading."""

    role: AgentRole
    heading: Direction
    trail: Trail = field(default_factory=Trail)
    desired_direction: Direction | None = None

    @property
    def head(self) -> Cell | None:
        return self.trail.head

    @property
    def is_player(self) -> bool:
        return self.role is AgentRole.PLAYER
