import numpy as np
import pytest

from lightcycle.core.board import board_dimensions, generate_board
from lightcycle.core.models import Cell, ExcludedRegion, InvalidLayout, LayoutConfig, WallRect


def test_dimensions_follow_icon_counts_and_spacing(corridor_layout) -> None:
    assert board_dimensions(corridor_layout) == (10, 7)
    board, _ = generate_board(corridor_layout)
    assert (board.width, board.height) == (10, 7)
    wide = LayoutConfig(icon_rows=3, icon_cols=5, row_spacing=1, col_spacing=4, corridor_width=2)
    assert board_dimensions(wide) == (5 * 6 + 2, 3 * 3 + 2)


def test_corridors_open_and_slot_interiors_walled(corridor_layout) -> None:
    board, _ = generate_board(corridor_layout)
    for x in (0, 3, 6, 9):
        for y in range(board.height):
            assert board.is_open(Cell(x, y))
    for y in (0, 3, 6):
        for x in range(board.width):
            assert board.is_open(Cell(x, y))
    assert not board.is_open(Cell(1, 1))
    assert not board.is_open(Cell(5, 5))


def test_wider_corridor_uses_modulo_less_than_rule() -> None:
    layout = LayoutConfig(icon_rows=1, icon_cols=2, row_spacing=2, col_spacing=2, corridor_width=2)
    board, _ = generate_board(layout)
    assert (board.width, board.height) == (10, 6)
    row = [board.is_open(Cell(x, 2)) for x in range(board.width)]
    assert row == [True, True, False, False, True, True, False, False, True, True]


def test_excluded_region_walls_slots_and_surrounding_corridor(corridor_layout) -> None:
    layout = LayoutConfig(
        icon_rows=2,
        icon_cols=3,
        row_spacing=2,
        col_spacing=2,
        excluded_regions=(ExcludedRegion(1, 0, 1, 0),),
    )
    board, wall_rects = generate_board(layout)
    for x in range(3, 7):
        for y in range(0, 4):
            assert not board.is_open(Cell(x, y))
    assert board.is_open(Cell(2, 0))
    assert board.is_open(Cell(7, 3))
    assert board.is_open(Cell(3, 4))
    assert wall_rects == (
        WallRect(3, 0, 7, 4),
        WallRect(1, 1, 3, 3),
        WallRect(7, 1, 9, 3),
        WallRect(1, 4, 3, 6),
        WallRect(4, 4, 6, 6),
        WallRect(7, 4, 9, 6),
    )


def test_four_by_four_zero_spacing_single_excluded_icon() -> None:
    corridor = 2
    layout = LayoutConfig(
        icon_rows=4,
        icon_cols=4,
        corridor_width=corridor,
        excluded_regions=(ExcludedRegion(0, 0, 0, 0),),
    )
    board, wall_rects = generate_board(layout)
    assert (board.width, board.height) == (4 * corridor + corridor, 4 * corridor + corridor)
    for x in range(2 * corridor):
        for y in range(2 * corridor):
            assert not board.is_open(Cell(x, y))
    assert board.is_open(Cell(2 * corridor, 0))
    assert board.is_open(Cell(0, 2 * corridor))
    assert wall_rects == (WallRect(0, 0, 2 * corridor, 2 * corridor),)
    assert int(np.count_nonzero(board.cells)) == 10 * 10 - 16


def test_regions_are_clipped_to_board(corridor_layout) -> None:
    outside = LayoutConfig(
        icon_rows=2,
        icon_cols=3,
        row_spacing=2,
        col_spacing=2,
        excluded_regions=(ExcludedRegion(5, 5, 6, 6),),
    )
    board, wall_rects = generate_board(outside)
    baseline, baseline_rects = generate_board(corridor_layout)
    assert board == baseline
    assert wall_rects == baseline_rects

    partial = LayoutConfig(
        icon_rows=2,
        icon_cols=3,
        row_spacing=2,
        col_spacing=2,
        excluded_regions=(ExcludedRegion(2, 1, 4, 3),),
    )
    _, rects = generate_board(partial)
    assert rects[0] == WallRect(6, 3, 10, 7)


@pytest.mark.parametrize(
    "layout",
    [
        LayoutConfig(icon_rows=4, icon_cols=4),
        LayoutConfig(icon_rows=5, icon_cols=4, row_spacing=3, col_spacing=2),
        LayoutConfig(
            icon_rows=4,
            icon_cols=4,
            row_spacing=1,
            col_spacing=1,
            corridor_width=3,
            excluded_regions=(ExcludedRegion(0, 0, 3, 1), ExcludedRegion(2, 3, 2, 3)),
        ),
    ],
)
def test_generate_is_deterministic_and_idempotent(layout: LayoutConfig) -> None:
    first_board, first_rects = generate_board(layout)
    second_board, second_rects = generate_board(layout)
    assert first_board == second_board
    assert first_board.cells.tobytes() == second_board.cells.tobytes()
    assert first_rects == second_rects


def test_generated_cells_are_read_only(open_layout) -> None:
    board, _ = generate_board(open_layout)
    with pytest.raises(ValueError):
        board.cells[0, 0] = False


@pytest.mark.parametrize("rows, cols", [(0, 4), (4, 0), (-1, 3)])
def test_non_positive_icon_counts_are_invalid(rows: int, cols: int) -> None:
    with pytest.raises(InvalidLayout):
        generate_board(LayoutConfig(icon_rows=rows, icon_cols=cols))


def test_open_cells_lists_row_major(corridor_layout) -> None:
    board, _ = generate_board(corridor_layout)
    cells = board.open_cells()
    assert cells[0] == Cell(0, 0)
    assert cells[1] == Cell(1, 0)
    assert Cell(1, 1) not in cells
    assert len(cells) == int(np.count_nonzero(board.cells))


@pytest.mark.parametrize(("row_spacing", "col_spacing"), [(0, 0), (0, 2), (3, 0)])
def test_zero_spacing_emits_no_empty_slot_rects(row_spacing: int, col_spacing: int) -> None:
    layout = LayoutConfig(icon_rows=3, icon_cols=3, row_spacing=row_spacing, col_spacing=col_spacing)
    _, wall_rects = generate_board(layout)
    assert wall_rects == ()
