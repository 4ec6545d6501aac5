"""Board and Direction model tests."""

from __future__ import annotations

import pytest

from backend.models.board import NOT_FOUND, Board, Direction

_BOARD = Board.from_rows([[8, 1, 3], [4, 0, 2], [7, 6, 5]])


@pytest.mark.parametrize("value", range(9))
def test_position_of_points_at_value(value: int) -> None:
    r, c = _BOARD.position_of(value)
    assert _BOARD.get_tile(r, c) == value


def test_position_of_missing_value_returns_sentinel() -> None:
    board = Board.from_rows([[1, 2, 4], [4, 5, 6], [7, 8, 0]])
    assert board.position_of(3) == NOT_FOUND == (-1, -1)


def test_key_is_row_major_with_row_separators() -> None:
    assert _BOARD.key == "813,402,765"


def test_key_differs_for_different_boards() -> None:
    other = _BOARD.swap((0, 0), (0, 1))
    assert other.key != _BOARD.key
    assert other != _BOARD


def test_equality_is_cell_by_cell() -> None:
    assert Board.from_flat([8, 1, 3, 4, 0, 2, 7, 6, 5]) == _BOARD


def test_swap_returns_new_board_and_leaves_original() -> None:
    before = _BOARD.tiles
    swapped = _BOARD.swap((1, 1), (0, 1))
    assert swapped.tiles == ((8, 0, 3), (4, 1, 2), (7, 6, 5))
    assert _BOARD.tiles == before


def test_is_tile_placed() -> None:
    goal = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    assert _BOARD.is_tile_placed(goal, 3)
    assert not _BOARD.is_tile_placed(goal, 1)


def test_row_strings() -> None:
    assert _BOARD.row_strings() == ["8 1 3", "4 0 2", "7 6 5"]


@pytest.mark.parametrize(
    "rows",
    [
        [[1, 2, 3], [4, 5, 6]],
        [[1, 2, 3], [4, 5], [6, 7, 8]],
        [[1, 2, 3, 4], [5, 6, 7], [8, 0, 9]],
    ],
)
def test_from_rows_rejects_wrong_shape(rows: list[list[int]]) -> None:
    with pytest.raises(ValueError):
        Board.from_rows(rows)


def test_from_flat_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        Board.from_flat([1, 2, 3])


@pytest.mark.parametrize(
    "direction, cost",
    [
        (Direction.UP, 1),
        (Direction.DOWN, 1),
        (Direction.LEFT, 2),
        (Direction.RIGHT, 2),
    ],
)
def test_direction_costs(direction: Direction, cost: int) -> None:
    assert direction.cost == cost
