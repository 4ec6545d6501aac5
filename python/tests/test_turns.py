"""Turn tracker tests."""

from __future__ import annotations

import pytest

from backend.engine.turns import TurnTracker
from backend.models.board import Board

GOAL = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])


@pytest.mark.parametrize(
    "rows, start, expected",
    [
        # nothing placed: the turn stays
        ([[2, 3, 1], [4, 5, 6], [7, 8, 0]], 1, 1),
        # 1 placed, 2 not
        ([[1, 3, 2], [4, 5, 6], [7, 8, 0]], 1, 2),
        # 1 and 2 placed, 3 not
        ([[1, 2, 0], [4, 5, 3], [7, 8, 6]], 1, 3),
        # all placed: three checks bring the turn back around
        ([[1, 2, 3], [4, 5, 0], [7, 8, 6]], 1, 1),
        ([[1, 2, 3], [4, 5, 0], [7, 8, 6]], 2, 2),
        # 3 placed wraps to 1
        ([[2, 1, 3], [4, 5, 6], [7, 8, 0]], 3, 1),
    ],
)
def test_settle(rows: list[list[int]], start: int, expected: int) -> None:
    tracker = TurnTracker(start)
    assert tracker.settle(Board.from_rows(rows), GOAL) == expected
    assert tracker.current == expected


def test_advance_cycles_through_three_tiles() -> None:
    tracker = TurnTracker()
    assert [tracker.advance() for _ in range(4)] == [2, 3, 1, 2]


def test_settle_then_advance_skips_a_turn() -> None:
    tracker = TurnTracker()
    tracker.settle(Board.from_rows([[1, 3, 2], [4, 5, 6], [7, 8, 0]]), GOAL)
    assert tracker.advance() == 3


@pytest.mark.parametrize("start", [0, 4])
def test_rejects_start_outside_turn_tiles(start: int) -> None:
    with pytest.raises(ValueError):
        TurnTracker(start)
