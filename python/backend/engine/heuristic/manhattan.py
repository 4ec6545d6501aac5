"""Narrowed Manhattan-distance heuristic."""

from __future__ import annotations

from backend.models.board import Board

# Only these tiles contribute; 4..8 and the blank are ignored.
TRACKED_TILES: tuple[int, ...] = (1, 2, 3)


def manhattan(board: Board, goal: Board) -> int:
    """Sum of row/column displacement of tiles 1, 2 and 3 from *goal*."""
    distance = 0
    for tile in TRACKED_TILES:
        r1, c1 = board.position_of(tile)
        r2, c2 = goal.position_of(tile)
        distance += abs(r1 - r2) + abs(c1 - c2)
    return distance
