"""Generates the boards reachable by moving the tile that has the turn."""

from __future__ import annotations

from typing import NamedTuple

from backend.models.board import SIZE, Board, Direction

# Fixed enumeration order; it decides frontier insertion order on ties.
MOVE_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


class Successor(NamedTuple):
    board: Board
    move: Direction
    tile: int
    cost: int


def successors(board: Board, tile: int) -> list[Successor]:
    """Return every board reached by sliding *tile* into an adjacent blank.

    A tile missing from *board* has no successors.
    """
    r, c = board.position_of(tile)
    result: list[Successor] = []
    for move in MOVE_ORDER:
        dr, dc = move.offset
        nr, nc = r + dr, c + dc
        if 0 <= nr < SIZE and 0 <= nc < SIZE and board.get_tile(nr, nc) == 0:
            result.append(
                Successor(board.swap((r, c), (nr, nc)), move, tile, move.cost)
            )
    return result
