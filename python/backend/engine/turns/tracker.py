"""Decides which of tiles 1..3 is allowed to move next."""

from __future__ import annotations

import logging

from backend.models.board import Board

logger = logging.getLogger(__name__)

TURN_TILES = 3


class TurnTracker:
    """Holds the turn cursor for a single search run.

    Each expansion calls :meth:`settle` on the selected board, which checks
    the current tile three times and passes the turn on while that tile is
    already in its goal cell. After children are generated, :meth:`advance`
    passes the turn on once more regardless of placement, so a turn can be
    skipped when both steps fire.
    """

    def __init__(self, start: int = 1) -> None:
        if not 1 <= start <= TURN_TILES:
            raise ValueError(f"Turn must start on a tile in 1..{TURN_TILES}, got {start}.")
        self.current = start

    @staticmethod
    def next_tile(tile: int) -> int:
        return tile % TURN_TILES + 1

    def settle(self, board: Board, goal: Board) -> int:
        """Skip past placed tiles (at most three checks) and return the active tile."""
        for _ in range(TURN_TILES):
            if board.is_tile_placed(goal, self.current):
                logger.debug("Tile %d already placed, passing the turn", self.current)
                self.current = self.next_tile(self.current)
        return self.current

    def advance(self) -> int:
        self.current = self.next_tile(self.current)
        return self.current
