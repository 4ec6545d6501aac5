"""Board model for the turn-taking tile search."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

SIZE = 3

# Returned by ``Board.position_of`` when a value is not on the board.
NOT_FOUND: tuple[int, int] = (-1, -1)


class Direction(StrEnum):
    """Direction a *tile* slides in (towards the blank)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def cost(self) -> int:
        """Vertical moves cost 1, horizontal moves cost 2."""
        return 1 if self in (Direction.UP, Direction.DOWN) else 2


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Board:
    """An immutable 3×3 arrangement of tiles.

    Tiles are stored as a tuple of row tuples. 0 represents the blank space.
    Every move produces a new ``Board``; existing boards are never changed.
    """

    tiles: tuple[tuple[int, ...], ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a list of rows.

        Example::

            Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
        """
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(
                f"Expected {SIZE} rows of {SIZE} tiles, "
                f"got row lengths {[len(row) for row in rows]}."
            )
        return cls(tiles=tuple(tuple(row) for row in rows))

    @classmethod
    def from_flat(cls, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list."""
        if len(flat) != SIZE * SIZE:
            raise ValueError(
                f"Expected {SIZE * SIZE} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(flat)}."
            )
        return cls.from_rows([flat[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)])

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def position_of(self, value: int) -> tuple[int, int]:
        """Return ``(row, col)`` of *value*, or ``NOT_FOUND`` if absent."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == value:
                    return (r, c)
        return NOT_FOUND

    def is_tile_placed(self, goal: Board, tile: int) -> bool:
        """Check if *tile* occupies the same cell here as in *goal*."""
        return self.position_of(tile) == goal.position_of(tile)

    @property
    def key(self) -> str:
        """Canonical string form, e.g. ``"123,456,780"``."""
        return ",".join("".join(str(v) for v in row) for row in self.tiles)

    def row_strings(self) -> list[str]:
        return [" ".join(str(v) for v in row) for row in self.tiles]

    # -- moves ----------------------------------------------------------------

    def swap(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        """Return a new board with the cells at *a* and *b* exchanged."""
        rows = [list(row) for row in self.tiles]
        (ar, ac), (br, bc) = a, b
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
        return Board(tiles=tuple(tuple(row) for row in rows))

    def __str__(self) -> str:
        return "\n".join(self.row_strings())
