"""Reads 3×3 grids typed on the terminal or stored in a text file.

Each grid is three lines of three whitespace-separated integers::

    1 2 3
    4 5 6
    7 8 0
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from backend.models.board import SIZE, Board


class GridFormatError(ValueError):
    """Raised when the input does not hold a 3×3 grid of integers."""


# -- parsing -------------------------------------------------------------------


def parse_row(line: str) -> list[int]:
    tokens = line.split()
    if len(tokens) != SIZE:
        raise GridFormatError(f"Expected {SIZE} numbers per row, got {len(tokens)}: {line.strip()!r}")
    try:
        return [int(t) for t in tokens]
    except ValueError:
        raise GridFormatError(f"Row contains a non-integer value: {line.strip()!r}") from None


def read_board(lines: Iterator[str]) -> Board:
    """Consume three rows from *lines* and return the board they describe."""
    rows: list[list[int]] = []
    for i in range(SIZE):
        try:
            line = next(lines)
        except StopIteration:
            raise GridFormatError(f"Input ended after {i} of {SIZE} rows.") from None
        rows.append(parse_row(line))
    return Board.from_rows(rows)


def non_blank(lines: Iterable[str]) -> Iterator[str]:
    """Drop empty lines (used for grid files, where grids may be spaced apart)."""
    return (line for line in lines if line.strip())
