"""Search tree node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from backend.models.board import Board, Direction


@dataclass(frozen=True)
class Node:
    """A board reached during the search, with its cost bookkeeping.

    ``path`` carries the move log (``"1-DOWN-2-LEFT-"``), so the parent
    chain is only needed for diagnostics.
    """

    board: Board
    parent: Node | None = field(default=None, repr=False, compare=False)
    move: Direction | None = None
    tile: int = 0
    cost: int = 0
    heuristic: int = 0
    path: str = ""

    @property
    def total_cost(self) -> int:
        return self.cost + self.heuristic

    def child(
        self,
        board: Board,
        move: Direction,
        tile: int,
        move_cost: int,
        heuristic: int,
    ) -> Node:
        """Build the node reached by sliding *tile* in direction *move*."""
        return Node(
            board=board,
            parent=self,
            move=move,
            tile=tile,
            cost=self.cost + move_cost,
            heuristic=heuristic,
            path=f"{self.path}{tile}-{move.value.upper()}-",
        )

    # -- diagnostics ----------------------------------------------------------

    def lineage(self) -> Iterator[Node]:
        """Yield the nodes from the root down to this one."""
        chain: list[Node] = []
        node: Node | None = self
        while node is not None:
            chain.append(node)
            node = node.parent
        yield from reversed(chain)

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.lineage()) - 1
