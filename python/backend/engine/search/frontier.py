"""Priority queue of nodes waiting to be expanded."""

from __future__ import annotations

import heapq
import itertools

from backend.models.node import Node


class Frontier:
    """Min-heap on total cost; equal costs come out in insertion order."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Node]] = []
        self._counter = itertools.count()

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, (node.total_cost, next(self._counter), node))

    def pop(self) -> Node:
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Node | None:
        return self._heap[0][2] if self._heap else None

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
