"""Bounded A* search where tiles 1, 2 and 3 take turns moving."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from backend.engine.heuristic import manhattan
from backend.engine.search.frontier import Frontier
from backend.engine.successors import successors
from backend.engine.turns import TurnTracker
from backend.models.board import Board
from backend.models.node import Node

logger = logging.getLogger(__name__)

EXPANSION_LIMIT = 10


class SearchOutcome(StrEnum):
    SOLVED = "solved"
    LIMIT_REACHED = "limit_reached"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SearchResult:
    outcome: SearchOutcome
    node: Node | None
    expanded: int

    @property
    def solved(self) -> bool:
        return self.outcome is SearchOutcome.SOLVED


class SearchReporter:
    """Receives search events. The base class ignores all of them."""

    def expanded(self, index: int, node: Node, goal: Board) -> None:
        pass

    def frontier(self, children: list[Node], selected: Node | None, goal: Board) -> None:
        """*selected* is the frontier minimum at the time of the call."""

    def limit_reached(self, limit: int) -> None:
        pass


class AStarSearch:
    """Runs one search per :meth:`run` call.

    The frontier, visited set and turn cursor are created inside ``run``,
    so an instance can be reused without carrying state between runs.
    """

    def __init__(
        self,
        goal: Board,
        reporter: SearchReporter | None = None,
        limit: int = EXPANSION_LIMIT,
    ) -> None:
        self.goal = goal
        self.reporter = reporter or SearchReporter()
        self.limit = limit

    def run(self, initial: Board) -> SearchResult:
        goal = self.goal
        frontier = Frontier()
        frontier.push(Node(board=initial, heuristic=manhattan(initial, goal)))
        visited: set[str] = set()
        turns = TurnTracker()
        expanded = 0

        while frontier:
            node = frontier.pop()
            tile = turns.settle(node.board, goal)

            key = node.board.key
            if key in visited:
                logger.debug("Skipping already expanded state %s", key)
                continue
            visited.add(key)
            expanded += 1
            self.reporter.expanded(expanded, node, goal)

            if node.board == goal:
                logger.info("Goal reached after %d expansions (path %s)", expanded, node.path)
                return SearchResult(SearchOutcome.SOLVED, node, expanded)

            if expanded >= self.limit:
                logger.info("Stopped at the %d expansion limit", self.limit)
                self.reporter.limit_reached(self.limit)
                return SearchResult(SearchOutcome.LIMIT_REACHED, None, expanded)

            children: list[Node] = []
            for succ in successors(node.board, tile):
                if succ.board.key in visited:
                    continue
                child = node.child(
                    succ.board,
                    succ.move,
                    succ.tile,
                    succ.cost,
                    manhattan(succ.board, goal),
                )
                frontier.push(child)
                children.append(child)
                logger.debug("Pushed %s with total cost %d", child.path, child.total_cost)

            self.reporter.frontier(children, frontier.peek(), goal)
            turns.advance()
            logger.debug("Turn passes to tile %d", turns.current)

        logger.info("Frontier exhausted after %d expansions", expanded)
        return SearchResult(SearchOutcome.EXHAUSTED, None, expanded)


def astar_search(
    initial: Board, goal: Board, reporter: SearchReporter | None = None
) -> Node | None:
    """Return the goal node, or ``None`` if the search stopped without it."""
    return AStarSearch(goal, reporter).run(initial).node
