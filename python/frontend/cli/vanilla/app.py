"""Vanilla terminal frontend — no third-party dependencies.

Prints every expansion and frontier child as plain text, with the board on
the left and the goal on the right.
"""

from __future__ import annotations

import sys
from typing import TextIO

from backend.engine.search import AStarSearch, SearchReporter, SearchResult
from backend.models.board import Board
from backend.models.node import Node

LABEL_WIDTH = 15
RULE = "-" * 30
BANNER = "+" * 18

SOLVED_MESSAGE = "Solution found!"
FAILED_MESSAGE = "No solution found or stopped after 10 expanded nodes."


# -- rendering ----------------------------------------------------------------


def render_pair(title: str, board: Board, goal: Board) -> list[str]:
    """Return the header, rule and rows of *board* beside *goal*."""
    lines = [f"{title:<{LABEL_WIDTH}} | Goal State", RULE]
    for row, goal_row in zip(board.row_strings(), goal.row_strings()):
        lines.append(f"{row:<{LABEL_WIDTH}} | {goal_row}")
    return lines


def cost_line(node: Node) -> str:
    return (
        f"Current Cost: {node.cost}, Heuristic: {node.heuristic}, "
        f"Total Cost: {node.total_cost}"
    )


class TextReporter(SearchReporter):
    """Writes the search trace to *out* (stdout by default)."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out or sys.stdout

    def write(self, line: str = "") -> None:
        print(line, file=self.out)

    def expanded(self, index: int, node: Node, goal: Board) -> None:
        self.write(f"{BANNER}Expanded Node {index}:{BANNER}")
        title = "Initial State" if index == 1 else "Current State"
        for line in render_pair(title, node.board, goal):
            self.write(line)
        self.write()
        self.write(cost_line(node))
        self.write()

    def frontier(self, children: list[Node], selected: Node | None, goal: Board) -> None:
        self.write("Fringe for the Node to be extended:")
        for child in children:
            for line in render_pair("State in Fringe", child.board, goal):
                self.write(line)
            suffix = " SELECTED" if child is selected else ""
            self.write(cost_line(child) + suffix)
            self.write()

    def limit_reached(self, limit: int) -> None:
        self.write(f"Stopping search, the {limit} node limit has been reached.")


# -- entry point --------------------------------------------------------------


def run(initial: Board, goal: Board, out: TextIO | None = None) -> SearchResult:
    """Search from *initial* to *goal*, printing the trace and the verdict."""
    reporter = TextReporter(out)
    result = AStarSearch(goal, reporter).run(initial)
    reporter.write(SOLVED_MESSAGE if result.solved else FAILED_MESSAGE)
    return result
