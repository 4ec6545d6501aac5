"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while reporting the same search
events as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.search import AStarSearch, SearchReporter, SearchResult
from backend.models.board import Board
from backend.models.node import Node
from frontend.cli.vanilla.app import FAILED_MESSAGE, SOLVED_MESSAGE


# -- board rendering ----------------------------------------------------------


def _render_pair(title: str, board: Board, goal: Board) -> Table:
    """Return a two-column Rich Table with *board* beside *goal*.

    Cells already matching the goal are shown in green.
    """
    table = Table(
        box=rich.box.SIMPLE_HEAVY,
        border_style="bright_blue",
        header_style="bold",
        padding=(0, 1),
    )
    table.add_column(title, min_width=15)
    table.add_column("Goal State")

    for r in range(len(board.tiles)):
        cells = Text()
        for c, val in enumerate(board.tiles[r]):
            if c:
                cells.append(" ")
            if val == 0:
                cells.append("·", style="dim")
            elif val == goal.get_tile(r, c):
                cells.append(str(val), style="bold green")
            else:
                cells.append(str(val), style="bold white")
        table.add_row(cells, " ".join(str(v) for v in goal.tiles[r]))
    return table


def _cost_text(node: Node, selected: bool = False) -> Text:
    text = Text()
    text.append("Current Cost: ", style="dim")
    text.append(str(node.cost), style="bold yellow")
    text.append("  Heuristic: ", style="dim")
    text.append(str(node.heuristic), style="bold yellow")
    text.append("  Total Cost: ", style="dim")
    text.append(str(node.total_cost), style="bold yellow")
    if selected:
        text.append("  SELECTED", style="bold green")
    return text


class RichReporter(SearchReporter):
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def expanded(self, index: int, node: Node, goal: Board) -> None:
        title = "Initial State" if index == 1 else "Current State"
        subtitle = f"[dim]{node.path}[/dim]" if node.path else None
        panel = Panel(
            Group(_render_pair(title, node.board, goal), _cost_text(node)),
            title=f"[bold cyan]Expanded Node {index}[/bold cyan]",
            subtitle=subtitle,
            border_style="cyan",
            padding=(0, 2),
        )
        self.console.print(panel)

    def frontier(self, children: list[Node], selected: Node | None, goal: Board) -> None:
        if not children:
            self.console.print("  [dim]No new states in the fringe.[/dim]\n")
            return
        self.console.print("  [bold]Fringe for the Node to be extended:[/bold]")
        for child in children:
            self.console.print(
                Group(
                    _render_pair("State in Fringe", child.board, goal),
                    _cost_text(child, child is selected),
                )
            )
        self.console.print()

    def limit_reached(self, limit: int) -> None:
        self.console.print(
            f"[yellow]Stopping search, the {limit} node limit has been reached.[/yellow]"
        )


# -- entry point --------------------------------------------------------------


def run(initial: Board, goal: Board, console: Console | None = None) -> SearchResult:
    reporter = RichReporter(console)
    result = AStarSearch(goal, reporter).run(initial)
    if result.solved:
        reporter.console.print(f"[bold green]{SOLVED_MESSAGE}[/bold green]")
    else:
        reporter.console.print(f"[red]{FAILED_MESSAGE}[/red]")
    return result
