from backend.engine.search.astar import (
    EXPANSION_LIMIT,
    AStarSearch,
    SearchOutcome,
    SearchReporter,
    SearchResult,
    astar_search,
)
from backend.engine.search.frontier import Frontier

__all__ = [
    "EXPANSION_LIMIT",
    "AStarSearch",
    "Frontier",
    "SearchOutcome",
    "SearchReporter",
    "SearchResult",
    "astar_search",
]
