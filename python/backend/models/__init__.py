from backend.models.board import NOT_FOUND, SIZE, Board, Direction
from backend.models.node import Node

__all__ = ["NOT_FOUND", "SIZE", "Board", "Direction", "Node"]
