from backend.engine.successors.generator import MOVE_ORDER, Successor, successors

__all__ = ["MOVE_ORDER", "Successor", "successors"]
