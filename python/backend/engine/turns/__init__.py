from backend.engine.turns.tracker import TurnTracker

__all__ = ["TurnTracker"]
