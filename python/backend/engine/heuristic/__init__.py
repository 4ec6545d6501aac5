from backend.engine.heuristic.manhattan import TRACKED_TILES, manhattan

__all__ = ["TRACKED_TILES", "manhattan"]
