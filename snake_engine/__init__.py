from snake_engine.engine import MoveDecision, decide_move
from snake_engine.model import Board, Coordinate, Snake, snapshot_from_game_state

__all__ = ["Board", "Coordinate", "MoveDecision", "Snake", "decide_move", "snapshot_from_game_state"]
