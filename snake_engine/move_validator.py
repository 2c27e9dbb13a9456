from typing import Iterable, List, Optional

from snake_engine.grid import strict_passable
from snake_engine.model import DIRECTIONS, Board, Coordinate, Snake


def is_safe_move(position: Coordinate, board: Board, you: Snake, snakes: Iterable[Snake]) -> bool:
    """
    True when moving the head onto position cannot kill us this turn.

    Unsafe: off the board, into our own body (tail excluded unless we are
    eating), into any other body, onto a hazard, or next to the head of a
    snake at least as long as us.
    """
    return strict_passable(board, you, snakes)(position)


def get_safe_moves(board: Board, you: Snake, snakes: Optional[Iterable[Snake]] = None) -> List[str]:
    """
    Returns:
        safe_moves (list): directions, in DIRECTIONS order, that are immediately safe
    """
    snakes = board.snakes if snakes is None else list(snakes)
    passable = strict_passable(board, you, snakes)
    return [move for move in DIRECTIONS if passable(you.head.step(move))]


def get_in_bounds_moves(board: Board, you: Snake) -> List[str]:
    return [move for move in DIRECTIONS if board.in_bounds(you.head.step(move))]


def get_non_self_colliding_moves(board: Board, you: Snake) -> List[str]:
    """In-bounds moves that avoid our own body, ignoring everything else on the board."""
    moves = []
    for move in DIRECTIONS:
        position = you.head.step(move)
        if not board.in_bounds(position):
            continue
        # Eating freezes the tail in place
        body = you.body if position in board.food else you.body[:-1]
        if position not in body:
            moves.append(move)
    return moves
