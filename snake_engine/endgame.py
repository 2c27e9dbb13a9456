"""
Space-denial play for the last duel.

Once a single opponent is left and we are long relative to the board, the
normal food/hunting ladder is replaced by a score that rewards our own room,
punishes the opponent's room three times as hard and pulls us toward their
head.
"""
from typing import Iterable, List, Optional

from snake_engine.grid import lenient_passable
from snake_engine.model import Board, Coordinate, Snake, others
from snake_engine.observer import Observer, quiet
from snake_engine.space import reachable_space

ENDGAME_SIZE_THRESHOLD = 1.87   # own length / board height
OPPONENT_SPACE_WEIGHT = 3
PROXIMITY_WEIGHT = 2
# Moves that leave us less room than our length score from here up,
# so they still rank among themselves by how much room they keep.
TRAPPED_SCORE = -(10 ** 9)


def is_endgame(board: Board, you: Snake, snakes: Iterable[Snake]) -> bool:
    if len(others(you, snakes)) != 1:
        return False
    return you.length / board.height >= ENDGAME_SIZE_THRESHOLD


def endgame_score(position: Coordinate, board: Board, you: Snake, opponent: Snake,
                  snakes: List[Snake]) -> int:
    own_space = reachable_space(position, board, lenient_passable(board, you, snakes))
    if own_space < you.length:
        return TRAPPED_SCORE + own_space

    opponent_space = reachable_space(opponent.head, board, lenient_passable(board, opponent, snakes))
    distance = position.manhattan(opponent.head)
    return own_space - OPPONENT_SPACE_WEIGHT * opponent_space - PROXIMITY_WEIGHT * distance


def get_endgame_move(board: Board, you: Snake, snakes: Iterable[Snake], allowed: List[str],
                     log: Observer = quiet) -> Optional[str]:
    """Highest endgame score among allowed moves; ties keep the earliest move."""
    snakes = list(snakes)
    rivals = others(you, snakes)
    if not allowed or not rivals:
        return None
    opponent = rivals[0]

    best_move = None
    best_score = None
    for move in allowed:
        position = you.head.step(move)
        score = endgame_score(position, board, you, opponent, snakes)
        log(f"[Endgm] {move:<5} -> ({position.x},{position.y}) score={score}")
        if best_score is None or score > best_score:
            best_move, best_score = move, score
    log(f"[Endgm] chose {best_move} (score {best_score})")
    return best_move
