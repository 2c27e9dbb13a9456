from typing import Iterable, List, Optional

from snake_engine.astar import find_path
from snake_engine.food import first_step
from snake_engine.model import Board, Snake, others

AGGRESSION_HEALTH = 50


def smaller_snakes(you: Snake, snakes: Iterable[Snake]) -> List[Snake]:
    return [snake for snake in others(you, snakes) if snake.length < you.length]


def find_nearest_smaller_snake(board: Board, you: Snake, snakes: Iterable[Snake]) -> Optional[Snake]:
    """Closest strictly shorter opponent whose head A* can reach."""
    snakes = list(snakes)
    targets = sorted(smaller_snakes(you, snakes), key=lambda s: you.head.manhattan(s.head))
    for target in targets:
        if find_path(you.head, target.head, board, you, snakes) is not None:
            return target
    return None


def should_target_opponents(you: Snake, snakes: Iterable[Snake]) -> bool:
    return you.health >= AGGRESSION_HEALTH and bool(smaller_snakes(you, snakes))


def get_move_towards_opponent(board: Board, you: Snake, snakes: Iterable[Snake], allowed: List[str]) -> Optional[str]:
    snakes = list(snakes)
    target = find_nearest_smaller_snake(board, you, snakes)
    if target is None:
        return None
    path = find_path(you.head, target.head, board, you, snakes)
    return first_step(path, you.head, allowed)
