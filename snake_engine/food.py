from typing import Iterable, List, Optional

from snake_engine.astar import find_path
from snake_engine.grid import lenient_passable, strict_passable
from snake_engine.model import Board, Coordinate, Snake, direction_between, with_snake
from snake_engine.size import GrowthMode
from snake_engine.space import reachable_space

# --- Constants ---
CRITICAL_HEALTH = 5       # eat no matter what the size policy says
DESPERATE_HEALTH = 15     # accept food with a single safe exit
MAINTENANCE_HEALTH = 40   # top up before it gets critical
HUNGRY_HEALTH = 60        # default pass when nothing better to do


def is_food_safe_to_eat(food: Coordinate, board: Board, you: Snake, snakes: Iterable[Snake]) -> bool:
    """
    Simulate eating `food` and check we are not trapped afterwards.

    The simulated snake has its head on the food, a frozen tail, one extra
    segment and full health. Each neighbor of the new head is tested for
    strict safety and for lenient flood-fill room of at least our new length.
    """
    grown = Snake(you.id, [food] + you.body, 100, you.length + 1)
    simulated = with_snake(snakes, grown)
    safe = strict_passable(board, grown, simulated)
    open_space = lenient_passable(board, grown, simulated)

    safe_count = 0
    spacious_count = 0
    for neighbor in food.neighbors():
        if not safe(neighbor):
            continue
        safe_count += 1
        if reachable_space(neighbor, board, open_space) >= grown.length:
            spacious_count += 1

    if you.health < DESPERATE_HEALTH:
        return safe_count >= 1
    return spacious_count >= 1 or safe_count >= 2


def find_nearest_food(board: Board, you: Snake, snakes: Iterable[Snake]) -> Optional[Coordinate]:
    """Closest (Manhattan) food that A* can reach and that we survive eating."""
    snakes = list(snakes)
    candidates = sorted(board.food, key=lambda f: (you.head.manhattan(f), f.x, f.y))
    for food in candidates:
        if find_path(you.head, food, board, you, snakes) is None:
            continue
        if is_food_safe_to_eat(food, board, you, snakes):
            return food
    return None


def should_seek_food(you: Snake, mode: GrowthMode) -> bool:
    if you.health < CRITICAL_HEALTH:
        return True
    if mode is GrowthMode.AVOID_GROWTH:
        return False
    return mode.wants_growth or you.health < MAINTENANCE_HEALTH


def should_top_up(you: Snake, mode: GrowthMode) -> bool:
    """Gate for the default feeding pass that runs after hunting."""
    return mode is not GrowthMode.AVOID_GROWTH and you.health < HUNGRY_HEALTH


def first_step(path: Optional[List[Coordinate]], head: Coordinate, allowed: Iterable[str]) -> Optional[str]:
    """Direction of path[1] from head, if it is one of the allowed moves."""
    if path is None or len(path) < 2:
        return None
    direction = direction_between(head, path[1])
    return direction if direction in allowed else None


def get_move_towards_food(board: Board, you: Snake, snakes: Iterable[Snake], allowed: List[str]) -> Optional[str]:
    snakes = list(snakes)
    target = find_nearest_food(board, you, snakes)
    if target is None:
        return None
    path = find_path(you.head, target, board, you, snakes)
    return first_step(path, you.head, allowed)
