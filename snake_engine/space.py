from collections import deque
from typing import Iterable

from snake_engine.grid import Passable, lenient_passable, strict_passable
from snake_engine.model import Board, Coordinate, Snake


def reachable_space(start: Coordinate, board: Board, passable: Passable) -> int:
    """
    Count cells reachable from start through 4-connected passable cells.

    The start cell always counts, so a fully enclosed cell returns 1.
    The search stops after board.area cells.
    """
    visited = {start}
    queue = deque([start])
    count = 0
    max_cells = board.area

    while queue and count < max_cells:
        current = queue.popleft()
        count += 1
        for neighbor in current.neighbors():
            if neighbor not in visited and passable(neighbor):
                visited.add(neighbor)
                queue.append(neighbor)
    return count


def strict_space(start: Coordinate, board: Board, you: Snake, snakes: Iterable[Snake]) -> int:
    return reachable_space(start, board, strict_passable(board, you, snakes))


def lenient_space(start: Coordinate, board: Board, you: Snake, snakes: Iterable[Snake]) -> int:
    return reachable_space(start, board, lenient_passable(board, you, snakes))
