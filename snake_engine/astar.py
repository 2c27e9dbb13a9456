import heapq
import itertools
from typing import Dict, Iterable, List, Optional

from snake_engine.grid import Passable, lenient_passable
from snake_engine.model import Board, Coordinate, Snake


def astar(start: Coordinate, goal: Coordinate, board: Board, passable: Passable) -> Optional[List[Coordinate]]:
    """
    Shortest 4-connected path from start to goal with unit step cost.

    The goal is always enterable even if passable() rejects it, so an
    occupied target such as a snake head can still be reached.

    Returns:
        path (list): start..goal inclusive, len(path) - 1 == cost; None when unreachable
    """
    # Heap entries: (f, h, insertion order, cell). Lower h wins f-ties.
    counter = itertools.count()
    h_start = start.manhattan(goal)
    open_heap = [(h_start, h_start, next(counter), start)]
    g_scores: Dict[Coordinate, int] = {start: 0}
    came_from: Dict[Coordinate, Coordinate] = {}
    closed = set()

    while open_heap:
        _, _, _, current = heapq.heappop(open_heap)
        if current == goal:
            return _reconstruct(came_from, current)
        if current in closed:
            continue
        closed.add(current)

        g = g_scores[current]
        for neighbor in current.neighbors():
            if not board.in_bounds(neighbor) or neighbor in closed:
                continue
            if neighbor != goal and not passable(neighbor):
                continue
            tentative = g + 1
            if tentative >= g_scores.get(neighbor, tentative + 1):
                continue
            g_scores[neighbor] = tentative
            came_from[neighbor] = current
            h = neighbor.manhattan(goal)
            heapq.heappush(open_heap, (tentative + h, h, next(counter), neighbor))

    return None


def _reconstruct(came_from: Dict[Coordinate, Coordinate], end: Coordinate) -> List[Coordinate]:
    path = [end]
    while path[-1] in came_from:
        path.append(came_from[path[-1]])
    path.reverse()
    return path


def find_path(start: Coordinate, goal: Coordinate, board: Board, you: Snake,
              snakes: Iterable[Snake]) -> Optional[List[Coordinate]]:
    """A* for `you` over the lenient obstacle layout (tails treated as vacated)."""
    return astar(start, goal, board, lenient_passable(board, you, snakes))
