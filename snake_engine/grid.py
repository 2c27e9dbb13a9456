import numpy as np
from typing import Callable, Iterable

from snake_engine.model import Board, Coordinate, Snake

Passable = Callable[[Coordinate], bool]


def _mark(grid, board: Board, cells: Iterable[Coordinate]):
    for cell in cells:
        if board.in_bounds(cell):
            grid[cell.y, cell.x] = True


def strict_blocked_grid(board: Board, you: Snake, snakes: Iterable[Snake]) -> np.ndarray:
    """
    Cells a head may not enter next turn, indexed [y, x].

    Own tail is free unless it sits on food (eating freezes the tail),
    other bodies are fully blocked, and so is every cell next to the head
    of an opponent at least as long as us.
    """
    grid = np.zeros((board.height, board.width), dtype=bool)
    _mark(grid, board, board.hazards)

    _mark(grid, board, you.body[:-1])
    if you.tail in board.food:
        _mark(grid, board, [you.tail])

    for snake in snakes:
        if snake.id == you.id:
            continue
        _mark(grid, board, snake.body)
        if snake.length >= you.length:
            _mark(grid, board, snake.head.neighbors())
    return grid


def lenient_blocked_grid(board: Board, you: Snake, snakes: Iterable[Snake]) -> np.ndarray:
    """Blocked cells for lookahead: every snake's last segment counts as vacated."""
    grid = np.zeros((board.height, board.width), dtype=bool)
    _mark(grid, board, board.hazards)
    _mark(grid, board, you.body[:-1])
    for snake in snakes:
        if snake.id != you.id:
            _mark(grid, board, snake.body[:-1])
    return grid


def _as_predicate(board: Board, blocked: np.ndarray) -> Passable:
    def passable(cell: Coordinate) -> bool:
        return board.in_bounds(cell) and not blocked[cell.y, cell.x]
    return passable


def strict_passable(board: Board, you: Snake, snakes: Iterable[Snake]) -> Passable:
    return _as_predicate(board, strict_blocked_grid(board, you, snakes))


def lenient_passable(board: Board, you: Snake, snakes: Iterable[Snake]) -> Passable:
    return _as_predicate(board, lenient_blocked_grid(board, you, snakes))
