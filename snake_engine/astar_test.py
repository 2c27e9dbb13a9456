import pytest
from snake_engine.astar import astar, find_path
from snake_engine.model import Board, Coordinate, Snake


def make_snake(snake_id, cells, health=100):
    return Snake(snake_id, [Coordinate(x, y) for x, y in cells], health)


def open_cells(board):
    return lambda c: board.in_bounds(c) and c not in board.hazards


def assert_valid_path(path, start, goal):
    assert path[0] == start
    assert path[-1] == goal
    for a, b in zip(path, path[1:]):
        assert a.manhattan(b) == 1


def test_straight_path_on_empty_board():
    board = Board(11, 11)
    start, goal = Coordinate(0, 0), Coordinate(3, 0)
    path = astar(start, goal, board, open_cells(board))
    assert path == [Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0), Coordinate(3, 0)]


def test_detour_around_wall():
    wall = [Coordinate(2, y) for y in range(4)]
    board = Board(5, 5, hazards=wall)
    start, goal = Coordinate(0, 0), Coordinate(4, 0)
    path = astar(start, goal, board, open_cells(board))
    assert_valid_path(path, start, goal)
    assert len(path) - 1 == 12
    assert Coordinate(2, 4) in path
    assert not set(path) & set(wall)


def test_no_path_is_none_not_empty():
    board = Board(5, 5, hazards=[Coordinate(3, 4), Coordinate(4, 3)])
    path = astar(Coordinate(0, 0), Coordinate(4, 4), board, open_cells(board))
    assert path is None


def test_start_is_goal():
    board = Board(3, 3)
    assert astar(Coordinate(1, 1), Coordinate(1, 1), board, open_cells(board)) == [Coordinate(1, 1)]


def test_goal_is_enterable_even_when_blocked():
    you = make_snake("you", [(0, 0), (0, 1), (0, 2)])
    other = make_snake("other", [(4, 0), (5, 0), (6, 0)])
    board = Board(11, 11, snakes=[you, other])
    path = find_path(you.head, other.head, board, you, board.snakes)
    assert_valid_path(path, you.head, other.head)
    assert len(path) - 1 == 4


def test_path_avoids_bodies_but_not_tails():
    # A vertical snake splits the board except for its tail cell at the bottom
    you = make_snake("you", [(0, 0), (0, 1), (0, 2)])
    wall = make_snake("wall", [(2, y) for y in range(4, -1, -1)])
    board = Board(5, 5, snakes=[you, wall])
    goal = Coordinate(4, 0)
    path = find_path(you.head, goal, board, you, board.snakes)
    assert_valid_path(path, you.head, goal)
    assert Coordinate(2, 0) in path
    assert len(path) - 1 == 4
    for cell in path[1:]:
        assert cell not in you.body[:-1]


def test_path_length_matches_manhattan_when_unobstructed():
    board = Board(11, 11)
    for goal in [Coordinate(10, 10), Coordinate(0, 7), Coordinate(6, 2)]:
        start = Coordinate(3, 3)
        path = astar(start, goal, board, open_cells(board))
        assert_valid_path(path, start, goal)
        assert len(path) - 1 == start.manhattan(goal)


if __name__ == "__main__":
    pytest.main([__file__])
