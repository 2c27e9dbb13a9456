import pytest
from snake_engine.endgame import TRAPPED_SCORE, endgame_score, get_endgame_move, is_endgame
from snake_engine.model import Board, Coordinate, Snake


def make_snake(snake_id, cells, health=100):
    return Snake(snake_id, [Coordinate(x, y) for x, y in cells], health)


def duel_board():
    """
    7x5 board, long snake wrapped along the left edge. Moving left enters a
    two-cell pocket; up and right open onto the same 20-cell region.
    """
    you = make_snake("you", [(3, 1), (3, 0), (2, 0), (1, 0), (0, 0),
                             (0, 1), (0, 2), (0, 3), (0, 4), (1, 4)])
    opponent = make_snake("opp", [(6, 4), (6, 3), (6, 2)])
    board = Board(7, 5, hazards=[Coordinate(1, 2), Coordinate(2, 2)], snakes=[you, opponent])
    return board, you, opponent


def test_is_endgame():
    board, you, opponent = duel_board()
    assert is_endgame(board, you, board.snakes)

    short = make_snake("you", [(3, 1), (3, 0), (2, 0)])
    assert not is_endgame(Board(7, 5, snakes=[short, opponent]), short, [short, opponent])

    third = make_snake("third", [(5, 0), (6, 0)])
    assert not is_endgame(board, you, board.snakes + [third])
    assert not is_endgame(board, you, [you])


def test_trapped_move_scores_below_everything():
    board, you, opponent = duel_board()
    pocket = endgame_score(Coordinate(2, 1), board, you, opponent, board.snakes)
    assert pocket == TRAPPED_SCORE + 2

    # own space 20, opponent space 21, distance 5
    assert endgame_score(Coordinate(3, 2), board, you, opponent, board.snakes) == 20 - 3 * 21 - 2 * 5
    assert endgame_score(Coordinate(4, 1), board, you, opponent, board.snakes) == -53


@pytest.mark.parametrize("allowed, expected", [
    (["up", "left", "right"], "up"),     # up and right tie, earliest wins
    (["left", "right"], "right"),
    (["left"], "left"),                  # still returns the least bad move
])
def test_get_endgame_move(allowed, expected):
    board, you, _ = duel_board()
    assert get_endgame_move(board, you, board.snakes, allowed) == expected


def test_endgame_move_is_logged():
    board, you, _ = duel_board()
    lines = []
    get_endgame_move(board, you, board.snakes, ["up", "right"], log=lines.append)
    assert lines[-1].startswith("[Endgm] chose up")


def test_no_move_without_rival_or_candidates():
    board, you, _ = duel_board()
    assert get_endgame_move(board, you, [you], ["up"]) is None
    assert get_endgame_move(board, you, board.snakes, []) is None


if __name__ == "__main__":
    pytest.main([__file__])
