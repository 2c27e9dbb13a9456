"""
Bounded forward simulation of the duel with the nearest opponent.

Every snake other than the move under evaluation plays the greedy
"most room next turn" move. This is a 1-ply stand-in for the opponent,
not an adversarial search.
"""
from typing import Dict, Iterable, List, Optional, Tuple

from snake_engine.grid import lenient_passable
from snake_engine.model import Board, Snake, advance_snake, others
from snake_engine.move_validator import get_safe_moves
from snake_engine.observer import Observer, quiet
from snake_engine.space import reachable_space

# --- Constants ---
DEFAULT_PREDICTION_DEPTH = 3
MAX_PREDICTION_DEPTH = 5     # endgame
DEPTH_DECAY = 0.7
OWN_SPACE_WEIGHT = 1.0
OPPONENT_SPACE_WEIGHT = 2.5
ESCAPE_WEIGHT = 5.0


def greedy_space_move(board: Board, snake: Snake, snakes: List[Snake]) -> Optional[str]:
    """Safe move with the largest lenient flood fill; None if the snake has no safe move."""
    moves = get_safe_moves(board, snake, snakes)
    if not moves:
        return None
    passable = lenient_passable(board, snake, snakes)
    best_move, best_space = moves[0], 0
    for move in moves:
        space = reachable_space(snake.head.step(move), board, passable)
        if space > best_space:
            best_move, best_space = move, space
    return best_move


def escape_route_reduction(board: Board, opponent: Snake, snakes: List[Snake]) -> int:
    """
    How boxed in the opponent is: 0 with four roomy exits, up to 8 with none.

    Sums the shortfall below four of its safe moves and of its safe moves
    that open onto at least its own length of room.
    """
    safe_moves = get_safe_moves(board, opponent, snakes)
    passable = lenient_passable(board, opponent, snakes)
    spacious = sum(
        1 for move in safe_moves
        if reachable_space(opponent.head.step(move), board, passable) >= opponent.length
    )
    return max(0, (4 - len(safe_moves)) + (4 - spacious))


def simulate_turn(board: Board, snakes: List[Snake], moves: Dict[str, Optional[str]]) -> Tuple[Board, List[Snake]]:
    """
    Advance every snake by its move. Snakes with no move are dropped,
    eaten food is removed from the board.
    """
    moved = []
    for snake in snakes:
        move = moves.get(snake.id)
        if move is not None:
            moved.append(advance_snake(snake, move, board.food))
    heads = {snake.head for snake in moved}
    next_board = Board(
        width=board.width,
        height=board.height,
        food=board.food - heads,
        hazards=board.hazards,
        snakes=moved,
    )
    return next_board, moved


def _find(snakes: Iterable[Snake], snake_id: str) -> Optional[Snake]:
    for snake in snakes:
        if snake.id == snake_id:
            return snake
    return None


def predict_future_score(board: Board, you: Snake, opponent: Snake, snakes: List[Snake],
                         first_move: str, depth: int) -> float:
    total = 0.0
    weight = 1.0
    sim_board, sim_snakes = board, list(snakes)
    me, rival = you, opponent

    for turn in range(depth):
        my_move = first_move if turn == 0 else greedy_space_move(sim_board, me, sim_snakes)
        moves = {me.id: my_move}
        for other in others(me, sim_snakes):
            moves[other.id] = greedy_space_move(sim_board, other, sim_snakes)
        # Either side without a safe move has lost; nothing more to score.
        if my_move is None or moves.get(rival.id) is None:
            break

        sim_board, sim_snakes = simulate_turn(sim_board, sim_snakes, moves)
        me = _find(sim_snakes, you.id)
        rival = _find(sim_snakes, opponent.id)

        own_space = reachable_space(me.head, sim_board, lenient_passable(sim_board, me, sim_snakes))
        rival_space = reachable_space(rival.head, sim_board, lenient_passable(sim_board, rival, sim_snakes))
        escape = escape_route_reduction(sim_board, rival, sim_snakes)

        turn_score = (own_space * OWN_SPACE_WEIGHT
                      - rival_space * OPPONENT_SPACE_WEIGHT
                      + escape * ESCAPE_WEIGHT)
        total += turn_score * weight
        weight *= DEPTH_DECAY
    return total


def get_move_with_best_future_position(board: Board, you: Snake, snakes: Iterable[Snake],
                                       allowed: List[str], endgame: bool = False,
                                       log: Observer = quiet) -> Optional[str]:
    """
    Best allowed move by decayed multi-turn space control against the
    nearest opponent. None when there is nothing to evaluate.
    """
    snakes = list(snakes)
    rivals = others(you, snakes)
    if not allowed or not rivals:
        return None
    opponent = min(rivals, key=lambda s: you.head.manhattan(s.head))
    depth = MAX_PREDICTION_DEPTH if endgame else DEFAULT_PREDICTION_DEPTH

    best_move = None
    best_score = None
    for move in allowed:
        score = predict_future_score(board, you, opponent, snakes, move, depth)
        log(f"[Pred ] {move:<5} depth={depth} score={score:.2f}")
        if best_score is None or score > best_score:
            best_move, best_score = move, score
    return best_move
